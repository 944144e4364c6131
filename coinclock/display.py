"""Text rendering of the ticker screen: clock, trading pair and price."""

from __future__ import annotations

from .ntp import format_clock


def render_screen(
    timestamp: int,
    crypto: str,
    currency: str,
    symbol: str,
    price: float,
) -> str:
    """Return the screen contents as three lines of text.

    The first line is the clock, the second the trading pair and the third
    the price with its currency symbol, printed with two decimals.
    """
    lines = (
        format_clock(timestamp),
        f"{crypto}/{currency}",
        f"{symbol} {price:.2f}",
    )
    return "\n".join(lines)