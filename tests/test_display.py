import pytest

from coinclock.display import render_screen
from coinclock.ntp import format_clock


def test_screen_has_three_lines():
    screen = render_screen(1_700_000_000, "BTC", "USD", "$", 42.0)
    assert len(screen.split("\n")) == 3


def test_first_line_is_clock():
    ts = 1_700_000_000
    screen = render_screen(ts, "BTC", "USD", "$", 42.0)
    assert screen.split("\n")[0] == format_clock(ts)


def test_pair_line():
    screen = render_screen(0, "ETH", "EUR", "E", 1.0)
    assert screen.split("\n")[1] == "ETH/EUR"


@pytest.mark.parametrize(
    "price, text",
    [(1234.5, "$ 1234.50"), (0.0, "$ 0.00"), (7.126, "$ 7.13")],
)
def test_price_line_two_decimals(price, text):
    screen = render_screen(0, "BTC", "USD", "$", price)
    assert screen.split("\n")[2] == text


def test_clock_changes_with_timestamp():
    first = render_screen(100, "BTC", "USD", "$", 1.0)
    second = render_screen(101, "BTC", "USD", "$", 1.0)
    assert first.split("\n")[0] != second.split("\n")[0]
    assert first.split("\n")[1:] == second.split("\n")[1:]