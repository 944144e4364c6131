"""The ticker loop: keep the clock on screen and refresh the price periodically."""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .display import render_screen
from .logo import render_logo
from .ntp import DEFAULT_SERVER, DEFAULT_TIME_ZONE, SECS_PER_HOUR, NtpError, get_ntp_time
from .price import PriceError, fetch_price

log = logging.getLogger(__name__)

DEFAULT_URL = (
    "https://api.coingecko.com/api/v3/simple/price"
    "?ids=bitcoin&vs_currencies=usd&precision=2"
)
DEFAULT_INTERVAL_MS = 60_000
DEFAULT_SYNC_INTERVAL = 150
_LOGO_DELAY = 2.0
_POLL_DELAY = 0.05


@dataclass(frozen=True)
class Config:
    """Settings for the ticker."""

    url: str = DEFAULT_URL
    coin: str = "bitcoin"
    vs_currency: str = "usd"
    crypto: str = "BTC"
    currency: str = "USD"
    symbol: str = "$"
    interval_ms: int = DEFAULT_INTERVAL_MS
    ntp_server: str = DEFAULT_SERVER
    time_zone: int = DEFAULT_TIME_ZONE
    sync_interval: int = DEFAULT_SYNC_INTERVAL

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        if self.sync_interval <= 0:
            raise ValueError("sync_interval must be positive")


class Ticker:
    """Redraws the screen each second and fetches the price on a schedule."""

    def __init__(
        self,
        config: Config,
        clock: Callable[[], int],
        fetch: Optional[Callable[[str], float]] = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.clock = clock
        self.fetch = fetch or (
            lambda url: fetch_price(url, config.coin, config.vs_currency)
        )
        self.output = output
        self.price = 0.0
        self._shown: Optional[int] = None
        self._next_request_ms: Optional[int] = None

    def tick(self, now_ms: int) -> None:
        """Run one pass of the loop at the given millisecond count."""
        if self.clock() != self._shown:
            self.draw()
        if self._next_request_ms is None or self._next_request_ms < now_ms:
            self.refresh_price()
            log.info("Wait %d millis before next round...", self.config.interval_ms)
            self._next_request_ms = now_ms + self.config.interval_ms

    def refresh_price(self) -> float:
        """Fetch a new price; on failure the previous price is kept."""
        try:
            self.price = self.fetch(self.config.url)
        except PriceError as exc:
            log.warning("price update failed: %s", exc)
        return self.price

    def draw(self) -> str:
        """Render the screen for the current time, send it to the output and return it."""
        timestamp = self.clock()
        screen = render_screen(
            timestamp,
            self.config.crypto,
            self.config.currency,
            self.config.symbol,
            self.price,
        )
        self._shown = timestamp
        self.output(screen)
        return screen


class _SyncedClock:
    """Local time kept from periodic network-time syncs and the monotonic clock."""

    def __init__(self, server: str, time_zone: int, sync_interval: int) -> None:
        self._server = server
        self._time_zone = time_zone
        self._sync_interval = sync_interval
        self._base: Optional[int] = None
        self._base_mono = 0.0
        self._last_attempt: Optional[float] = None

    def __call__(self) -> int:
        mono = time.monotonic()
        if self._last_attempt is None or mono - self._last_attempt >= self._sync_interval:
            self._last_attempt = mono
            try:
                self._base = get_ntp_time(self._server, self._time_zone)
                self._base_mono = mono
            except NtpError as exc:
                log.warning("%s", exc)
                if self._base is None:
                    self._base = int(time.time()) + self._time_zone * SECS_PER_HOUR
                    self._base_mono = mono
        return self._base + int(mono - self._base_mono)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the logo, then run the ticker until interrupted."""
    defaults = Config()
    parser = argparse.ArgumentParser(prog="coinclock", description=__doc__)
    parser.add_argument("--url", default=defaults.url)
    parser.add_argument("--coin", default=defaults.coin)
    parser.add_argument("--vs-currency", default=defaults.vs_currency)
    parser.add_argument("--crypto", default=defaults.crypto)
    parser.add_argument("--currency", default=defaults.currency)
    parser.add_argument("--symbol", default=defaults.symbol)
    parser.add_argument("--interval", type=_positive_int, default=defaults.interval_ms,
                        help="milliseconds between price requests")
    parser.add_argument("--ntp-server", default=defaults.ntp_server)
    parser.add_argument("--time-zone", type=int, default=defaults.time_zone)
    parser.add_argument("--once", action="store_true",
                        help="fetch the price, draw one screen and exit")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    config = Config(
        url=args.url,
        coin=args.coin,
        vs_currency=args.vs_currency,
        crypto=args.crypto,
        currency=args.currency,
        symbol=args.symbol,
        interval_ms=args.interval,
        ntp_server=args.ntp_server,
        time_zone=args.time_zone,
    )
    clock = _SyncedClock(config.ntp_server, config.time_zone, config.sync_interval)
    ticker = Ticker(config, clock)

    if args.once:
        ticker.refresh_price()
        ticker.draw()
        return 0

    print(render_logo())
    time.sleep(_LOGO_DELAY)
    ticker.draw()
    start = time.monotonic()
    try:
        while True:
            ticker.tick(int((time.monotonic() - start) * 1000))
            time.sleep(_POLL_DELAY)
    except KeyboardInterrupt:
        return 0