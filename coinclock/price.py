"""Fetching and decoding the current coin price from a JSON price service."""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request

DEFAULT_COIN = "bitcoin"
DEFAULT_CURRENCY = "usd"
DEFAULT_TIMEOUT = 10.0

_ACCEPTED_STATUS = (200, 301)


class PriceError(Exception):
    """Raised when a price cannot be fetched or decoded."""


def parse_price(
    payload: str | bytes,
    coin: str = DEFAULT_COIN,
    currency: str = DEFAULT_CURRENCY,
) -> float:
    """Return the price of ``coin`` in ``currency`` from a JSON document."""
    try:
        document = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PriceError(f"invalid price document: {exc}") from exc

    try:
        value = document[coin][currency]
    except (KeyError, TypeError) as exc:
        raise PriceError(f"no {coin}/{currency} price in document") from exc

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PriceError(f"{coin}/{currency} price is not a number: {value!r}")
    return float(value)


def fetch_price(
    url: str,
    coin: str = DEFAULT_COIN,
    currency: str = DEFAULT_CURRENCY,
    timeout: float = DEFAULT_TIMEOUT,
) -> float:
    """Request ``url`` and return the price it reports.

    Certificates are not verified, matching a client that trusts any server.
    """
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE

    try:
        with urllib.request.urlopen(url, timeout=timeout, context=context) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise PriceError(f"HTTP {exc.code} from {url}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise PriceError(f"request to {url} failed: {exc}") from exc

    if status not in _ACCEPTED_STATUS:
        raise PriceError(f"HTTP {status} from {url}")
    return parse_price(body, coin, currency)