# coinclock

A small terminal ticker that shows the current price of a cryptocurrency
next to a clock kept in step with an NTP server.

When the screen is due, three lines are printed: the date and time, the
trading pair (for example `BTC/USD`) and the latest price with its
currency symbol and two decimals. The price is fetched from a JSON price
API once per interval, which is one minute by default. The clock comes
from an NTP server and is shifted by a time-zone offset given in hours.
A bitmap logo is printed as text before the first screen.

## Installation

```
pip install .
```

No third-party libraries are needed. Python 3.10 or newer is required.

## Usage

Start the ticker:

```
coinclock
```

It runs until you stop it with Ctrl+C. Each time the clock moves on to a
new second, a fresh screen is printed to standard output. Progress and
warnings are logged to standard error.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--url` | CoinGecko simple-price URL for bitcoin in USD | price API to request |
| `--coin` | `bitcoin` | key of the coin in the JSON answer |
| `--vs-currency` | `usd` | key of the currency in the JSON answer |
| `--crypto` | `BTC` | coin name shown on screen |
| `--currency` | `USD` | currency name shown on screen |
| `--symbol` | `$` | currency symbol shown before the price |
| `--interval` | `60000` | milliseconds between price requests (must be positive) |
| `--ntp-server` | `cz.pool.ntp.org` | NTP server to ask for the time |
| `--time-zone` | `1` | offset from UTC in hours |
| `--once` | off | fetch the price, print one screen and exit |

The clock asks the NTP server for the time at start-up and again every
150 seconds, and counts the seconds in between itself. If the very first
request gets no answer, it starts from the system clock plus the
time-zone offset instead. If fetching the price fails, the previous price
stays on screen (it is `0.00` until the first successful fetch).

The price request does not verify the server's TLS certificate. Answers
with status 200 or 301 are accepted. The JSON must have the form
`{"<coin>": {"<vs-currency>": <number>}}`.

## Using it as a library

The building blocks can also be used on their own.

```python
from coinclock.ntp import build_request, parse_response, get_ntp_time, format_clock
from coinclock.price import parse_price, fetch_price
from coinclock.logo import logo_rows, render_logo
from coinclock.display import render_screen

# Ask an NTP server for the time, shifted to UTC+1.
timestamp = get_ntp_time("pool.ntp.org", 1, 123, 1.5)
print(format_clock(timestamp))          # e.g. "5.3.2024 14:07:09"

# Read a price from a JSON payload.
price = parse_price('{"bitcoin": {"usd": 12345.67}}', "bitcoin", "usd")

# Draw the whole screen as text.
print(render_screen(timestamp, "BTC", "USD", "$", price))

# Draw the 128x64 logo with custom characters for set and clear pixels.
print(render_logo("#", " "))
```

- `build_request()` returns the 48-byte NTP client request, and
  `parse_response(packet, time_zone)` turns a server answer into local
  Unix time. `parse_response` and `get_ntp_time` raise
  `coinclock.ntp.NtpError` when the answer is too short, the server cannot
  be reached or resolved, or no answer comes back in time.
- `format_clock(timestamp)` writes the date without leading zeros and the
  time as `HH:MM:SS`.
- `parse_price` and `fetch_price` raise `coinclock.price.PriceError` when
  the payload cannot be read, holds no number at the expected place, or
  the request fails.
- `logo_rows()` gives the logo as 64 rows of 16 bytes, most significant
  bit leftmost; `render_logo` raises `ValueError` unless both characters
  are single characters.

For finer control, `coinclock.app.Ticker` takes a `coinclock.app.Config`,
a clock (a function returning the current local Unix time in seconds), an
optional price-fetching function taking the URL, and an output function
that receives each screen as a string (`print` by default). Call
`tick(now_ms)` with a millisecond count: it redraws the screen when the
clock shows a different second from the last screen, and refreshes the
price on the first call and whenever the interval has passed.
`refresh_price()` and `draw()` can also be called directly.

```python
from coinclock.app import Config, Ticker

screens = []
ticker = Ticker(Config(), clock=lambda: 1_700_000_000,
                fetch=lambda url: 42000.0, output=screens.append)
ticker.tick(0)
```

## What it does not do

The screen is plain text printed line after line; there is no display
driver, no in-place redrawing and no graphical window. Only one price
pair is tracked at a time, and prices are not stored anywhere.

## Running the tests

```
pip install .[test]
pytest
```