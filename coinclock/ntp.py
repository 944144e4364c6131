"""Network time lookup over the simple NTP request/response exchange."""

from __future__ import annotations

import socket
import time
from datetime import datetime, timezone

NTP_PACKET_SIZE = 48
NTP_PORT = 123
NTP_UNIX_OFFSET = 2_208_988_800
SECS_PER_HOUR = 3600

DEFAULT_SERVER = "cz.pool.ntp.org"
DEFAULT_TIME_ZONE = 1
DEFAULT_TIMEOUT = 1.5

_TRANSMIT_OFFSET = 40


class NtpError(Exception):
    """Raised when network time cannot be obtained or understood."""


def build_request() -> bytes:
    """Return the 48-byte client request packet."""
    packet = bytearray(NTP_PACKET_SIZE)
    # LI, version, mode; stratum; polling interval; peer clock precision
    packet[0:4] = bytes((0b11100011, 0, 6, 0xEC))
    # reference identifier
    packet[12:16] = bytes((49, 0x4E, 49, 52))
    return bytes(packet)


def parse_response(packet: bytes, time_zone: int = DEFAULT_TIME_ZONE) -> int:
    """Return the local Unix time carried in a server response packet."""
    if len(packet) < NTP_PACKET_SIZE:
        raise NtpError(
            f"NTP response too short: {len(packet)} bytes, need {NTP_PACKET_SIZE}"
        )
    seconds_since_1900 = int.from_bytes(
        packet[_TRANSMIT_OFFSET:_TRANSMIT_OFFSET + 4], "big"
    )
    return seconds_since_1900 - NTP_UNIX_OFFSET + time_zone * SECS_PER_HOUR


def get_ntp_time(
    server: str = DEFAULT_SERVER,
    time_zone: int = DEFAULT_TIME_ZONE,
    port: int = NTP_PORT,
    timeout: float = DEFAULT_TIMEOUT,
) -> int:
    """Ask a time server for the current time and return it as local Unix time."""
    try:
        address = socket.gethostbyname(server)
    except OSError as exc:
        raise NtpError(f"cannot resolve NTP server {server!r}") from exc

    deadline = time.monotonic() + timeout
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            sock.sendto(build_request(), (address, port))
        except OSError as exc:
            raise NtpError(f"cannot send NTP request to {server!r}") from exc

        while (remaining := deadline - time.monotonic()) > 0:
            sock.settimeout(remaining)
            try:
                data = sock.recv(1024)
            except TimeoutError:
                break
            except OSError as exc:
                raise NtpError(f"error receiving from {server!r}") from exc
            if len(data) >= NTP_PACKET_SIZE:
                return parse_response(data, time_zone)

    raise NtpError(f"no NTP response from {server!r}")


def format_clock(timestamp: int) -> str:
    """Format a local Unix time as 'day.month.year HH:MM:SS'."""
    moment = datetime.fromtimestamp(timestamp, timezone.utc)
    return (
        f"{moment.day}.{moment.month}.{moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )