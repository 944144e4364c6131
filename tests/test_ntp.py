import socket
import threading
from contextlib import contextmanager
from datetime import datetime, timezone

import pytest

from coinclock import ntp


def _response(seconds_since_1900: int) -> bytes:
    packet = bytearray(ntp.NTP_PACKET_SIZE)
    packet[40:44] = seconds_since_1900.to_bytes(4, "big")
    return bytes(packet)


@contextmanager
def _udp_server(replies):
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    received = []

    def serve():
        try:
            data, addr = sock.recvfrom(1024)
        except OSError:
            return
        received.append(data)
        for reply in replies:
            sock.sendto(reply, addr)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    try:
        yield sock.getsockname()[1], received
    finally:
        thread.join(timeout=5)
        sock.close()


def test_request_layout():
    packet = ntp.build_request()
    assert len(packet) == ntp.NTP_PACKET_SIZE
    assert packet[0] == 0b11100011
    assert packet[1] == 0
    assert packet[2] == 6
    assert packet[3] == 0xEC
    assert packet[12:16] == bytes((49, 0x4E, 49, 52))
    assert packet[4:12] == bytes(8)
    assert packet[16:] == bytes(32)


def test_parse_response_round_trip():
    packet = _response(ntp.NTP_UNIX_OFFSET + 1_000_000)
    assert ntp.parse_response(packet, 0) == 1_000_000


def test_parse_response_time_zone_shift():
    packet = _response(ntp.NTP_UNIX_OFFSET + 5000)
    shifted = ntp.parse_response(packet, 1)
    base = ntp.parse_response(packet, 0)
    assert shifted - base == ntp.SECS_PER_HOUR


def test_parse_response_ignores_extra_bytes():
    packet = _response(ntp.NTP_UNIX_OFFSET + 42) + b"\xff" * 10
    assert ntp.parse_response(packet, 0) == 42


def test_parse_response_short_packet():
    with pytest.raises(ntp.NtpError):
        ntp.parse_response(bytes(47), 0)


def test_get_ntp_time_from_local_server():
    reply = _response(ntp.NTP_UNIX_OFFSET + 1_700_000_000)
    with _udp_server([reply]) as (port, received):
        result = ntp.get_ntp_time("127.0.0.1", 0, port, 2.0)
    assert result == 1_700_000_000
    assert received == [ntp.build_request()]


def test_get_ntp_time_skips_short_packets():
    reply = _response(ntp.NTP_UNIX_OFFSET + 123_456)
    with _udp_server([b"short", reply]) as (port, _received):
        result = ntp.get_ntp_time("127.0.0.1", 0, port, 2.0)
    assert result == 123_456


def test_get_ntp_time_times_out():
    with _udp_server([]) as (port, received):
        with pytest.raises(ntp.NtpError):
            ntp.get_ntp_time("127.0.0.1", 0, port, 0.3)
    assert received == [ntp.build_request()]


def test_format_clock_epoch():
    assert ntp.format_clock(0) == "1.1.1970 00:00:00"


def test_format_clock_pads_time_only():
    stamp = int(datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc).timestamp())
    assert ntp.format_clock(stamp) == "5.3.2024 07:08:09"


def test_format_clock_known_value():
    assert ntp.format_clock(1_700_000_000) == "14.11.2023 22:13:20"