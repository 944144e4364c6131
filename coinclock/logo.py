"""The 128x64 monochrome start-up logo."""

from __future__ import annotations

LOGO_WIDTH = 128
LOGO_HEIGHT = 64
_ROW_BYTES = LOGO_WIDTH // 8

# Each row: (number of leading blank bytes, hex of the inked bytes).
_LOGO_SPANS = (
    (7, "3ff8"),
    (6, "03ffffc0"),
    (6, "0ffffff0"),
    (6, "7ffffffe"),
    (6, "ffffffff"),
    (5, "03ffffffffc0"),
    (5, "07ffffffffe0"),
    (5, "1ffffffffff8"),
    (5, "3ffffffffffc"),
    (5, "7ffffffffffc"),
    (5, "ffffffffffff"),
    (5, "fffffc5fffff"),
    (4, "01fffffc3bffff80"),
    (4, "03fffffc307fffc0"),
    (4, "07fffff830ffffe0"),
    (4, "07fffc78707fffe0"),
    (4, "0ffff80870fffff0"),
    (4, "1ffff80020fffff8"),
    (4, "1ffff80001fffff8"),
    (4, "1ffffe0000fffff8"),
    (4, "3fffff80003ffffc"),
    (4, "3fffff80000ffffc"),
    (4, "7fffff80c007fffc"),
    (4, "7fffff80f803fffe"),
    (4, "7fffff01fc03fffe"),
    (4, "7fffff01fe03fffe"),
    (4, "ffffff01fe01ffff"),
    (4, "7ffffe01fe03fffe"),
    (4, "ffffff03fc03ffff"),
    (4, "fffffe002003ffff"),
    (4, "fffffe000007ffff"),
    (4, "fffffc00000fffff"),
    (4, "fffffc00001fffff"),
    (4, "fffffc07801fffff"),
    (4, "fffffc07e007fffe"),
    (4, "fffff807f807ffff"),
    (4, "7ffffc0ffc07fffe"),
    (4, "ffffa80ffc03ffff"),
    (4, "7fff000ffc03fffe"),
    (4, "7fff000ff807fffe"),
    (4, "7ffe0005f007fffe"),
    (4, "3fff00000007fffc"),
    (4, "3fffc0000007fffc"),
    (4, "3ffffc00000ffffc"),
    (4, "1ffffc00001ffff8"),
    (4, "1ffffc38003ffff8"),
    (4, "1ffffc3065fffff0"),
    (4, "0ffff870fffffff0"),
    (4, "07fff830ffffffe0"),
    (4, "07fff870ffffffc0"),
    (4, "03ffffe1ffffffc0"),
    (4, "01fffff9ffffff80"),
    (5, "ffffffffffff"),
    (5, "fffffffffffe"),
    (5, "3ffffffffffe"),
    (5, "3ffffffffff8"),
    (5, "0ffffffffff0"),
    (5, "07ffffffffe0"),
    (5, "03ffffffffc0"),
    (6, "ffffffff"),
    (6, "3ffffffc"),
    (6, "0ffffff0"),
    (6, "01ffff80"),
    (7, "1fe8"),
)

_ROWS = tuple(
    (bytes(blank) + bytes.fromhex(ink)).ljust(_ROW_BYTES, b"\x00")
    for blank, ink in _LOGO_SPANS
)


def logo_rows() -> tuple[bytes, ...]:
    """Return the logo as 64 rows of 16 bytes, most significant bit leftmost."""
    return _ROWS


def render_logo(on: str = "#", off: str = " ") -> str:
    """Draw the logo as text, one line per pixel row."""
    if len(on) != 1 or len(off) != 1:
        raise ValueError("on and off must each be a single character")
    lines = (
        "".join(
            on if byte & (0x80 >> bit) else off
            for byte in row
            for bit in range(8)
        )
        for row in _ROWS
    )
    return "\n".join(lines)