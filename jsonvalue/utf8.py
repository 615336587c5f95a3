"""UTF-8 encoding and validation helpers."""

from __future__ import annotations

from collections.abc import Iterator

MAX_CODEPOINT = 0x10FFFF

_LEAD_MASKS = {2: 0x1F, 3: 0x0F, 4: 0x07}
_MIN_FOR_SIZE = {2: 0x80, 3: 0x800, 4: 0x10000}


class Utf8Error(ValueError):
    """Raised for invalid UTF-8 data or code points outside Unicode."""


def encode(codepoint: int) -> bytes:
    """Encode a code point as UTF-8 bytes.

    Surrogate code points are encoded like any other value below 0x10000.
    """
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        raise Utf8Error(f"code point out of range: {codepoint:#x}")
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)))
    if codepoint < 0x10000:
        return bytes(
            (
                0xE0 | (codepoint >> 12),
                0x80 | ((codepoint >> 6) & 0x3F),
                0x80 | (codepoint & 0x3F),
            )
        )
    return bytes(
        (
            0xF0 | (codepoint >> 18),
            0x80 | ((codepoint >> 12) & 0x3F),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        )
    )


def check_first(byte: int) -> int:
    """Return the sequence length announced by a lead byte, or 0 if it cannot lead."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    if byte < 0x80:
        return 1
    if byte <= 0xBF:
        # continuation byte
        return 0
    if byte in (0xC0, 0xC1):
        # overlong encoding of an ASCII byte
        return 0
    if byte <= 0xDF:
        return 2
    if byte <= 0xEF:
        return 3
    if byte <= 0xF4:
        return 4
    return 0


def check_full(data: bytes) -> int:
    """Decode one complete multi-byte sequence and return its code point."""
    data = bytes(data)
    size = len(data)
    mask = _LEAD_MASKS.get(size)
    if mask is None:
        raise Utf8Error(f"invalid multi-byte sequence length: {size}")

    value = data[0] & mask
    for byte in data[1:]:
        if not 0x80 <= byte <= 0xBF:
            raise Utf8Error("expected a continuation byte")
        value = (value << 6) + (byte & 0x3F)

    if value > MAX_CODEPOINT:
        raise Utf8Error("code point not in Unicode range")
    if 0xD800 <= value <= 0xDFFF:
        raise Utf8Error("UTF-16 surrogate half")
    if value < _MIN_FOR_SIZE[size]:
        raise Utf8Error("overlong encoding")
    return value


def iterate(data: bytes) -> Iterator[int]:
    """Yield the code points of UTF-8 data, raising Utf8Error at the first fault."""
    data = bytes(data)
    length = len(data)
    pos = 0
    while pos < length:
        count = check_first(data[pos])
        if count == 0:
            raise Utf8Error(f"invalid lead byte at offset {pos}")
        if count == 1:
            yield data[pos]
        else:
            if pos + count > length:
                raise Utf8Error(f"truncated sequence at offset {pos}")
            yield check_full(data[pos : pos + count])
        pos += count


def check_string(data: bytes) -> bool:
    """Return True if the data is valid UTF-8."""
    try:
        for _ in iterate(data):
            pass
    except Utf8Error:
        return False
    return True