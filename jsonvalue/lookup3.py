"""The lookup3 "hashlittle" 32-bit hash function."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK; a ^= _rot(c, 4); c = (c + b) & _MASK
    b = (b - a) & _MASK; b ^= _rot(a, 6); a = (a + c) & _MASK
    c = (c - b) & _MASK; c ^= _rot(b, 8); b = (b + a) & _MASK
    a = (a - c) & _MASK; a ^= _rot(c, 16); c = (c + b) & _MASK
    b = (b - a) & _MASK; b ^= _rot(a, 19); a = (a + c) & _MASK
    c = (c - b) & _MASK; c ^= _rot(b, 4); b = (b + a) & _MASK
    return a, b, c


def _final(a: int, b: int, c: int) -> int:
    c ^= b; c = (c - _rot(b, 14)) & _MASK
    a ^= c; a = (a - _rot(c, 11)) & _MASK
    b ^= a; b = (b - _rot(a, 25)) & _MASK
    c ^= b; c = (c - _rot(b, 16)) & _MASK
    a ^= c; a = (a - _rot(c, 4)) & _MASK
    b ^= a; b = (b - _rot(a, 14)) & _MASK
    c ^= b; c = (c - _rot(b, 24)) & _MASK
    return c


def _words(block: bytes) -> tuple[int, int, int]:
    return (
        int.from_bytes(block[0:4], "little"),
        int.from_bytes(block[4:8], "little"),
        int.from_bytes(block[8:12], "little"),
    )


def hashlittle(key: bytes | bytearray | memoryview | str, initval: int = 0) -> int:
    """Hash a byte string into a 32-bit value.

    A str key is hashed as its UTF-8 encoding.
    """
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    length = len(data)
    a = b = c = (0xDEADBEEF + length + initval) & _MASK

    offset = 0
    while length - offset > 12:
        wa, wb, wc = _words(data[offset : offset + 12])
        a, b, c = _mix((a + wa) & _MASK, (b + wb) & _MASK, (c + wc) & _MASK)
        offset += 12

    tail = data[offset:]
    if not tail:
        # zero length requires no mixing
        return c

    wa, wb, wc = _words(tail.ljust(12, b"\x00"))
    return _final((a + wa) & _MASK, (b + wb) & _MASK, (c + wc) & _MASK)