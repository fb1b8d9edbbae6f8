"""Bit, byte and word helpers with fixed-width integer semantics."""

from __future__ import annotations

from typing import Union

FLOAT_PRECISION = 1e-6

CharLike = Union[str, int]


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def limit(lower, v, upper):
    """Clamp ``v`` into the range [lower, upper]."""
    if v < lower:
        return lower
    if v > upper:
        return upper
    return v


def bitset(value: int, n: int) -> int:
    """``value`` with bit ``n`` set."""
    return value | (1 << n)


def bitclr(value: int, n: int) -> int:
    """``value`` with bit ``n`` cleared."""
    return value & ~(1 << n)


def bitget(value: int, n: int) -> int:
    """Bit ``n`` of ``value``, left in its place (0 if clear)."""
    return value & (1 << n)


def makeword(h: int, l: int) -> int:
    """A 16-bit word from a high and a low byte."""
    return (((h & 0xFFFF) << 8) | (l & 0xFF)) & 0xFFFF


def hibyte(w: int) -> int:
    """High byte of a 16-bit word."""
    return ((w & 0xFFFF) >> 8) & 0xFF


def lobyte(w: int) -> int:
    """Low byte of a word."""
    return w & 0xFF


def makelong(h: int, l: int) -> int:
    """A signed 32-bit value from a high and a low 16-bit word."""
    return _wrap_signed((_wrap_signed(h, 32) << 16) | (l & 0xFFFF), 32)


def hiword(n: int) -> int:
    """High 16-bit word of a 32-bit value."""
    return (_wrap_signed(n, 32) >> 16) & 0xFFFF


def loword(n: int) -> int:
    """Low 16-bit word of a value."""
    return n & 0xFFFF


def makeint64(h: int, l: int) -> int:
    """A signed 64-bit value from a high and a low 32-bit half."""
    return _wrap_signed((_wrap_signed(h, 64) << 32) | (l & 0xFFFFFFFF), 64)


def hiint(n: int) -> int:
    """High half of a 64-bit value as a signed 32-bit integer."""
    return _wrap_signed(_wrap_signed(n, 64) >> 32, 32)


def loint(n: int) -> int:
    """Low half of a value as a signed 32-bit integer."""
    return _wrap_signed(n & 0xFFFFFFFF, 32)


def make_fourcc(a: CharLike, b: CharLike, c: CharLike, d: CharLike) -> int:
    """A 32-bit four-character code with ``a`` in the highest byte."""
    a, b, c, d = (_code(x) & 0xFFFFFFFF for x in (a, b, c, d))
    return (d | (c << 8) | (b << 16) | (a << 24)) & 0xFFFFFFFF


def is_hex(c: CharLike) -> bool:
    """True if ``c`` is an ASCII hexadecimal digit."""
    code = _code(c)
    return (
        ord("0") <= code <= ord("9")
        or ord("a") <= code <= ord("f")
        or ord("A") <= code <= ord("F")
    )


def float_equal_zero(f: float) -> bool:
    """True if ``f`` lies within the float precision of zero."""
    return abs(f) < FLOAT_PRECISION