"""Powers of two and little-endian base-128 varints."""

from __future__ import annotations

from typing import Tuple

MAX_VARINT_BYTES = 10


def floor2e(num: int) -> int:
    """Largest power of two not above ``num``; 1 for 0 and 1."""
    if num < 0:
        raise ValueError("num must not be negative")
    return 1 << max(num.bit_length() - 1, 0)


def ceil2e(num: int) -> int:
    """Smallest power of two not below ``num``; 1 for 0 and 1."""
    if num < 0:
        raise ValueError("num must not be negative")
    if num <= 1:
        return 1
    return 1 << (num - 1).bit_length()


def varint_encode(value: int) -> bytes:
    """Encode a non-negative integer, seven bits per byte, low bits first."""
    if value < 0:
        raise ValueError("value must not be negative")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        out.append(byte if value == 0 else byte | 0x80)
        if value == 0:
            return bytes(out)


def _to_int64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


def varint_decode(buf: bytes) -> Tuple[int, int]:
    """Decode a varint at the start of ``buf``; return (value, bytes consumed)."""
    data = bytes(buf)
    result = 0
    bits = 0
    for count, byte in enumerate(data[:MAX_VARINT_BYTES], 1):
        result |= (byte & 0x7F) << bits
        if not byte & 0x80:
            return _to_int64(result), count
        bits += 7
    if len(data) < MAX_VARINT_BYTES:
        raise ValueError("truncated varint")
    raise ValueError(f"varint longer than {MAX_VARINT_BYTES} bytes")