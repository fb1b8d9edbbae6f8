"""MD5 and SHA-1 digests as raw bytes or as lowercase hex text."""

from __future__ import annotations

import hashlib
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

MD5_DIGEST_LEN = 16
MD5_HEX_LEN = 32
SHA1_DIGEST_LEN = 20
SHA1_HEX_LEN = 40


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _truncate(hexdigest: str, outputlen: int) -> str:
    if outputlen < 0:
        raise ValueError("outputlen must not be negative")
    return hexdigest[:outputlen]


def md5(data: BytesLike) -> bytes:
    """The 16-byte MD5 digest of ``data``."""
    return hashlib.md5(_as_bytes(data)).digest()


def md5_hex(data: BytesLike, outputlen: int = MD5_HEX_LEN) -> str:
    """The MD5 digest in hex, cut to at most ``outputlen`` characters."""
    return _truncate(hashlib.md5(_as_bytes(data)).hexdigest(), outputlen)


def sha1(data: BytesLike) -> bytes:
    """The 20-byte SHA-1 digest of ``data``."""
    return hashlib.sha1(_as_bytes(data)).digest()


def sha1_hex(data: BytesLike, outputlen: int = SHA1_HEX_LEN) -> str:
    """The SHA-1 digest in hex, cut to at most ``outputlen`` characters."""
    return _truncate(hashlib.sha1(_as_bytes(data)).hexdigest(), outputlen)