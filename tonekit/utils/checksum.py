"""Digest and message-authentication helpers."""

from __future__ import annotations

import hashlib
import hmac
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def md5_checksum(data: BytesLike) -> bytes:
    """Return the raw MD5 digest of data."""
    return hashlib.md5(_as_bytes(data)).digest()


def md5_hex(data: BytesLike) -> str:
    """Return the MD5 digest of data as lower-case hex."""
    return md5_checksum(data).hex()


def sha256_checksum(data: BytesLike) -> bytes:
    """Return the raw SHA-256 digest of data."""
    return hashlib.sha256(_as_bytes(data)).digest()


def sha256_hex(data: BytesLike) -> str:
    """Return the SHA-256 digest of data as lower-case hex."""
    return sha256_checksum(data).hex()


def hmac_sha256(key: BytesLike, msg: BytesLike) -> bytes:
    """Return the raw HMAC-SHA256 of msg under key."""
    return hmac.new(_as_bytes(key), _as_bytes(msg), hashlib.sha256).digest()


def hmac_sha256_hex(key: BytesLike, msg: BytesLike) -> str:
    """Return the HMAC-SHA256 of msg under key as lower-case hex."""
    return hmac_sha256(key, msg).hex()