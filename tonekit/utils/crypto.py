"""AES-CBC encryption of text, with the IV taken from the key."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16
_VALID_KEY_SIZES = (16, 24, 32)
_URL_BASE64 = re.compile(r"[A-Za-z0-9_-]*={0,2}")

KeyLike = Union[str, bytes, bytearray]


def _key_bytes(key: KeyLike) -> bytes:
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if len(data) not in _VALID_KEY_SIZES:
        raise ValueError(f"crypto/aes: invalid key size {len(data)}")
    return data


def _cipher(key: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.CBC(key[:BLOCK_SIZE]))


def _pad(data: bytes) -> bytes:
    count = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return data + bytes([count]) * count


def _unpad(data: bytes) -> bytes:
    if not data:
        raise ValueError("cannot remove padding from empty data")
    count = data[-1]
    if count > len(data):
        raise ValueError("invalid padding")
    return data[: len(data) - count]


def _encrypt(plaintext: str, key: KeyLike) -> bytes:
    key_bytes = _key_bytes(key)
    encryptor = _cipher(key_bytes).encryptor()
    return encryptor.update(_pad(plaintext.encode("utf-8"))) + encryptor.finalize()


def _decrypt(encrypted: bytes, key: KeyLike) -> str:
    key_bytes = _key_bytes(key)
    if len(encrypted) % BLOCK_SIZE:
        raise ValueError("crypto/cipher: input not full blocks")
    decryptor = _cipher(key_bytes).decryptor()
    decrypted = decryptor.update(encrypted) + decryptor.finalize()
    return _unpad(decrypted).decode("utf-8", errors="replace")


def aes_encrypt_cbc(plaintext: str, key: KeyLike) -> str:
    """Encrypt plaintext and return the ciphertext as lower-case hex.

    Raises ValueError when the key is not 16, 24 or 32 bytes long.
    """
    return _encrypt(plaintext, key).hex()


def aes_decrypt_cbc(encrypted_hex: str, key: KeyLike) -> str:
    """Decrypt hex ciphertext; an empty input gives an empty string.

    Raises ValueError for a bad key, malformed hex, partial blocks or bad padding.
    """
    if encrypted_hex == "":
        return ""
    try:
        encrypted = binascii.unhexlify(encrypted_hex)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex ciphertext: {exc}") from None
    return _decrypt(encrypted, key)


def aes_encrypt_cbc_base64(plaintext: str, key: KeyLike) -> str:
    """Encrypt plaintext and return padded URL-safe base64."""
    return base64.urlsafe_b64encode(_encrypt(plaintext, key)).decode("ascii")


def aes_decrypt_cbc_base64(encrypted: str, key: KeyLike) -> str:
    """Decrypt URL-safe base64 ciphertext; any failure gives an empty string."""
    try:
        if not _URL_BASE64.fullmatch(encrypted) or len(encrypted) % 4:
            return ""
        raw = base64.urlsafe_b64decode(encrypted)
        return aes_decrypt_cbc(raw.hex(), key)
    except (ValueError, TypeError):
        return ""