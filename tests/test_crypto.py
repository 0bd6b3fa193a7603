import pytest

from tonekit.utils.crypto import (
    aes_decrypt_cbc,
    aes_decrypt_cbc_base64,
    aes_encrypt_cbc,
    aes_encrypt_cbc_base64,
)

KEY16 = bytes(range(16))
KEY32 = bytes(range(32))
KEY33 = bytes(range(33))


def test_encrypt_with_33_byte_key_fails():
    with pytest.raises(ValueError):
        aes_encrypt_cbc("", KEY33)


def test_decrypt_empty_returns_empty():
    assert aes_decrypt_cbc("", KEY33) == ""


def test_empty_plaintext_gives_one_full_block():
    assert len(aes_encrypt_cbc("", KEY16)) == 32


@pytest.mark.parametrize("text", ["", "a", "hello world", "x" * 16, "中文内容", "y" * 100])
@pytest.mark.parametrize("key", [KEY16, bytes(range(24)), KEY32])
def test_hex_round_trip(text, key):
    assert aes_decrypt_cbc(aes_encrypt_cbc(text, key), key) == text


def test_string_key_round_trip():
    key = "password" * 2
    assert aes_decrypt_cbc(aes_encrypt_cbc("payload", key), key) == "payload"


def test_encryption_is_deterministic():
    first = aes_encrypt_cbc("same", KEY16)
    second = aes_encrypt_cbc("same", KEY16)
    assert first == second
    assert len(first) == 32
    assert aes_decrypt_cbc(second, KEY16) == "same"


def test_cbc_prefix_blocks_match():
    first = aes_encrypt_cbc("a" * 16, KEY16)
    longer = aes_encrypt_cbc("a" * 16 + "tail", KEY16)
    assert longer[:32] == first[:32]


def test_decrypt_rejects_partial_block():
    with pytest.raises(ValueError):
        aes_decrypt_cbc("abcd", KEY16)


def test_decrypt_rejects_bad_hex():
    with pytest.raises(ValueError):
        aes_decrypt_cbc("zz", KEY16)


def test_decrypt_rejects_bad_key():
    ciphertext = aes_encrypt_cbc("text", KEY16)
    with pytest.raises(ValueError):
        aes_decrypt_cbc(ciphertext, b"short")


def test_base64_round_trip():
    encoded = aes_encrypt_cbc_base64("hello", KEY32)
    assert aes_decrypt_cbc_base64(encoded, KEY32) == "hello"


def test_base64_is_url_safe():
    encoded = aes_encrypt_cbc_base64("some longer text " * 10, KEY16)
    assert "+" not in encoded and "/" not in encoded
    assert len(encoded) % 4 == 0


def test_base64_garbage_returns_empty():
    assert aes_decrypt_cbc_base64("!!not base64!!", KEY16) == ""


def test_base64_bad_key_returns_empty():
    encoded = aes_encrypt_cbc_base64("hello", KEY16)
    assert aes_decrypt_cbc_base64(encoded, KEY33) == ""


def test_base64_empty_returns_empty():
    assert aes_decrypt_cbc_base64("", KEY16) == ""