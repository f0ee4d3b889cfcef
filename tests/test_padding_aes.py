"""
Tests for PKCS#7 padding and the AES-128-ECB wrapper
"""

import pytest

from cryptoscope.core.aes_ecb import aes_128_ecb_decrypt, aes_128_ecb_encrypt
from cryptoscope.core.errors import InsufficientData, MalformedInput
from cryptoscope.core.padding import pkcs7_pad, pkcs7_unpad
from cryptoscope.core.raw_bytes import ByteBuffer


KEY = ByteBuffer.from_text("YELLOW SUBMARINE")


def test_pkcs7_padding():
    data = ByteBuffer.from_text("YELLOW SUBMARINE")
    padded = pkcs7_pad(data, 20)

    assert padded[:len(data)] == data
    assert bytes(padded[len(data):]) == b"\x04\x04\x04\x04"

    data = ByteBuffer.from_text("ABC")
    padded = pkcs7_pad(data, 3)

    assert padded[:len(data)] == data
    assert bytes(padded[len(data):]) == b"\x03\x03\x03"


def test_pkcs7_unpad():
    data = ByteBuffer.from_text("ICE ICE BABY")
    assert pkcs7_unpad(pkcs7_pad(data, 16), 16) == data

    with pytest.raises(MalformedInput):
        pkcs7_unpad(ByteBuffer(b"ICE ICE BABY\x05\x05\x05\x05"), 16)
    with pytest.raises(MalformedInput):
        pkcs7_unpad(ByteBuffer(b"ICE ICE BABY\x01\x02\x03\x04"), 16)
    with pytest.raises(MalformedInput):
        pkcs7_unpad(ByteBuffer(b"ICE ICE BABY\x04\x04\x04"), 16)


def test_pkcs7_block_size_limits():
    with pytest.raises(MalformedInput):
        pkcs7_pad(ByteBuffer(b"abc"), 0)
    with pytest.raises(MalformedInput):
        pkcs7_pad(ByteBuffer(b"abc"), 256)


def test_aes_known_vector():
    key = ByteBuffer.from_hex("000102030405060708090a0b0c0d0e0f")
    plaintext = ByteBuffer.from_hex("00112233445566778899aabbccddeeff")

    ciphertext = aes_128_ecb_encrypt(plaintext, key)

    assert ciphertext.to_hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"
    assert aes_128_ecb_decrypt(ciphertext, key) == plaintext


def test_aes_round_trip_with_padding():
    plaintext = ByteBuffer.from_text("I'm back and I'm ringin' the bell \nA rockin' on the mike")

    ciphertext = aes_128_ecb_encrypt(pkcs7_pad(plaintext, 16), KEY)

    assert pkcs7_unpad(aes_128_ecb_decrypt(ciphertext, KEY), 16) == plaintext


def test_aes_rejects_bad_input():
    with pytest.raises(MalformedInput):
        aes_128_ecb_decrypt(ByteBuffer(b"A" * 16), ByteBuffer(b"too short"))
    with pytest.raises(InsufficientData):
        aes_128_ecb_decrypt(ByteBuffer(b"too short"), KEY)
