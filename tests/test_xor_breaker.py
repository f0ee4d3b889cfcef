"""
Tests for single-byte and repeating-key XOR breaking
"""

import pytest

from cryptoscope.core.errors import InsufficientData
from cryptoscope.core.presets import PresetLibrary
from cryptoscope.core.raw_bytes import ByteBuffer
from cryptoscope.core.xor_breaker import XORBreaker


COOKING_HEX = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"


def test_single_xor_decrypt():
    candidate = XORBreaker().brute_force_single_byte_key(ByteBuffer.from_hex(COOKING_HEX))

    assert candidate.plaintext.to_text() == "Cooking MC's like a pound of bacon"
    assert candidate.key == ord("X")
    assert candidate.key_hex() == "58"


def test_single_xor_ties_go_to_last_key():
    # Every key scores the same on an empty buffer
    candidate = XORBreaker().brute_force_single_byte_key(ByteBuffer())

    assert candidate.key == 255
    assert candidate.score == 0


def test_detect_single_byte_xor():
    plaintext = ByteBuffer.from_text("Now that the party is jumping\n")
    noise = [ByteBuffer(bytes((i * 37 + seed) % 256 for i in range(30))) for seed in (11, 90, 201)]
    buffers = [noise[0], plaintext.single_byte_xor(0x35), noise[1], noise[2]]

    results = XORBreaker().detect_single_byte_xor(buffers)

    assert len(results) == 4
    assert results[0].source_index == 1
    assert results[0].plaintext == plaintext
    assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)


def test_estimate_key_length_ordering():
    plaintext = ByteBuffer(b"A" * 200)
    ciphertext = plaintext.repeating_xor(ByteBuffer(b"\x01\x02\x04\x08\x10"))

    estimates = XORBreaker().estimate_key_length(ciphertext)

    assert len(estimates) == 38
    assert sorted(e.key_length for e in estimates) == list(range(2, 40))
    assert [e.distance for e in estimates] == sorted(e.distance for e in estimates)

    # Period 5 gives identical chunks; multiples tie and keep ascending order
    assert estimates[0].key_length == 5
    assert estimates[0].distance == 0.0
    assert estimates[1].key_length == 10


def test_estimate_key_length_needs_enough_data():
    with pytest.raises(InsufficientData):
        XORBreaker().estimate_key_length(ByteBuffer(b"x" * 155))

    # 4 * 39 bytes is exactly enough
    assert len(XORBreaker().estimate_key_length(ByteBuffer(b"x" * 156))) == 38


def test_recover_key_with_known_length(lyric):
    plaintext = ByteBuffer(bytes(lyric) * 4)
    key = ByteBuffer.from_text("ICE")

    recovered = XORBreaker().recover_key(plaintext.repeating_xor(key), 3)

    assert recovered == key


def test_break_repeating_key(repeating_key_ciphertext, paragraph):
    recovered = XORBreaker().break_repeating_key(repeating_key_ciphertext)

    assert recovered[160:] == paragraph
    assert recovered[:160].to_text() == " " * 160


def test_break_repeating_key_candidates(repeating_key_ciphertext, paragraph):
    breaker = XORBreaker(PresetLibrary.thorough())

    candidates = breaker.break_repeating_key_candidates(repeating_key_ciphertext)

    assert len(candidates) == 3
    assert candidates[0].key == ByteBuffer.from_text("ICE")
    assert candidates[0].plaintext[160:] == paragraph


def test_fast_preset_needs_less_data():
    breaker = XORBreaker(PresetLibrary.fast())

    estimates = breaker.estimate_key_length(ByteBuffer(b"x" * 60))

    assert [e.key_length for e in estimates] == list(range(2, 16))
