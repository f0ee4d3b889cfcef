"""
Shared fixtures for the Cryptoscope test suite
"""

import sys
from pathlib import Path

import pytest

# Make the src layout importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from cryptoscope.core.raw_bytes import ByteBuffer


LYRIC = "Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal"

PARAGRAPH = (
    "It was the best of times, it was the worst of times, it was the age of wisdom, "
    "it was the age of foolishness, it was the epoch of belief, it was the epoch of "
    "incredulity, it was the season of light, it was the season of darkness, it was "
    "the spring of hope, it was the winter of despair, we had everything before us, "
    "we had nothing before us, we were all going direct to heaven, we were all going "
    "direct the other way. In short, the period was so far like the present period, "
    "that some of its noisiest authorities insisted on its being received, for good "
    "or for evil, in the superlative degree of comparison only."
)


@pytest.fixture
def lyric() -> ByteBuffer:
    return ByteBuffer.from_text(LYRIC)


@pytest.fixture
def paragraph() -> ByteBuffer:
    return ByteBuffer.from_text(PARAGRAPH)


@pytest.fixture
def repeating_key_ciphertext(paragraph) -> ByteBuffer:
    """
    Paragraph encrypted under "ICE", preceded by 160 spaces

    The leading spaces make the first 4 * 39 ciphertext bytes periodic in
    the key, so the key-length estimate is exact.
    """
    plaintext = ByteBuffer.from_text(" " * 160)
    plaintext = ByteBuffer(bytes(plaintext) + bytes(paragraph))
    return plaintext.repeating_xor(ByteBuffer.from_text("ICE"))
