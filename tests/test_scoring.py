"""
Tests for English-likelihood scoring
"""

from cryptoscope.core.raw_bytes import ByteBuffer
from cryptoscope.core.scoring import rank_by_english_score, score_english_likelihood


def score(text: str) -> int:
    return score_english_likelihood(ByteBuffer.from_text(text))


def test_letter_bonuses_replace_lowercase_bucket():
    assert score("e") == 10
    assert score("t") == 9
    assert score("o") == 8
    assert score("i") == 7
    assert score("n") == 6
    assert score("tie") == 26


def test_general_buckets():
    assert score(" ") == 5
    assert score("\n") == 5
    assert score("a") == 4
    assert score("E") == 2
    assert score("7") == 1
    assert score("!") == -2
    assert score("\x00") == -2
    assert score_english_likelihood(ByteBuffer(b"\x80\xff")) == -4


def test_empty_buffer_scores_zero():
    assert score("") == 0


def test_rank_by_english_score():
    garbage = ByteBuffer(b"\x01\x02\x03\x04")
    shouty = ByteBuffer.from_text("HELLO")
    english = ByteBuffer.from_text("hello")

    assert rank_by_english_score([english, garbage, shouty]) == [garbage, shouty, english]
