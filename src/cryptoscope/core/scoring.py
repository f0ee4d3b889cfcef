"""
Plaintext Scoring
Additive heuristic estimating how English-like a byte sequence is

Only the relative ordering of scores is meaningful.
"""

import string
from typing import Iterable, List

from .raw_bytes import ByteBuffer


# Most frequent English letters, checked before the general buckets
LETTER_BONUS = {
    ord('e'): 10,
    ord('t'): 9,
    ord('o'): 8,
    ord('i'): 7,
    ord('n'): 6,
}

WHITESPACE_SCORE = 5
LOWERCASE_SCORE = 4
UPPERCASE_SCORE = 2
DIGIT_SCORE = 1
OTHER_PENALTY = -2

# Space, tab, LF, CR and form feed (vertical tab is not ASCII whitespace)
_WHITESPACE = frozenset(b' \t\n\r\x0c')
_LOWERCASE = frozenset(map(ord, string.ascii_lowercase))
_UPPERCASE = frozenset(map(ord, string.ascii_uppercase))
_DIGITS = frozenset(map(ord, string.digits))


def _byte_score(byte: int) -> int:
    bonus = LETTER_BONUS.get(byte)
    if bonus is not None:
        return bonus
    if byte in _WHITESPACE:
        return WHITESPACE_SCORE
    if byte in _LOWERCASE:
        return LOWERCASE_SCORE
    if byte in _UPPERCASE:
        return UPPERCASE_SCORE
    if byte in _DIGITS:
        return DIGIT_SCORE
    return OTHER_PENALTY


# Precomputed so scoring a buffer is one lookup per byte
SCORE_TABLE = tuple(_byte_score(b) for b in range(256))


def score_english_likelihood(buffer: ByteBuffer) -> int:
    """
    Score a buffer for English-likeness

    Args:
        buffer: Candidate plaintext

    Returns:
        Integer score; higher is more English-like
    """
    return sum(SCORE_TABLE[b] for b in buffer)


def rank_by_english_score(buffers: Iterable[ByteBuffer]) -> List[ByteBuffer]:
    """Sort buffers ascending by score (stable, best candidate last)"""
    return sorted(buffers, key=score_english_likelihood)
