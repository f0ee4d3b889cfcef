"""
XOR breaker using plaintext scoring and normalized Hamming distance
"""

import itertools
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .errors import InsufficientData
from .presets import BreakerConfig
from .raw_bytes import ByteBuffer
from .scoring import score_english_likelihood


logger = logging.getLogger(__name__)


@dataclass
class ScoredCandidate:
    """A key, the plaintext it produces, and that plaintext's English score"""
    key: Union[int, ByteBuffer]
    plaintext: ByteBuffer
    score: int
    source_index: Optional[int] = None    # Position in the input batch, if any

    def key_hex(self) -> str:
        if isinstance(self.key, ByteBuffer):
            return self.key.to_hex()
        return f"{self.key:02x}"

    def to_dict(self) -> dict:
        return {
            'key_hex': self.key_hex(),
            'plaintext': self.plaintext.to_text(),
            'score': self.score,
            'source_index': self.source_index,
        }


@dataclass
class KeyLengthEstimate:
    """Candidate key length and its normalized mean Hamming distance (lower is better)"""
    key_length: int
    distance: float

    def to_dict(self) -> dict:
        return {'key_length': self.key_length, 'distance': round(self.distance, 4)}


class XORBreaker:
    """Break single-byte and repeating-key XOR"""

    def __init__(self, config: BreakerConfig = None):
        self.config = config if config is not None else BreakerConfig()

    def brute_force_single_byte_key(self, buffer: ByteBuffer) -> ScoredCandidate:
        """
        Try all 256 single-byte keys and keep the best-scoring plaintext

        Ties go to the higher key.
        """
        best = None
        for key in range(256):
            plaintext = buffer.single_byte_xor(key)
            score = score_english_likelihood(plaintext)
            if best is None or score >= best.score:
                best = ScoredCandidate(key=key, plaintext=plaintext, score=score)

        return best

    def estimate_key_length(self, buffer: ByteBuffer) -> List[KeyLengthEstimate]:
        """
        Rank candidate key lengths by normalized Hamming distance

        For each length k, the first `chunk_count` k-byte chunks are compared
        pairwise; the mean distance divided by k is the estimate. Ties keep
        ascending key-length order.

        Raises:
            InsufficientData: buffer cannot supply the chunks for some length
        """
        count = self.config.chunk_count
        estimates = []

        for key_length in range(self.config.min_key_length, self.config.max_key_length):
            if len(buffer) < count * key_length:
                raise InsufficientData(
                    f"Key length {key_length} needs {count * key_length} bytes, "
                    f"buffer has {len(buffer)}"
                )

            chunks = [buffer[i * key_length:(i + 1) * key_length] for i in range(count)]
            pairs = list(itertools.combinations(chunks, 2))
            total = sum(a.hamming_distance(b) for a, b in pairs)
            estimates.append(KeyLengthEstimate(key_length, total / len(pairs) / key_length))

        estimates.sort(key=lambda e: e.distance)
        logger.debug("Best key length estimates: %s", estimates[:3])
        return estimates

    def recover_key(self, buffer: ByteBuffer, key_length: int) -> ByteBuffer:
        """
        Recover a repeating key of known length column by column

        Byte i of the key only ever touches every key_length-th byte from
        offset i, so each column is a single-byte XOR problem.
        """
        key = bytearray()
        for offset in range(key_length):
            column = buffer.column(offset, key_length)
            key.append(self.brute_force_single_byte_key(column).key)

        return ByteBuffer(key)

    def break_repeating_key(self, buffer: ByteBuffer) -> ByteBuffer:
        """Decrypt repeating-key XOR using the single best key-length guess"""
        best = self.estimate_key_length(buffer)[0]
        key = self.recover_key(buffer, best.key_length)
        logger.debug("Key length %d -> key %s", best.key_length, key.to_hex())
        return buffer.repeating_xor(key)

    def break_repeating_key_candidates(self, buffer: ByteBuffer,
                                       attempts: int = None) -> List[ScoredCandidate]:
        """
        Try the top `attempts` key-length guesses

        Returns:
            One candidate per attempted key length, best score first
        """
        if attempts is None:
            attempts = self.config.key_length_attempts

        results = []
        for estimate in self.estimate_key_length(buffer)[:attempts]:
            key = self.recover_key(buffer, estimate.key_length)
            plaintext = buffer.repeating_xor(key)
            results.append(ScoredCandidate(
                key=key,
                plaintext=plaintext,
                score=score_english_likelihood(plaintext),
            ))

        results.sort(key=lambda c: c.score, reverse=True)
        return results

    def detect_single_byte_xor(self, buffers: Sequence[ByteBuffer]) -> List[ScoredCandidate]:
        """
        Break every buffer and rank the results

        Returns:
            Candidates tagged with their source index, best score first
            (ties keep input order)
        """
        results = []
        for index, buffer in enumerate(buffers):
            candidate = self.brute_force_single_byte_key(buffer)
            candidate.source_index = index
            results.append(candidate)

        results.sort(key=lambda c: c.score, reverse=True)
        if results:
            logger.debug("Most English-like line: %d (score %d)",
                         results[0].source_index, results[0].score)
        return results
