"""
Block Mode Detection
Flags ECB-encrypted ciphertext by counting repeated fixed-size blocks

ECB encrypts identical plaintext blocks to identical ciphertext blocks, so
a ciphertext with many duplicate blocks is very likely ECB.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .errors import InsufficientData
from .raw_bytes import ByteBuffer


logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 16


@dataclass
class BlockScore:
    """Input index, the buffer itself and its duplicate block count"""
    index: int
    buffer: ByteBuffer
    duplicate_blocks: int

    def to_dict(self) -> dict:
        return {
            'index': self.index,
            'duplicate_blocks': self.duplicate_blocks,
            'length': len(self.buffer),
            'hex_preview': self.buffer[:32].to_hex(),
        }


def count_duplicate_blocks(buffer: ByteBuffer, block_size: int = DEFAULT_BLOCK_SIZE) -> int:
    """
    Whole blocks minus distinct blocks

    A trailing partial block is ignored.

    Raises:
        InsufficientData: block_size is not positive
    """
    if block_size < 1:
        raise InsufficientData(f"Block size must be positive, got {block_size}")

    blocks = buffer.chunks(block_size)
    return len(blocks) - len(set(blocks))


def detect_fixed_block_repetition(buffers: Sequence[ByteBuffer],
                                  block_size: int = DEFAULT_BLOCK_SIZE) -> List[BlockScore]:
    """
    Rank buffers by duplicate block count

    Args:
        buffers: Candidate ciphertexts
        block_size: Cipher block size in bytes

    Returns:
        BlockScores, most duplicates first (ties keep input order)
    """
    scores = [
        BlockScore(index, buffer, count_duplicate_blocks(buffer, block_size))
        for index, buffer in enumerate(buffers)
    ]
    scores.sort(key=lambda s: s.duplicate_blocks, reverse=True)

    if scores and scores[0].duplicate_blocks > 0:
        logger.debug("Buffer %d has %d duplicate blocks", scores[0].index, scores[0].duplicate_blocks)
    return scores
