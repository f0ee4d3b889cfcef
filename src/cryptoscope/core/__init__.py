"""
Cryptoscope Core
Byte codecs, XOR breakers, block-mode detection and GF(2^8) arithmetic

- raw_bytes.py: ByteBuffer with hex/base64/text transcoding
- galois.py: GF(2^8) byte and word arithmetic (AES MixColumns)
- scoring.py: English-likelihood scoring
- xor_breaker.py: Single-byte and repeating-key XOR breakers
- block_mode.py: Duplicate-block (ECB) detection
- padding.py / aes_ecb.py: PKCS#7 and AES-128-ECB plumbing
"""

from .errors import CryptoscopeError, MalformedInput, LengthMismatch, InsufficientData
from .raw_bytes import ByteBuffer
from .galois import GaloisByte, GaloisVector, xtime
from .scoring import score_english_likelihood, rank_by_english_score
from .xor_breaker import XORBreaker, ScoredCandidate, KeyLengthEstimate
from .block_mode import BlockScore, count_duplicate_blocks, detect_fixed_block_repetition
from .padding import pkcs7_pad, pkcs7_unpad
from .presets import BreakerConfig, PresetLibrary


__all__ = [
    # Errors
    'CryptoscopeError',
    'MalformedInput',
    'LengthMismatch',
    'InsufficientData',

    # Bytes
    'ByteBuffer',

    # GF(2^8)
    'GaloisByte',
    'GaloisVector',
    'xtime',

    # Scoring / breaking
    'score_english_likelihood',
    'rank_by_english_score',
    'XORBreaker',
    'ScoredCandidate',
    'KeyLengthEstimate',

    # Block mode
    'BlockScore',
    'count_duplicate_blocks',
    'detect_fixed_block_repetition',

    # Padding
    'pkcs7_pad',
    'pkcs7_unpad',

    # Configuration
    'BreakerConfig',
    'PresetLibrary',
]
