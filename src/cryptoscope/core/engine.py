"""
Core Analysis Engine
Coordinates decoding, breaking and detection, and collects results
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .aes_ecb import AES_BLOCK_SIZE, aes_128_ecb_decrypt
from .block_mode import BlockScore, detect_fixed_block_repetition
from .padding import pkcs7_unpad
from .presets import BreakerConfig, PresetLibrary
from .raw_bytes import ByteBuffer
from .scoring import score_english_likelihood
from .xor_breaker import KeyLengthEstimate, ScoredCandidate, XORBreaker


logger = logging.getLogger(__name__)


@dataclass
class CryptoscopeResult:
    """
    Results of one engine operation

    Only the fields relevant to the operation are filled in.
    """
    operation: str = ""
    input_name: str = ""
    input_size: int = 0

    # Breaker results
    candidates: List[ScoredCandidate] = field(default_factory=list)
    key_lengths: List[KeyLengthEstimate] = field(default_factory=list)

    # ECB detection
    block_scores: List[BlockScore] = field(default_factory=list)

    # Plain conversions / decryptions
    output: Optional[ByteBuffer] = None
    encodings: Dict[str, str] = field(default_factory=dict)

    def best(self) -> Optional[ScoredCandidate]:
        return self.candidates[0] if self.candidates else None

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON export"""
        data = {
            'metadata': {
                'operation': self.operation,
                'input': self.input_name,
                'input_size': self.input_size,
            },
        }
        if self.candidates:
            data['candidates'] = [c.to_dict() for c in self.candidates[:10]]
        if self.key_lengths:
            data['key_lengths'] = [e.to_dict() for e in self.key_lengths[:5]]
        if self.block_scores:
            data['block_scores'] = [s.to_dict() for s in self.block_scores[:10]]
        if self.output is not None:
            data['output'] = {
                'hex': self.output.to_hex(),
                'text': self.output.to_text(),
            }
        if self.encodings:
            data['encodings'] = self.encodings
        return data


class CryptoscopeEngine:
    """
    Main engine that wraps the breakers and detectors

    Workflow for a repeating-key ciphertext:
    1. Estimate key length from normalized Hamming distance
    2. Recover each key byte by single-byte brute force on its column
    3. Decrypt and score the plaintext
    """

    def __init__(self, config: BreakerConfig = None, preset: str = None, verbose: bool = False):
        """
        Initialize engine

        Args:
            config: Breaker configuration (overrides preset)
            preset: Preset name from PresetLibrary
            verbose: Print progress lines
        """
        if config is None:
            if preset is not None:
                config = PresetLibrary.get_preset(preset)
                if config is None:
                    raise ValueError(f"Unknown preset: {preset}. Available: {PresetLibrary.list_presets()}")
            else:
                config = BreakerConfig()

        self.config = config
        self.breaker = XORBreaker(config)
        self.verbose = verbose

    def _progress(self, message: str):
        if self.verbose:
            print(message)

    def convert(self, buffer: ByteBuffer, input_name: str = "input") -> CryptoscopeResult:
        """Render a buffer in every supported encoding"""
        return CryptoscopeResult(
            operation="convert",
            input_name=input_name,
            input_size=len(buffer),
            output=buffer,
            encodings={
                'hex': buffer.to_hex(),
                'base64': buffer.to_base64(),
                'text': buffer.to_text(),
            },
        )

    def break_single_byte(self, buffer: ByteBuffer, input_name: str = "input") -> CryptoscopeResult:
        """Brute force a single-byte XOR key"""
        self._progress(f"[*] Trying 256 single-byte keys on {len(buffer)} bytes...")
        candidate = self.breaker.brute_force_single_byte_key(buffer)
        self._progress(f"    Best key: 0x{candidate.key:02x} (score {candidate.score})")

        return CryptoscopeResult(
            operation="break-single",
            input_name=input_name,
            input_size=len(buffer),
            candidates=[candidate],
            output=candidate.plaintext,
        )

    def detect_single_byte(self, buffers: Sequence[ByteBuffer],
                           input_name: str = "input") -> CryptoscopeResult:
        """Find the buffer among many that was single-byte XOR encrypted"""
        self._progress(f"[*] Breaking {len(buffers)} candidate lines...")
        candidates = self.breaker.detect_single_byte_xor(buffers)

        result = CryptoscopeResult(
            operation="detect-single",
            input_name=input_name,
            input_size=sum(len(b) for b in buffers),
            candidates=candidates,
        )
        if candidates:
            result.output = candidates[0].plaintext
            self._progress(f"    Most English-like line: {candidates[0].source_index}")
        return result

    def break_repeating_key(self, buffer: ByteBuffer, input_name: str = "input") -> CryptoscopeResult:
        """Recover a repeating XOR key and the plaintext"""
        self._progress(f"[*] Estimating key length on {len(buffer)} bytes...")
        estimates = self.breaker.estimate_key_length(buffer)
        self._progress(f"    Best guess: {estimates[0].key_length} "
                       f"(distance {estimates[0].distance:.3f})")

        self._progress(f"[*] Recovering key ({self.config.key_length_attempts} attempt(s))...")
        candidates = self.breaker.break_repeating_key_candidates(buffer)
        logger.debug("Repeating-key candidates: %s", [c.key_hex() for c in candidates])

        return CryptoscopeResult(
            operation="break-repeating",
            input_name=input_name,
            input_size=len(buffer),
            candidates=candidates,
            key_lengths=estimates,
            output=candidates[0].plaintext,
        )

    def detect_ecb(self, buffers: Sequence[ByteBuffer], input_name: str = "input") -> CryptoscopeResult:
        """Rank buffers by duplicate block count"""
        self._progress(f"[*] Counting duplicate {self.config.block_size}-byte blocks "
                       f"in {len(buffers)} buffers...")
        scores = detect_fixed_block_repetition(buffers, self.config.block_size)

        if scores and scores[0].duplicate_blocks > 0:
            self._progress(f"    Likely ECB: line {scores[0].index} "
                           f"({scores[0].duplicate_blocks} duplicate blocks)")

        return CryptoscopeResult(
            operation="detect-ecb",
            input_name=input_name,
            input_size=sum(len(b) for b in buffers),
            block_scores=scores,
        )

    def decrypt_aes_ecb(self, buffer: ByteBuffer, key: ByteBuffer, unpad: bool = False,
                        input_name: str = "input") -> CryptoscopeResult:
        """Decrypt AES-128-ECB, optionally stripping PKCS#7 padding"""
        self._progress(f"[*] Decrypting {len(buffer)} bytes with AES-128-ECB...")
        plaintext = aes_128_ecb_decrypt(buffer, key)
        if unpad:
            plaintext = pkcs7_unpad(plaintext, AES_BLOCK_SIZE)

        return CryptoscopeResult(
            operation="aes-ecb-decrypt",
            input_name=input_name,
            input_size=len(buffer),
            candidates=[ScoredCandidate(key=key, plaintext=plaintext,
                                        score=score_english_likelihood(plaintext))],
            output=plaintext,
        )
