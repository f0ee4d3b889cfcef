"""
Breaker Presets
Predefined configuration sets for the XOR breakers and block detector

Use a preset instead of tuning key-length ranges and retry counts by hand.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class BreakerConfig:
    """Complete breaker configuration"""
    name: str = "default"
    description: str = "Single best key-length guess over lengths 2-39"

    # Key length search (max is exclusive)
    min_key_length: int = 2
    max_key_length: int = 40
    chunk_count: int = 4              # Leading chunks compared per key length

    # Number of ranked key lengths break_repeating_key_candidates tries
    key_length_attempts: int = 1

    # ECB detection
    block_size: int = 16

    def __post_init__(self):
        if self.min_key_length < 1:
            raise ValueError(f"min_key_length must be positive, got {self.min_key_length}")
        if self.max_key_length <= self.min_key_length:
            raise ValueError("max_key_length must be greater than min_key_length")
        if self.chunk_count < 2:
            raise ValueError(f"chunk_count must be at least 2, got {self.chunk_count}")
        if self.key_length_attempts < 1:
            raise ValueError(f"key_length_attempts must be at least 1, got {self.key_length_attempts}")

    def min_buffer_length(self) -> int:
        """Shortest buffer every candidate key length can be estimated on"""
        return self.chunk_count * (self.max_key_length - 1)


class PresetLibrary:
    """Library of predefined breaker presets"""

    @staticmethod
    def get_preset(name: str) -> Optional[BreakerConfig]:
        """Get preset by name"""
        presets = {
            "default": PresetLibrary.default(),
            "thorough": PresetLibrary.thorough(),
            "fast": PresetLibrary.fast(),
        }
        return presets.get(name.lower())

    @staticmethod
    def list_presets() -> List[str]:
        """List all available preset names"""
        return ["default", "thorough", "fast"]

    @staticmethod
    def default() -> BreakerConfig:
        return BreakerConfig()

    @staticmethod
    def thorough() -> BreakerConfig:
        """
        Thorough preset: retry with the next best key lengths

        Use when the top Hamming-distance guess decrypts to garbage, which
        happens on short ciphertexts where four chunks are a noisy sample.
        """
        return BreakerConfig(
            name="thorough",
            description="Tries the three best key-length guesses and keeps the best plaintext",
            key_length_attempts=3,
        )

    @staticmethod
    def fast() -> BreakerConfig:
        """
        Fast preset: short keys only

        Needs only 4 * 15 bytes of ciphertext.
        """
        return BreakerConfig(
            name="fast",
            description="Key lengths 2-15, single guess",
            max_key_length=16,
        )
