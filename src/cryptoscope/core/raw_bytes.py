"""
Byte Buffer Module
Owned byte sequence with hex/base64/text transcoding, XOR and Hamming distance

All transforms return new buffers; a ByteBuffer is never modified after
construction.
"""

import base64
import re
from typing import Iterator, List, Union

from .errors import MalformedInput, LengthMismatch, InsufficientData


BASE64_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'

# Symbol -> 6-bit value lookup
_BASE64_INDEX = {c: i for i, c in enumerate(BASE64_ALPHABET)}

_HEX_PATTERN = re.compile(r'[0-9a-fA-F]*')


class ByteBuffer:
    """
    Immutable sequence of 8-bit values

    Created from a literal string, a hex string, a base64 string, or
    programmatically from any iterable of ints in range 0-255.
    """

    __slots__ = ('_data',)

    def __init__(self, data: Union[bytes, bytearray, List[int], 'ByteBuffer'] = b''):
        if isinstance(data, ByteBuffer):
            data = data._data
        self._data = bytes(data)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> 'ByteBuffer':
        """
        Map each character to its byte value

        Only ASCII is meaningful; higher code points are truncated to
        their low 8 bits.
        """
        return cls(bytes(ord(c) & 0xFF for c in text))

    @classmethod
    def from_hex(cls, text: str) -> 'ByteBuffer':
        """
        Decode a hex string, two characters per byte, big nibble first

        Args:
            text: Hex string (upper or lower case, no separators)

        Returns:
            Decoded ByteBuffer

        Raises:
            MalformedInput: odd length or non-hex characters
        """
        if len(text) % 2 != 0:
            raise MalformedInput(f"Hex string has odd length: {len(text)}")
        if not _HEX_PATTERN.fullmatch(text):
            raise MalformedInput("Hex string contains characters outside [0-9a-fA-F]")

        return cls(bytes.fromhex(text))

    @classmethod
    def from_base64(cls, text: str) -> 'ByteBuffer':
        """
        Decode standard base64 leniently

        Characters outside the base64 alphabet are dropped rather than
        rejected. Trailing '=' characters give the padding count; each one
        removes two bits from the decoded bit stream. Leftover bits that do
        not fill a whole byte are discarded.

        Args:
            text: Base64 text (may contain whitespace or other noise)

        Returns:
            Decoded ByteBuffer
        """
        stripped = text.rstrip()
        padding = len(stripped) - len(stripped.rstrip('='))

        symbols = [_BASE64_INDEX[c] for c in stripped if c in _BASE64_INDEX]
        total_bits = len(symbols) * 6
        data_bits = max(total_bits - padding * 2, 0)
        byte_count = data_bits // 8

        accumulator = 0
        for symbol in symbols:
            accumulator = (accumulator << 6) | symbol

        accumulator >>= total_bits - byte_count * 8
        return cls(accumulator.to_bytes(byte_count, 'big'))

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_hex(self) -> str:
        """Lowercase two-digit hex per byte, no separator"""
        return self._data.hex()

    def to_base64(self) -> str:
        """RFC 4648 base64 with '=' padding"""
        return base64.b64encode(self._data).decode('ascii')

    def to_text(self) -> str:
        """
        Map each byte to one character (display convenience only)

        Not a lossless text codec for bytes >= 0x80 under multi-byte
        encodings.
        """
        return self._data.decode('latin-1')

    # ------------------------------------------------------------------
    # XOR and distance
    # ------------------------------------------------------------------

    def xor(self, other: 'ByteBuffer') -> 'ByteBuffer':
        """
        Element-wise XOR of two equal-length buffers

        Raises:
            LengthMismatch: buffers differ in length
        """
        if len(self) != len(other):
            raise LengthMismatch(len(self), len(other))

        return ByteBuffer(bytes(a ^ b for a, b in zip(self._data, other._data)))

    def repeating_xor(self, key: 'ByteBuffer') -> 'ByteBuffer':
        """
        XOR with key cycled to this buffer's length

        An empty key leaves nothing to cycle, so the result is empty.
        """
        if not key:
            return ByteBuffer()

        key_bytes = key._data
        key_len = len(key_bytes)
        return ByteBuffer(bytes(b ^ key_bytes[i % key_len] for i, b in enumerate(self._data)))

    def single_byte_xor(self, key: int) -> 'ByteBuffer':
        """XOR every byte with the same key byte"""
        return ByteBuffer(bytes(b ^ key for b in self._data))

    def hamming_distance(self, other: 'ByteBuffer') -> int:
        """
        Number of differing bits between two equal-length buffers

        Raises:
            LengthMismatch: buffers differ in length
        """
        if len(self) != len(other):
            raise LengthMismatch(len(self), len(other))

        return sum(bin(a ^ b).count('1') for a, b in zip(self._data, other._data))

    # ------------------------------------------------------------------
    # Partitioning
    # ------------------------------------------------------------------

    def chunks(self, size: int) -> List['ByteBuffer']:
        """
        Split into consecutive whole chunks of `size` bytes

        A trailing partial chunk is dropped.
        """
        if size < 1:
            raise InsufficientData(f"Chunk size must be positive, got {size}")

        whole = len(self._data) // size
        return [ByteBuffer(self._data[i * size:(i + 1) * size]) for i in range(whole)]

    def column(self, offset: int, step: int) -> 'ByteBuffer':
        """Every `step`-th byte starting at `offset`"""
        return ByteBuffer(self._data[offset::step])

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ByteBuffer(self._data[index])
        return self._data[index]

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other) -> bool:
        if isinstance(other, ByteBuffer):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"ByteBuffer({self.to_hex()!r})"
