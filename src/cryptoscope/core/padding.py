"""
PKCS#7 Padding
"""

from .errors import MalformedInput
from .raw_bytes import ByteBuffer


def _check_block_size(block_size: int):
    if not 1 <= block_size <= 255:
        raise MalformedInput(f"PKCS#7 block size must be 1-255, got {block_size}")


def pkcs7_pad(buffer: ByteBuffer, block_size: int) -> ByteBuffer:
    """
    Append block_size - (len % block_size) bytes of that value

    An aligned buffer still gets a full block of padding.
    """
    _check_block_size(block_size)
    pad_len = block_size - len(buffer) % block_size
    return ByteBuffer(bytes(buffer) + bytes([pad_len]) * pad_len)


def pkcs7_unpad(buffer: ByteBuffer, block_size: int) -> ByteBuffer:
    """
    Validate and strip PKCS#7 padding

    Raises:
        MalformedInput: length not a multiple of block_size or bad pad bytes
    """
    _check_block_size(block_size)
    if not buffer or len(buffer) % block_size != 0:
        raise MalformedInput(f"Padded length {len(buffer)} is not a multiple of {block_size}")

    pad_len = buffer[-1]
    if not 1 <= pad_len <= block_size:
        raise MalformedInput(f"Invalid PKCS#7 pad length: {pad_len}")
    if any(b != pad_len for b in buffer[-pad_len:]):
        raise MalformedInput("Inconsistent PKCS#7 padding bytes")

    return buffer[:-pad_len]
