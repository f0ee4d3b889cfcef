"""
AES-128-ECB
Thin wrapper over pycryptodome's AES primitive; no padding is applied
"""

from Crypto.Cipher import AES

from .errors import InsufficientData, MalformedInput
from .raw_bytes import ByteBuffer


AES_128_KEY_SIZE = 16
AES_BLOCK_SIZE = AES.block_size


def _cipher(key: ByteBuffer):
    if len(key) != AES_128_KEY_SIZE:
        raise MalformedInput(f"AES-128 key must be {AES_128_KEY_SIZE} bytes, got {len(key)}")
    return AES.new(bytes(key), AES.MODE_ECB)


def _check_aligned(buffer: ByteBuffer):
    if len(buffer) % AES_BLOCK_SIZE != 0:
        raise InsufficientData(
            f"Data length {len(buffer)} is not a multiple of the {AES_BLOCK_SIZE}-byte block size"
        )


def aes_128_ecb_decrypt(buffer: ByteBuffer, key: ByteBuffer) -> ByteBuffer:
    """Decrypt block-aligned ciphertext; padding is left in place"""
    _check_aligned(buffer)
    return ByteBuffer(_cipher(key).decrypt(bytes(buffer)))


def aes_128_ecb_encrypt(buffer: ByteBuffer, key: ByteBuffer) -> ByteBuffer:
    """Encrypt block-aligned plaintext (pad with pkcs7_pad first)"""
    _check_aligned(buffer)
    return ByteBuffer(_cipher(key).encrypt(bytes(buffer)))
