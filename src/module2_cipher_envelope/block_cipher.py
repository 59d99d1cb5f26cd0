# file: src/module2_cipher_envelope/block_cipher.py
"""
AES-128 applied to each 16-byte block independently (ECB).

No IV and no chaining: identical plaintext blocks produce identical
ciphertext blocks. The mode is fixed by the wire format shared with other
producers and consumers.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .envelope_errors import InvalidKeyError, MisalignedBufferError
from .padding import BLOCK_SIZE


KEY_SIZE = 16


def validate_key(key: bytes) -> bytes:
    """
    Check that key is a 16-byte AES-128 key.

    Returns:
        The key as immutable bytes

    Raises:
        InvalidKeyError: If key has the wrong type or length
    """
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidKeyError(f"Key must be bytes, got {type(key).__name__}")
    if len(key) != KEY_SIZE:
        raise InvalidKeyError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
    return bytes(key)


def _cipher(key: bytes) -> Cipher:
    return Cipher(algorithms.AES(validate_key(key)), modes.ECB())


def _check_aligned(data: bytes) -> None:
    if len(data) % BLOCK_SIZE != 0:
        raise MisalignedBufferError(
            f"Data length {len(data)} is not a multiple of block size {BLOCK_SIZE}"
        )


def encrypt_blocks(data: bytes, key: bytes) -> bytes:
    """
    Encrypt every 16-byte block of data independently.

    Args:
        data: Block-aligned plaintext
        key: 16-byte key

    Returns:
        Ciphertext of the same length
    """
    _check_aligned(data)
    encryptor = _cipher(key).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def decrypt_blocks(data: bytes, key: bytes) -> bytes:
    """
    Decrypt every 16-byte block of data independently.

    Args:
        data: Block-aligned ciphertext
        key: 16-byte key

    Returns:
        Plaintext of the same length
    """
    _check_aligned(data)
    decryptor = _cipher(key).decryptor()
    return decryptor.update(data) + decryptor.finalize()
