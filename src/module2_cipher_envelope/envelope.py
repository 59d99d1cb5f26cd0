# file: src/module2_cipher_envelope/envelope.py

"""
Cipher envelope: pad, then encrypt each block under a 16-byte key.

Known weaknesses, kept for wire compatibility:
    - Blocks are encrypted independently, so equal plaintext blocks leak
      as equal ciphertext blocks.
    - There is no authentication tag. A corrupted buffer either fails
      padding or decrypts to wrong plaintext without notice.
"""

import logging

from .block_cipher import decrypt_blocks, encrypt_blocks, validate_key
from .envelope_errors import InvalidPaddingError
from .padding import BLOCK_SIZE, pad, unpad

logger = logging.getLogger(__name__)


def seal(plaintext: bytes, key: bytes) -> bytes:
    """
    Pad and encrypt plaintext.

    Args:
        plaintext: Serialized payload (may be empty)
        key: 16-byte key, owned by the caller

    Returns:
        Sealed buffer; length is a positive multiple of 16 and always at
        least one byte longer than plaintext

    Raises:
        InvalidKeyError: If key is not 16 bytes
    """
    validate_key(key)

    padded = pad(bytes(plaintext))
    sealed = encrypt_blocks(padded, key)

    logger.debug(
        "Sealed %d plaintext bytes into %d blocks",
        len(plaintext), len(sealed) // BLOCK_SIZE
    )

    return sealed


def open_sealed(sealed: bytes, key: bytes, strict: bool = False) -> bytes:
    """
    Decrypt a sealed buffer and strip its padding.

    Args:
        sealed: Output of seal()
        key: 16-byte key used for sealing
        strict: Verify every padding byte, not just the last one

    Returns:
        Original plaintext

    Raises:
        InvalidKeyError: If key is not 16 bytes
        InvalidPaddingError: If the buffer is empty or padding is unreadable
        MisalignedBufferError: If the buffer is not a whole number of blocks
    """
    validate_key(key)
    sealed = bytes(sealed)

    if len(sealed) == 0:
        raise InvalidPaddingError("Cannot open empty buffer: no padding byte")

    decrypted = decrypt_blocks(sealed, key)

    try:
        plaintext = unpad(decrypted, strict=strict)
    except InvalidPaddingError:
        logger.debug("Padding rejected on %d-byte buffer", len(sealed))
        raise

    logger.debug(
        "Opened %d blocks into %d plaintext bytes",
        len(sealed) // BLOCK_SIZE, len(plaintext)
    )

    return plaintext
