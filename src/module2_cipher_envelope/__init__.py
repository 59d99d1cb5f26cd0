# file: module2_cipher_envelope/__init__.py
"""
Module 2: Cipher Envelope

Padding and independent-block AES-128 encryption for serialized payloads.
"""

from .envelope import seal, open_sealed
from .padding import pad, unpad, padding_length, BLOCK_SIZE
from .block_cipher import encrypt_blocks, decrypt_blocks, validate_key, KEY_SIZE
from .envelope_errors import (
    EnvelopeError,
    InvalidKeyError,
    InvalidPaddingError,
    MisalignedBufferError
)


__all__ = [
    'seal',
    'open_sealed',
    'pad',
    'unpad',
    'padding_length',
    'BLOCK_SIZE',
    'encrypt_blocks',
    'decrypt_blocks',
    'validate_key',
    'KEY_SIZE',
    'EnvelopeError',
    'InvalidKeyError',
    'InvalidPaddingError',
    'MisalignedBufferError',
]


__version__ = '1.0.0'
