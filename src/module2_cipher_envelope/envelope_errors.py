# file: src/module2_cipher_envelope/envelope_errors.py
"""
Error types for the cipher envelope.
"""


class EnvelopeError(Exception):
    """Base exception for envelope sealing and opening."""
    pass


class InvalidKeyError(EnvelopeError, ValueError):
    """Raised when the key is not exactly 16 bytes."""
    pass


class InvalidPaddingError(EnvelopeError):
    """Raised when no valid padding can be read from decrypted data."""
    pass


class MisalignedBufferError(InvalidPaddingError):
    """Raised when a sealed buffer is not a whole number of blocks."""
    pass
