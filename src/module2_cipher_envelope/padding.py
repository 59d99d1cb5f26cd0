# file: src/module2_cipher_envelope/padding.py
"""
PKCS7-style block padding.

Between 1 and 16 bytes are always appended, each equal to the padding
length. Already aligned input gains a full block of 0x10 bytes.
"""

from cryptography.hazmat.primitives import padding as pkcs7

from .envelope_errors import InvalidPaddingError


BLOCK_SIZE = 16


def padding_length(data_length: int) -> int:
    """Number of padding bytes for a plaintext of the given length (1..16)."""
    return BLOCK_SIZE - data_length % BLOCK_SIZE


def pad(data: bytes) -> bytes:
    """
    Pad data to a whole number of blocks.

    Args:
        data: Plaintext of any length, including empty

    Returns:
        Padded bytes of length (len(data) // 16 + 1) * 16
    """
    padder = pkcs7.PKCS7(BLOCK_SIZE * 8).padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes, strict: bool = False) -> bytes:
    """
    Remove padding from decrypted data.

    The last byte is taken as the padding length and that many bytes are
    dropped. The padding bytes themselves are not inspected unless strict
    is set.

    Args:
        data: Decrypted bytes
        strict: Also require 1 <= p <= 16, every padding byte equal to p,
                and block-aligned input

    Returns:
        Data with padding removed

    Raises:
        InvalidPaddingError: If data is empty, the padding length exceeds
            the data, or (strict only) the padding bytes are inconsistent
    """
    if len(data) == 0:
        raise InvalidPaddingError("Cannot read padding byte from empty data")

    if strict:
        unpadder = pkcs7.PKCS7(BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(data) + unpadder.finalize()
        except ValueError as e:
            raise InvalidPaddingError(f"Padding verification failed: {e}") from e

    p = data[-1]
    if p > len(data):
        raise InvalidPaddingError(
            f"Padding length {p} exceeds data length {len(data)}"
        )

    return data[:len(data) - p]
