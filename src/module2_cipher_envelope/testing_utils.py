# file: src/module2_cipher_envelope/testing_utils.py

"""
Testing utilities for the cipher envelope.

Used only in test contexts to simulate corrupted or tampered buffers.
"""


def flip_byte(data: bytes, index: int, mask: int = 0xFF) -> bytes:
    """
    Return a copy of data with one byte XORed against mask.
    
    Args:
        data: Original buffer
        index: Byte position (negative indices count from the end)
        mask: Non-zero XOR mask
    
    Returns:
        Corrupted copy, same length as data
    
    Example:
        >>> flip_byte(b'\\x00\\x00', -1)
        b'\\x00\\xff'
    """
    if not 0 < mask <= 0xFF:
        raise ValueError(f"mask must be in [1, 255], got {mask}")
    
    corrupted = bytearray(data)
    corrupted[index] ^= mask
    return bytes(corrupted)
