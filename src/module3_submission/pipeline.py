# file: src/module3_submission/pipeline.py
"""
Score Submission Pipeline

events -> encode -> seal -> opaque buffer -> open -> decode -> events
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from module1_score_events import DecodeError, ScoreEvent, decode_events, encode_events
from module2_cipher_envelope import open_sealed, seal

from .config import resolve_config
from .submission_errors import SerializationError

logger = logging.getLogger(__name__)


def encrypt_events(events: Sequence[ScoreEvent], key: bytes) -> bytes:
    """
    Serialize and seal score events.

    Args:
        events: Ordered score events (may be empty)
        key: 16-byte encryption key

    Returns:
        Sealed buffer, a positive multiple of 16 bytes

    Raises:
        InvalidKeyError: If key is not 16 bytes
        EncodeError: If events contain something that is not a ScoreEvent
    """
    encoded = encode_events(events)
    return seal(encoded, key)


def decrypt_events(
    buffer: bytes,
    key: bytes,
    config: Optional[Dict[str, Any]] = None
) -> List[ScoreEvent]:
    """
    Open a sealed buffer and decode its score events.

    Args:
        buffer: Sealed buffer from encrypt_events()
        key: 16-byte key used for sealing
        config: Optional configuration (defaults when None)

    Returns:
        Decoded score events in original order

    Raises:
        InvalidKeyError: If key is not 16 bytes
        InvalidPaddingError: If padding cannot be read after decryption
        SerializationError: If decrypted bytes are not a valid event sequence
    """
    config = resolve_config(config)
    strict = config['envelope']['strict_padding']

    plaintext = open_sealed(buffer, key, strict=strict)

    try:
        return decode_events(plaintext)
    except DecodeError as e:
        # Wrong key, tampering, or a producer on another schema
        logger.debug("Decode failed after opening %d-byte buffer: %s", len(buffer), e)
        raise SerializationError(f"Failed to decode score events: {e}", cause=e) from e
