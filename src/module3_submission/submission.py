# file: src/module3_submission/submission.py
"""
Opaque score submission buffer.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from module1_score_events import ScoreEvent

from .pipeline import decrypt_events, encrypt_events


@dataclass(frozen=True)
class ScoreSubmission:
    """
    Encrypted score events ready for transport.

    Holds only the sealed buffer. The key is passed to every call that
    needs it and is never stored.

    Usage:
        submission = ScoreSubmission.from_data(events, key)
        payload = submission.to_buffer()
        # ... transmit payload ...
        received = ScoreSubmission.from_buffer(payload)
        events = received.to_data(key)
    """

    buffer: bytes

    @classmethod
    def from_buffer(cls, buffer: bytes) -> "ScoreSubmission":
        """Wrap an externally received buffer. Nothing is validated until to_data()."""
        return cls(bytes(buffer))

    @classmethod
    def from_data(cls, events: Sequence[ScoreEvent], key: bytes) -> "ScoreSubmission":
        """Encode and seal events."""
        return cls(encrypt_events(events, key))

    def to_buffer(self) -> bytes:
        """Sealed bytes for transmission or storage."""
        return self.buffer

    def to_data(self, key: bytes, config: Optional[Dict[str, Any]] = None) -> List[ScoreEvent]:
        """
        Decrypt and decode the buffer.

        Raises:
            InvalidPaddingError: If padding cannot be read
            SerializationError: If the plaintext is not a valid event sequence
        """
        return decrypt_events(self.buffer, key, config)

    def __len__(self) -> int:
        return len(self.buffer)
