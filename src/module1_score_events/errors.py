# file: src/module1_score_events/errors.py

"""
Codec exception hierarchy.

All exceptions inherit from CodecError for unified handling.
"""

from typing import Any, Optional


class CodecError(Exception):
    """Base exception for score event serialization."""
    pass


class EncodeError(CodecError):
    """Raised when in-memory events cannot be represented in the wire layout."""
    pass


class DecodeError(CodecError):
    """Raised when bytes do not describe a valid sequence of score events."""
    pass


class TruncatedRecordError(DecodeError):
    """Raised when the buffer ends before the payload does."""
    pass


class MalformedRecordError(DecodeError):
    """Raised when the payload is not a well-formed sequence of records."""
    pass


class InvalidDiscriminantError(DecodeError):
    """Raised when an enemy discriminant does not name an EnemyKind."""
    
    def __init__(self, message: str, value: Optional[Any] = None, index: Optional[int] = None):
        super().__init__(message)
        self.value = value
        self.index = index
