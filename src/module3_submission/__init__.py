# file: module3_submission/__init__.py
"""
Module 3: Score Submission

Boundary API combining the event codec and the cipher envelope.
"""

from .submission import ScoreSubmission
from .pipeline import encrypt_events, decrypt_events
from .config import load_config, resolve_config, get_default_config, packaged_config
from .submission_errors import (
    SubmissionError,
    SerializationError,
    ConfigError
)


__all__ = [
    'ScoreSubmission',
    'encrypt_events',
    'decrypt_events',
    'load_config',
    'resolve_config',
    'get_default_config',
    'packaged_config',
    'SubmissionError',
    'SerializationError',
    'ConfigError',
]


__version__ = '1.0.0'
