# file: src/module3_submission/submission_errors.py

"""
Error types for score submissions.
"""

from typing import Optional


class SubmissionError(Exception):
    """Base exception for score submission operations."""
    pass


class SerializationError(SubmissionError):
    """
    Raised when decrypted bytes cannot be decoded into score events.
    
    The codec failure is kept on .cause (and as __cause__).
    """
    
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class ConfigError(SubmissionError):
    """Raised when configuration is unreadable or invalid."""
    pass
