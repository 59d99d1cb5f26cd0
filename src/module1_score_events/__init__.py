# file: module1_score_events/__init__.py
"""
Module 1: Score Events

Data model and canonical binary codec for game-score events.
"""

from .events import EnemyKind, ScoreEvent, SCORE_TABLE, get_enemy_score, total_score
from .codec import encode_events, decode_events, VARIANT_NAMES
from .errors import (
    CodecError,
    EncodeError,
    DecodeError,
    TruncatedRecordError,
    MalformedRecordError,
    InvalidDiscriminantError,
)


__all__ = [
    'EnemyKind',
    'ScoreEvent',
    'SCORE_TABLE',
    'get_enemy_score',
    'total_score',
    'encode_events',
    'decode_events',
    'VARIANT_NAMES',
    'CodecError',
    'EncodeError',
    'DecodeError',
    'TruncatedRecordError',
    'MalformedRecordError',
    'InvalidDiscriminantError',
]


__version__ = '1.0.0'
