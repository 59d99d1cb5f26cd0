# file: src/module1_score_events/events.py

"""
Score event data model.

Canonical schema: three enemy kinds and a flat {time, enemy, pos} record.
Floats are held at single precision, the precision of the wire layout.
"""

import math
import struct
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Tuple


class EnemyKind(Enum):
    """Enemy variants. The value is the variant index in declaration order."""

    CRUISER = 0
    SPACESHIP = 1
    ASTEROID = 2


SCORE_TABLE = MappingProxyType({
    EnemyKind.CRUISER: 500,
    EnemyKind.SPACESHIP: 200,
    EnemyKind.ASTEROID: 10,
})


def get_enemy_score(kind: EnemyKind) -> int:
    """Return the fixed point value for an enemy kind."""
    return SCORE_TABLE[kind]


def to_float32(value: float) -> float:
    """
    Round a Python float to the nearest IEEE-754 binary32 value.

    Raises:
        ValueError: If the value is NaN or outside the binary32 range
    """
    try:
        value = float(value)
        if math.isnan(value):
            raise ValueError("NaN is not a valid time or coordinate")
        return struct.unpack('>f', struct.pack('>f', value))[0]
    except OverflowError as e:
        raise ValueError(f"{value!r} does not fit in a 32-bit float") from e


@dataclass(frozen=True)
class ScoreEvent:
    """
    One scoring occurrence.

    Attributes:
        time: Seconds since the start of the session
        enemy: Kind of enemy destroyed
        pos: (x, y) position where it happened
    """

    time: float
    enemy: EnemyKind
    pos: Tuple[float, float]

    def __post_init__(self):
        if not isinstance(self.enemy, EnemyKind):
            raise TypeError(f"enemy must be an EnemyKind, got {type(self.enemy).__name__}")

        pos = tuple(self.pos)
        if len(pos) != 2:
            raise ValueError(f"pos must be an (x, y) pair, got {len(pos)} values")

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'time', to_float32(self.time))
        object.__setattr__(self, 'pos', (to_float32(pos[0]), to_float32(pos[1])))

    def get_score(self) -> int:
        return get_enemy_score(self.enemy)


def total_score(events: Iterable[ScoreEvent]) -> int:
    """Sum of the point values of all events."""
    return sum(event.get_score() for event in events)
