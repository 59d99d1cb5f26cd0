# file: src/module1_score_events/codec.py

"""
MessagePack serialization of score event sequences.

Layout (compact, structs as arrays, floats as float32):
    array(N) of [time: float32, enemy: str, [x: float32, y: float32]]

The enemy is written as its variant name ("Cruiser", "Spaceship",
"Asteroid"). A variant index, and records written as maps keyed by field
name, are accepted on decode.
"""

import logging
from typing import Any, List, Sequence

import msgpack

from .errors import (
    EncodeError,
    InvalidDiscriminantError,
    MalformedRecordError,
    TruncatedRecordError,
)
from .events import EnemyKind, ScoreEvent

logger = logging.getLogger(__name__)


VARIANT_NAMES = {
    EnemyKind.CRUISER: "Cruiser",
    EnemyKind.SPACESHIP: "Spaceship",
    EnemyKind.ASTEROID: "Asteroid",
}

_BY_NAME = {name: kind for kind, name in VARIANT_NAMES.items()}
_BY_INDEX = {kind.value: kind for kind in EnemyKind}

RECORD_FIELDS = ("time", "enemy", "pos")


def encode_events(events: Sequence[ScoreEvent]) -> bytes:
    """
    Serialize score events to MessagePack.

    Deterministic: the same sequence always yields the same bytes.

    Args:
        events: Ordered score events (may be empty)

    Returns:
        MessagePack array with one 3-element array per event

    Raises:
        EncodeError: If an element is not a ScoreEvent or cannot be packed.
            This indicates a programming error upstream.
    """
    records = []
    for i, event in enumerate(events):
        if not isinstance(event, ScoreEvent):
            raise EncodeError(
                f"Element {i} is {type(event).__name__}, expected ScoreEvent"
            )
        records.append([event.time, VARIANT_NAMES[event.enemy], [event.pos[0], event.pos[1]]])

    try:
        data = msgpack.packb(records, use_single_float=True)
    except (TypeError, ValueError, OverflowError) as e:
        raise EncodeError(f"Cannot encode events: {e}") from e

    logger.debug("Encoded %d events into %d bytes", len(records), len(data))

    return data


def decode_events(data: bytes) -> List[ScoreEvent]:
    """
    Parse MessagePack bytes back into score events.

    Args:
        data: Bytes produced by encode_events() or a compatible producer

    Returns:
        Events in their original order

    Raises:
        TruncatedRecordError: If the buffer ends inside the payload
        MalformedRecordError: If the payload is not valid MessagePack, has
            the wrong shape, or is followed by trailing bytes
        InvalidDiscriminantError: If an enemy variant is unknown
    """
    data = bytes(data)

    unpacker = msgpack.Unpacker(raw=False)
    unpacker.feed(data)

    try:
        payload = unpacker.unpack()
    except msgpack.OutOfData as e:
        raise TruncatedRecordError(
            f"Buffer ends inside the payload ({len(data)} bytes)"
        ) from e
    except (msgpack.UnpackException, ValueError) as e:
        raise MalformedRecordError(f"Invalid MessagePack: {e}") from e

    consumed = unpacker.tell()
    if consumed != len(data):
        raise MalformedRecordError(
            f"{len(data) - consumed} trailing bytes after the payload"
        )

    if not isinstance(payload, list):
        raise MalformedRecordError(
            f"Payload must be an array, got {type(payload).__name__}"
        )

    events = [_decode_record(record, i) for i, record in enumerate(payload)]

    logger.debug("Decoded %d events from %d bytes", len(events), len(data))

    return events


def _decode_record(record: Any, index: int) -> ScoreEvent:
    if isinstance(record, dict):
        missing = [name for name in RECORD_FIELDS if name not in record]
        if missing:
            raise MalformedRecordError(f"Record {index} is missing fields: {missing}")
        record = [record[name] for name in RECORD_FIELDS]

    if not isinstance(record, list) or len(record) != 3:
        raise MalformedRecordError(f"Record {index} must be a 3-element array")

    time, variant, pos = record

    if not isinstance(pos, list) or len(pos) != 2:
        raise MalformedRecordError(f"Record {index}: pos must be a 2-element array")

    for value in (time, pos[0], pos[1]):
        if not _is_number(value):
            raise MalformedRecordError(
                f"Record {index}: expected a number, got {type(value).__name__}"
            )

    try:
        return ScoreEvent(time=time, enemy=_decode_variant(variant, index), pos=(pos[0], pos[1]))
    except ValueError as e:
        raise MalformedRecordError(f"Record {index}: {e}") from e


def _decode_variant(variant: Any, index: int) -> EnemyKind:
    if isinstance(variant, str):
        kind = _BY_NAME.get(variant)
    elif isinstance(variant, int) and not isinstance(variant, bool):
        kind = _BY_INDEX.get(variant)
    else:
        kind = None

    if kind is None:
        raise InvalidDiscriminantError(
            f"Unknown enemy variant {variant!r} in record {index}",
            value=variant,
            index=index,
        )
    return kind


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))
