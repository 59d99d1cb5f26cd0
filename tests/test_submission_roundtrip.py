# file: tests/test_submission_roundtrip.py

"""
End-to-end tests: events -> encode -> seal -> open -> decode -> events.
"""

import random

from module1_score_events import EnemyKind, ScoreEvent, encode_events, decode_events, total_score
from module2_cipher_envelope import seal, open_sealed
from module3_submission import ScoreSubmission


def test_three_event_scenario():
    """
    POSITIVE TEST:
    Key of sixteen 42s, one event per enemy kind
    """
    key = bytes([42] * 16)
    events = [
        ScoreEvent(time=0.0, enemy=EnemyKind.CRUISER, pos=(0.0, 0.0)),
        ScoreEvent(time=1.0, enemy=EnemyKind.SPACESHIP, pos=(1.0, 1.0)),
        ScoreEvent(time=2.0, enemy=EnemyKind.ASTEROID, pos=(2.0, 2.0)),
    ]

    assert decode_events(open_sealed(seal(encode_events(events), key), key)) == events

    submission = ScoreSubmission.from_data(events, key)
    data = submission.to_data(key)

    assert data == events
    assert total_score(data) == 710


def test_empty_event_list():
    """Test that no events still produce one block of ciphertext."""
    key = bytes([42] * 16)

    submission = ScoreSubmission.from_data([], key)

    assert len(submission.to_buffer()) == 16
    assert submission.to_data(key) == []


def test_random_sequences():
    """Test round trip over seeded random event lists and keys."""
    rng = random.Random(42)
    kinds = list(EnemyKind)

    for count in range(1, 40):
        key = bytes(rng.randrange(256) for _ in range(16))
        events = [
            ScoreEvent(
                time=rng.uniform(0, 600),
                enemy=rng.choice(kinds),
                pos=(rng.uniform(-1000, 1000), rng.uniform(-1000, 1000)),
            )
            for _ in range(count)
        ]

        buffer = ScoreSubmission.from_data(events, key).to_buffer()

        assert len(buffer) % 16 == 0
        assert ScoreSubmission.from_buffer(buffer).to_data(key) == events


def test_identical_events_leak_through_ciphertext():
    """
    Document the independent-block weakness: identical 16-byte plaintext
    blocks map to identical ciphertext blocks.
    """
    key = bytes([42] * 16)
    plaintext = b'\x00' * 48

    sealed = seal(plaintext, key)

    assert sealed[0:16] == sealed[16:32] == sealed[32:48]
