"""Tests for injectable random sources."""

import pytest
from deckshuffle.errors import InvalidInputError
from deckshuffle.random_source import (
    RecordingRandomSource,
    ScriptedRandomSource,
    SeededRandomSource,
)


def test_seeded_source_is_deterministic() -> None:
    a = SeededRandomSource(seed=42)
    b = SeededRandomSource(seed=42)

    assert [a.randint(0, 100) for _ in range(20)] == [b.randint(0, 100) for _ in range(20)]
    assert a.random() == b.random()


def test_scripted_source_replays_in_order() -> None:
    rng = ScriptedRandomSource([3, 0.25, 1])

    assert rng.randint(0, 5) == 3
    assert rng.random() == 0.25
    assert rng.randint(1, 1) == 1
    assert rng.remaining == 0


def test_scripted_source_exhaustion() -> None:
    rng = ScriptedRandomSource([1])
    rng.randint(0, 1)

    with pytest.raises(InvalidInputError, match="exhausted"):
        rng.randint(0, 1)


@pytest.mark.parametrize("draw", [5, -1, 0.5])
def test_scripted_source_rejects_out_of_range_int(draw) -> None:
    with pytest.raises(InvalidInputError):
        ScriptedRandomSource([draw]).randint(0, 4)


def test_scripted_source_rejects_out_of_range_float() -> None:
    with pytest.raises(InvalidInputError):
        ScriptedRandomSource([1.0]).random()


def test_recording_source_replays_same_draws() -> None:
    recorder = RecordingRandomSource(SeededRandomSource(seed=7))
    first = [recorder.randint(0, 10), recorder.random(), recorder.randint(-1, 1)]

    replayed = recorder.replay()

    assert [replayed.randint(0, 10), replayed.random(), replayed.randint(-1, 1)] == first
