"""Tests for transformation records and the step applicator."""

import pytest
from deckshuffle.deck import create_ordered_deck, deck_ids, renumber
from deckshuffle.errors import InvalidInputError, InvariantViolationError
from deckshuffle.steps import StepKind, TransformationRecord, apply_step, replay


def _swap(i: int, j: int) -> TransformationRecord:
    return TransformationRecord(
        description=f"swap {i} {j}",
        affected_indices=(i, j),
        kind=StepKind.SWAP,
        source_positions=(i, j),
        destination_positions=(j, i),
    )


def _move(sources, destinations) -> TransformationRecord:
    return TransformationRecord(
        description="move",
        affected_indices=sources,
        kind=StepKind.MOVE,
        source_positions=sources,
        destination_positions=destinations,
    )


RANKS = ["hearts-A", "hearts-2", "hearts-3", "hearts-4", "hearts-5"]


def test_record_stores_tuples() -> None:
    record = _move([0, 1], [3, 4])

    assert record.source_positions == (0, 1)
    assert isinstance(record.affected_indices, tuple)

    with pytest.raises(AttributeError):
        record.kind = StepKind.SWAP  # type: ignore


def test_swap_record_requires_reversed_destination() -> None:
    with pytest.raises(InvariantViolationError):
        TransformationRecord(
            description="bad swap",
            affected_indices=(0, 1),
            kind=StepKind.SWAP,
            source_positions=(0, 1),
            destination_positions=(0, 1),
        )


def test_swap_record_requires_two_indices() -> None:
    with pytest.raises(InvariantViolationError):
        TransformationRecord(
            description="bad swap",
            affected_indices=(0, 1, 2),
            kind=StepKind.SWAP,
            source_positions=(0, 1),
            destination_positions=(1, 0),
        )


def test_move_record_requires_matching_lengths() -> None:
    with pytest.raises(InvariantViolationError):
        _move([0, 1], [2])


def test_apply_swap() -> None:
    deck = create_ordered_deck(5)

    result = apply_step(deck, _swap(0, 4))

    assert deck_ids(result) == ["hearts-5", "hearts-2", "hearts-3", "hearts-4", "hearts-A"]
    assert [card.position for card in result] == [0, 1, 2, 3, 4]
    assert [card.highlighted for card in result] == [True, False, False, False, True]
    # Input untouched
    assert deck_ids(deck) == RANKS


def test_apply_single_card_move() -> None:
    result = apply_step(create_ordered_deck(5), _move([0], [2]))

    assert deck_ids(result) == ["hearts-2", "hearts-3", "hearts-A", "hearts-4", "hearts-5"]
    assert [card.highlighted for card in result] == [False, False, True, False, False]


def test_apply_block_move_keeps_block_order() -> None:
    result = apply_step(create_ordered_deck(5), _move([3, 4], [0, 1]))

    assert deck_ids(result) == ["hearts-4", "hearts-5", "hearts-A", "hearts-2", "hearts-3"]
    # The moved cards stay highlighted at their new positions
    assert [card.highlighted for card in result] == [True, True, False, False, False]


def test_apply_split_is_annotation_only() -> None:
    record = TransformationRecord(
        description="split",
        affected_indices=(0, 1, 2),
        kind=StepKind.SPLIT,
        source_positions=(0, 1, 2),
        destination_positions=(0, 1, 2),
    )
    assert record.is_annotation

    result = apply_step(create_ordered_deck(5), record)

    assert deck_ids(result) == RANKS
    assert [card.highlighted for card in result] == [True, True, True, False, False]


def test_apply_clears_previous_highlights() -> None:
    deck = renumber(create_ordered_deck(5), highlighted=[2, 3])

    result = apply_step(deck, _swap(0, 1))

    assert [card.highlighted for card in result] == [True, True, False, False, False]


def test_apply_rejects_out_of_range_index() -> None:
    with pytest.raises(InvariantViolationError, match="out of range"):
        apply_step(create_ordered_deck(5), _swap(0, 5))


def test_apply_rejects_repeated_move_index() -> None:
    with pytest.raises(InvariantViolationError):
        apply_step(create_ordered_deck(5), _move([0, 0], [1, 2]))


def test_apply_rejects_empty_deck() -> None:
    with pytest.raises(InvalidInputError):
        apply_step((), _swap(0, 1))


def test_replay_from_origin() -> None:
    deck = create_ordered_deck(5)
    steps = [_swap(0, 4), _move([0], [2]), _swap(1, 3)]

    expected = apply_step(apply_step(deck, steps[0]), steps[1])

    assert replay(deck, steps, 1) == expected
    assert deck_ids(replay(deck, steps, -1)) == RANKS
    assert not any(card.highlighted for card in replay(deck, steps, -1))


@pytest.mark.parametrize("upto", [-2, 3])
def test_replay_rejects_bad_index(upto: int) -> None:
    with pytest.raises(InvalidInputError):
        replay(create_ordered_deck(5), [_swap(0, 1)] * 3, upto)
