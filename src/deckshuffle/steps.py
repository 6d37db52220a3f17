"""Transformation records and the step applicator.

A record describes one atomic change to the working deck. Indices are
expressed in the replay frame: they refer to the full working deck at the
moment the record is applied, so replaying records in order from the original
deck reproduces the shuffle exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, TypeVar

from deckshuffle.deck import Card, Deck, clear_highlights, renumber
from deckshuffle.errors import InvalidInputError, InvariantViolationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StepKind(Enum):
    """Kinds of transformation record."""

    SWAP = "swap"
    MOVE = "move"
    SPLIT = "split"   # Annotation only
    MERGE = "merge"   # Annotation only


@dataclass(frozen=True)
class TransformationRecord:
    """One atomic, replayable step of a shuffle."""

    description: str
    affected_indices: tuple[int, ...]
    kind: StepKind
    source_positions: tuple[int, ...]
    destination_positions: tuple[int, ...]

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        for name in ("affected_indices", "source_positions", "destination_positions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if self.kind == StepKind.SWAP:
            if len(self.affected_indices) != 2 or len(self.source_positions) != 2:
                raise InvariantViolationError(
                    f"Swap record needs exactly two indices: {self.description!r}"
                )
            if self.destination_positions != tuple(reversed(self.source_positions)):
                raise InvariantViolationError(
                    f"Swap destination must reverse its source: {self.description!r}"
                )
        elif self.kind == StepKind.MOVE:
            if len(self.source_positions) != len(self.destination_positions):
                raise InvariantViolationError(
                    f"Move record source/destination lengths differ: {self.description!r}"
                )

    @property
    def is_annotation(self) -> bool:
        """True when applying the record leaves the card order unchanged."""
        return self.kind in (StepKind.SPLIT, StepKind.MERGE)


def _check_indices(indices: Sequence[int], size: int, record: TransformationRecord) -> None:
    for index in indices:
        if not 0 <= index < size:
            raise InvariantViolationError(
                f"Record index {index} out of range for deck of {size}: {record.description!r}"
            )


def reorder(items: Sequence[T], record: TransformationRecord) -> List[T]:
    """Apply the ordering part of a record to any sequence.

    This is the single reorder primitive shared by the applicator and by the
    algorithms' move emitters.
    """
    size = len(items)
    _check_indices(record.affected_indices, size, record)
    _check_indices(record.source_positions, size, record)
    _check_indices(record.destination_positions, size, record)
    result = list(items)

    if record.kind == StepKind.SWAP:
        i, j = record.source_positions
        result[i], result[j] = result[j], result[i]
        return result

    if record.kind != StepKind.MOVE:
        return result

    sources = record.source_positions
    destinations = record.destination_positions
    if len(set(sources)) != len(sources) or len(set(destinations)) != len(destinations):
        raise InvariantViolationError(
            f"Move record repeats an index: {record.description!r}"
        )

    moving = [result[s] for s in sources]
    skipped = set(sources)
    rest = [item for index, item in enumerate(result) if index not in skipped]
    # Inserting in ascending destination order lands each item exactly on its target
    for destination, item in sorted(zip(destinations, moving), key=lambda pair: pair[0]):
        rest.insert(destination, item)
    return rest


def apply_step(deck: Sequence[Card], record: TransformationRecord) -> Deck:
    """Apply one record to a deck and return the new deck.

    The cards sitting at ``affected_indices`` before the step come back
    highlighted wherever they land, every other card unhighlighted, and
    positions are renumbered to index order.

    Raises:
        InvalidInputError: If the deck is empty
        InvariantViolationError: If the record references an index outside the deck
    """
    if len(deck) == 0:
        raise InvalidInputError("Cannot apply a step to an empty deck")
    reordered = reorder(deck, record)
    # Highlight by identity: a move relocates the cards it names
    touched = {deck[index].id for index in record.affected_indices}
    return renumber(
        reordered,
        highlighted=[index for index, card in enumerate(reordered) if card.id in touched],
    )


def replay(
    original: Sequence[Card],
    steps: Sequence[TransformationRecord],
    upto: int,
) -> Deck:
    """Rebuild the deck state after ``steps[0..upto]`` from the original deck.

    ``upto=-1`` means no step applied. Walking backwards is done by calling
    this with a smaller ``upto``; there is no incremental undo.

    Raises:
        InvalidInputError: If upto is outside [-1, len(steps) - 1]
    """
    if not -1 <= upto < len(steps):
        raise InvalidInputError(
            f"Cannot replay to step {upto}; valid range is -1..{len(steps) - 1}"
        )

    deck = clear_highlights(original)
    for record in steps[: upto + 1]:
        deck = apply_step(deck, record)
    logger.debug(f"Replayed {upto + 1}/{len(steps)} steps")
    return deck
