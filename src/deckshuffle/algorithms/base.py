"""Shared machinery for shuffle algorithms.

Each algorithm implements ``_run`` once, against a ``MoveEmitter``. The bulk
shuffle and the step recorder are the same run with different emitters, and
both emitters apply every record through ``steps.reorder``. A recorded step
list therefore always replays to the bulk result for the same draws.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from deckshuffle.deck import Card, Deck, renumber, validate_deck
from deckshuffle.random_source import RandomSource
from deckshuffle.steps import StepKind, TransformationRecord, reorder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Static description of a shuffle algorithm."""

    name: str
    description: str
    complexity: str


class MoveEmitter(ABC):
    """Receives the moves of one algorithm run and applies them to a working deck."""

    def __init__(self, deck: Sequence[Card]) -> None:
        self.cards: List[Card] = list(deck)
        self.emitted = 0

    @property
    def step_number(self) -> int:
        """1-based number of the next step (used in descriptions)."""
        return self.emitted + 1

    def emit(self, record: TransformationRecord) -> None:
        self.cards = reorder(self.cards, record)
        self.emitted += 1
        self._keep(record)

    @abstractmethod
    def _keep(self, record: TransformationRecord) -> None:
        pass

    # Convenience constructors used by the algorithms

    def swap(self, i: int, j: int, description: str) -> None:
        self.emit(TransformationRecord(
            description=description,
            affected_indices=(i, j),
            kind=StepKind.SWAP,
            source_positions=(i, j),
            destination_positions=(j, i),
        ))

    def move(self, sources: Sequence[int], destinations: Sequence[int], description: str) -> None:
        self.emit(TransformationRecord(
            description=description,
            affected_indices=tuple(sources),
            kind=StepKind.MOVE,
            source_positions=tuple(sources),
            destination_positions=tuple(destinations),
        ))

    def annotate(self, kind: StepKind, indices: Sequence[int], description: str) -> None:
        self.emit(TransformationRecord(
            description=description,
            affected_indices=tuple(indices),
            kind=kind,
            source_positions=tuple(indices),
            destination_positions=tuple(indices),
        ))


class BulkEmitter(MoveEmitter):
    """Applies moves and discards them."""

    def _keep(self, record: TransformationRecord) -> None:
        pass


class RecordingEmitter(MoveEmitter):
    """Applies moves and collects them as transformation records."""

    def __init__(self, deck: Sequence[Card]) -> None:
        super().__init__(deck)
        self.records: List[TransformationRecord] = []

    def _keep(self, record: TransformationRecord) -> None:
        self.records.append(record)


class ShuffleAlgorithm(ABC):
    """Base class for shuffle algorithms."""

    descriptor: AlgorithmDescriptor

    @property
    def name(self) -> str:
        return self.descriptor.name

    @abstractmethod
    def _run(self, size: int, rng: RandomSource, emitter: MoveEmitter) -> None:
        """Emit every move of one shuffle of a deck of ``size`` cards."""
        pass

    def execute(self, deck: Sequence[Card], rng: RandomSource, emitter: MoveEmitter) -> Deck:
        """Run the algorithm through ``emitter`` and return the finished deck.

        Raises:
            InvalidInputError: If the deck is empty
            InvariantViolationError: If the deck has duplicate ids
        """
        validate_deck(deck)
        self._run(len(deck), rng, emitter)
        logger.debug(f"{self.name}: {emitter.emitted} steps over {len(deck)} cards")
        return renumber(emitter.cards)

    def shuffle(self, deck: Sequence[Card], rng: RandomSource) -> Deck:
        """Return a shuffled copy of ``deck``. The input is never mutated."""
        return self.execute(deck, rng, BulkEmitter(deck))

    def record_steps(self, deck: Sequence[Card], rng: RandomSource) -> List[TransformationRecord]:
        """Return the step list of one shuffle of ``deck``."""
        emitter = RecordingEmitter(deck)
        self.execute(deck, rng, emitter)
        return emitter.records
