"""Algorithm lookup and the engine entry points used by the visualizer."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from deckshuffle.algorithms.base import AlgorithmDescriptor, RecordingEmitter, ShuffleAlgorithm
from deckshuffle.algorithms.exchange import FisherYatesShuffle
from deckshuffle.algorithms.hindu import HinduShuffle
from deckshuffle.algorithms.overhand import OverhandShuffle
from deckshuffle.algorithms.riffle import RiffleShuffle
from deckshuffle.deck import Card, Deck
from deckshuffle.errors import InvalidInputError
from deckshuffle.random_source import RandomSource, SeededRandomSource
from deckshuffle.steps import TransformationRecord

logger = logging.getLogger(__name__)


# Listing order is the order the visualizer offers them in
ALGORITHMS: Dict[str, ShuffleAlgorithm] = {
    algorithm.name: algorithm
    for algorithm in (
        FisherYatesShuffle(),
        RiffleShuffle(),
        OverhandShuffle(),
        HinduShuffle(),
    )
}


@dataclass(frozen=True)
class ShuffleOutcome:
    """Final deck and step list of one recorded run (same draws for both)."""

    algorithm_name: str
    original: Deck
    deck: Deck
    steps: tuple[TransformationRecord, ...]
    execution_time_ms: float

    @property
    def step_count(self) -> int:
        return len(self.steps)


def list_algorithms() -> List[AlgorithmDescriptor]:
    return [algorithm.descriptor for algorithm in ALGORITHMS.values()]


def get_algorithm(name: str) -> ShuffleAlgorithm:
    """Look up an algorithm by name.

    Raises:
        InvalidInputError: If no algorithm has that name
    """
    if name not in ALGORITHMS:
        raise InvalidInputError(
            f"Unknown shuffle algorithm: {name!r}. Available: {', '.join(ALGORITHMS)}"
        )
    return ALGORITHMS[name]


def shuffle(name: str, deck: Sequence[Card], rng: Optional[RandomSource] = None) -> Deck:
    """Shuffle ``deck`` with the named algorithm (fresh system randomness if no rng)."""
    return get_algorithm(name).shuffle(deck, rng or SeededRandomSource())


def record_steps(
    name: str,
    deck: Sequence[Card],
    rng: Optional[RandomSource] = None,
) -> List[TransformationRecord]:
    """Step list of one shuffle of ``deck`` with the named algorithm."""
    return get_algorithm(name).record_steps(deck, rng or SeededRandomSource())


def run_shuffle(
    name: str,
    deck: Sequence[Card],
    rng: Optional[RandomSource] = None,
) -> ShuffleOutcome:
    """Shuffle once, keeping both the final deck and its step list.

    Execution time covers the whole recorded run, measured with
    ``time.perf_counter``.
    """
    algorithm = get_algorithm(name)
    emitter = RecordingEmitter(deck)

    start = time.perf_counter()
    final = algorithm.execute(deck, rng or SeededRandomSource(), emitter)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    logger.debug(f"{name}: shuffled {len(deck)} cards in {elapsed_ms:.3f}ms")
    return ShuffleOutcome(
        algorithm_name=name,
        original=tuple(deck),
        deck=final,
        steps=tuple(emitter.records),
        execution_time_ms=elapsed_ms,
    )
