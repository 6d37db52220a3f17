"""Repeated-shuffle benchmark across algorithms."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from deckshuffle.algorithms.registry import ALGORITHMS, get_algorithm, run_shuffle
from deckshuffle.analysis.statistics import StatisticsStore, average_execution_time
from deckshuffle.deck import STANDARD_DECK_SIZE, create_ordered_deck
from deckshuffle.random_source import SeededRandomSource

logger = logging.getLogger(__name__)


def _default_trials() -> int:
    return int(os.environ.get("DECKSHUFFLE_TRIALS", 100))


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""

    trials: int = field(default_factory=_default_trials)  # Shuffles per algorithm
    deck_size: int = STANDARD_DECK_SIZE
    seed: Optional[int] = None  # None = non-deterministic
    algorithms: List[str] = field(default_factory=lambda: list(ALGORITHMS))


def run_benchmark(config: BenchmarkConfig) -> StatisticsStore:
    """Shuffle a fresh ordered deck ``trials`` times per algorithm.

    Every algorithm draws from its own source seeded with ``config.seed`` so
    results do not depend on which algorithms were selected. A name listed
    more than once runs once.

    Raises:
        InvalidInputError: For an unknown algorithm name or bad deck size
    """
    names = list(dict.fromkeys(config.algorithms))
    for name in names:
        get_algorithm(name)
    original = create_ordered_deck(config.deck_size)

    store = StatisticsStore(names)
    for name in names:
        rng = SeededRandomSource(config.seed)
        for _ in range(config.trials):
            outcome = run_shuffle(name, original, rng)
            store.update(name, original, outcome.deck, outcome.execution_time_ms, outcome.step_count)

        stats = store[name]
        logger.info(
            f"{name}: {stats.shuffle_count} shuffles, "
            f"avg score {stats.randomness_score:.1f}, "
            f"avg steps {stats.average_step_count:.1f}, "
            f"avg time {average_execution_time(stats):.3f}ms"
        )
    return store
