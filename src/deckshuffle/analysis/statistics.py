"""Running per-algorithm shuffle statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, Iterator, Mapping, Sequence

from deckshuffle.analysis.randomness import estimate_randomness
from deckshuffle.deck import Card

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmStatistics:
    """Aggregated results for one algorithm."""

    algorithm_name: str
    shuffle_count: int = 0
    average_step_count: float = 0.0
    randomness_score: float = 0.0  # Running mean of displacement scores, 0-100
    execution_times: tuple[float, ...] = ()  # Milliseconds, oldest first

    def copy_with(self, **changes) -> "AlgorithmStatistics":  # type: ignore
        """Create new AlgorithmStatistics with changes."""
        return replace(self, **changes)


@dataclass(frozen=True)
class MetricComparison:
    """Head-to-head result for one metric."""

    metric: str
    first: tuple[str, float]
    second: tuple[str, float]
    winner: str


@dataclass(frozen=True)
class StatsComparison:
    randomness: MetricComparison
    speed: MetricComparison
    steps: MetricComparison


def _running_mean(old_mean: float, old_count: int, sample: float) -> float:
    return (old_mean * old_count + sample) / (old_count + 1)


def init_stats(algorithm_name: str) -> AlgorithmStatistics:
    return AlgorithmStatistics(algorithm_name=algorithm_name)


def update_stats(
    stats: AlgorithmStatistics,
    original: Sequence[Card],
    shuffled: Sequence[Card],
    execution_time_ms: float,
    step_count: int,
) -> AlgorithmStatistics:
    """Fold one shuffle into the running statistics.

    Averages are unweighted means over every sample so far, kept unrounded.
    """
    score = estimate_randomness(original, shuffled)
    count = stats.shuffle_count
    updated = stats.copy_with(
        shuffle_count=count + 1,
        average_step_count=_running_mean(stats.average_step_count, count, step_count),
        randomness_score=_running_mean(stats.randomness_score, count, score),
        execution_times=stats.execution_times + (float(execution_time_ms),),
    )
    logger.debug(
        f"{stats.algorithm_name}: shuffle #{updated.shuffle_count} "
        f"(steps={step_count}, score={score}, {execution_time_ms:.3f}ms)"
    )
    return updated


def average_execution_time(stats: AlgorithmStatistics) -> float:
    if not stats.execution_times:
        return 0.0
    return sum(stats.execution_times) / len(stats.execution_times)


def _compare(
    metric: str,
    a: AlgorithmStatistics,
    b: AlgorithmStatistics,
    value: Callable[[AlgorithmStatistics], float],
    pick: Callable,
) -> MetricComparison:
    # max/min return the first of equal elements, so ties go to ``a``
    winner = pick((a, b), key=value)
    return MetricComparison(
        metric=metric,
        first=(a.algorithm_name, value(a)),
        second=(b.algorithm_name, value(b)),
        winner=winner.algorithm_name,
    )


def compare_stats(a: AlgorithmStatistics, b: AlgorithmStatistics) -> StatsComparison:
    """Compare two algorithms: higher randomness wins, lower time and step count win.

    Ties go to ``a``.
    """
    return StatsComparison(
        randomness=_compare("randomness", a, b, lambda s: s.randomness_score, max),
        speed=_compare("speed", a, b, average_execution_time, min),
        steps=_compare("steps", a, b, lambda s: s.average_step_count, min),
    )


class StatisticsStore(Mapping[str, AlgorithmStatistics]):
    """Caller-owned statistics keyed by algorithm name.

    Nothing in the engine holds one of these; the consumer creates it and
    passes it around.
    """

    def __init__(self, algorithm_names: Iterable[str]) -> None:
        self._stats: Dict[str, AlgorithmStatistics] = {
            name: init_stats(name) for name in algorithm_names
        }

    def __getitem__(self, name: str) -> AlgorithmStatistics:
        return self._stats[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._stats)

    def __len__(self) -> int:
        return len(self._stats)

    def update(
        self,
        name: str,
        original: Sequence[Card],
        shuffled: Sequence[Card],
        execution_time_ms: float,
        step_count: int,
    ) -> AlgorithmStatistics:
        """Record one shuffle for ``name`` (a new entry is created on first use)."""
        current = self._stats.get(name) or init_stats(name)
        self._stats[name] = update_stats(current, original, shuffled, execution_time_ms, step_count)
        return self._stats[name]

    def compare(self, first: str, second: str) -> StatsComparison:
        return compare_stats(self[first], self[second])

    def clear(self) -> None:
        """Reset every algorithm at once."""
        self._stats = {name: init_stats(name) for name in self._stats}


def clear_all_stats(store: StatisticsStore) -> StatisticsStore:
    store.clear()
    logger.debug(f"Cleared statistics for {len(store)} algorithms")
    return store
