"""Randomness scoring and running statistics."""

from deckshuffle.analysis.randomness import (
    RandomnessReport,
    analyze_randomness,
    displacement_score,
    displacements,
    entropy_score,
    estimate_randomness,
    run_count,
)
from deckshuffle.analysis.statistics import (
    AlgorithmStatistics,
    MetricComparison,
    StatisticsStore,
    StatsComparison,
    average_execution_time,
    clear_all_stats,
    compare_stats,
    init_stats,
    update_stats,
)

__all__ = [
    # Randomness
    "RandomnessReport",
    "analyze_randomness",
    "displacement_score",
    "displacements",
    "entropy_score",
    "estimate_randomness",
    "run_count",
    # Statistics
    "AlgorithmStatistics",
    "MetricComparison",
    "StatisticsStore",
    "StatsComparison",
    "average_execution_time",
    "clear_all_stats",
    "compare_stats",
    "init_stats",
    "update_stats",
]
