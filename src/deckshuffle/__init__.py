"""Shuffle engine for a card-shuffling visualizer.

Four shuffle algorithms, each with a step-recording mode whose records replay
to exactly the bulk result, plus randomness scoring and running statistics.
"""

from deckshuffle.deck import (
    Card,
    Deck,
    Rank,
    Suit,
    clear_highlights,
    create_ordered_deck,
    reset_positions,
)
from deckshuffle.errors import (
    InvalidInputError,
    InvariantViolationError,
    ShuffleEngineError,
)
from deckshuffle.random_source import (
    RandomSource,
    RecordingRandomSource,
    ScriptedRandomSource,
    SeededRandomSource,
)
from deckshuffle.steps import (
    StepKind,
    TransformationRecord,
    apply_step,
    replay,
)
from deckshuffle.algorithms import (
    AlgorithmDescriptor,
    ShuffleOutcome,
    get_algorithm,
    list_algorithms,
    record_steps,
    run_shuffle,
    shuffle,
)
from deckshuffle.analysis import (
    AlgorithmStatistics,
    RandomnessReport,
    StatisticsStore,
    StatsComparison,
    analyze_randomness,
    clear_all_stats,
    compare_stats,
    entropy_score,
    estimate_randomness,
    init_stats,
    run_count,
    update_stats,
)
from deckshuffle.playback import PlaybackConfig, PlaybackState

__all__ = [
    # Deck
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "clear_highlights",
    "create_ordered_deck",
    "reset_positions",
    # Errors
    "InvalidInputError",
    "InvariantViolationError",
    "ShuffleEngineError",
    # Randomness sources
    "RandomSource",
    "RecordingRandomSource",
    "ScriptedRandomSource",
    "SeededRandomSource",
    # Steps
    "StepKind",
    "TransformationRecord",
    "apply_step",
    "replay",
    # Algorithms
    "AlgorithmDescriptor",
    "ShuffleOutcome",
    "get_algorithm",
    "list_algorithms",
    "record_steps",
    "run_shuffle",
    "shuffle",
    # Analysis
    "AlgorithmStatistics",
    "RandomnessReport",
    "StatisticsStore",
    "StatsComparison",
    "analyze_randomness",
    "clear_all_stats",
    "compare_stats",
    "entropy_score",
    "estimate_randomness",
    "init_stats",
    "run_count",
    "update_stats",
    # Playback
    "PlaybackConfig",
    "PlaybackState",
]
