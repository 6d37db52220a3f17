"""Shuffle algorithms and their step recorders."""

from deckshuffle.algorithms.base import (
    AlgorithmDescriptor,
    BulkEmitter,
    MoveEmitter,
    RecordingEmitter,
    ShuffleAlgorithm,
)
from deckshuffle.algorithms.exchange import FisherYatesShuffle
from deckshuffle.algorithms.riffle import RiffleShuffle
from deckshuffle.algorithms.overhand import OverhandShuffle
from deckshuffle.algorithms.hindu import HinduShuffle
from deckshuffle.algorithms.registry import (
    ALGORITHMS,
    ShuffleOutcome,
    get_algorithm,
    list_algorithms,
    record_steps,
    run_shuffle,
    shuffle,
)

__all__ = [
    # Base
    "AlgorithmDescriptor",
    "BulkEmitter",
    "MoveEmitter",
    "RecordingEmitter",
    "ShuffleAlgorithm",
    # Algorithms
    "FisherYatesShuffle",
    "RiffleShuffle",
    "OverhandShuffle",
    "HinduShuffle",
    # Registry
    "ALGORITHMS",
    "ShuffleOutcome",
    "get_algorithm",
    "list_algorithms",
    "record_steps",
    "run_shuffle",
    "shuffle",
]
