"""Fisher-Yates exchange shuffle."""

from deckshuffle.algorithms.base import AlgorithmDescriptor, MoveEmitter, ShuffleAlgorithm
from deckshuffle.random_source import RandomSource


class FisherYatesShuffle(ShuffleAlgorithm):
    """Unbiased shuffle: every one of the N! orderings is equally likely.

    For i from the last index down to 1, draw j from [0, i] and swap i and j.
    """

    descriptor = AlgorithmDescriptor(
        name="Fisher-Yates",
        description=(
            "Modern unbiased shuffle algorithm that produces a uniformly random "
            "permutation. Each card has an equal probability of ending up in any "
            "position. This is the gold standard for computer-based shuffling."
        ),
        complexity="O(n)",
    )

    def _run(self, size: int, rng: RandomSource, emitter: MoveEmitter) -> None:
        for i in range(size - 1, 0, -1):
            j = rng.randint(0, i)
            emitter.swap(
                i, j,
                f"Step {emitter.step_number}: Swap card at position {i} with card at position {j}",
            )
