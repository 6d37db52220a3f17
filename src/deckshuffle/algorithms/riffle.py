"""Riffle shuffle: split near the middle, then interleave the halves."""

from deckshuffle.algorithms.base import AlgorithmDescriptor, MoveEmitter, ShuffleAlgorithm
from deckshuffle.random_source import RandomSource
from deckshuffle.steps import StepKind


def split_point(size: int, variation: int) -> int:
    """Midpoint shifted by ``variation``, clamped to [1, size - 1] (1 for a single card)."""
    return max(1, min(size - 1, size // 2 + variation))


class RiffleShuffle(ShuffleAlgorithm):
    """Simulates the physical riffle shuffle.

    Each pick is a plain 50/50 draw while both halves still hold cards; once
    one half is empty the rest come from the other without drawing.

    Working frame while interleaving: ``[output | left rest | right rest]``.
    Taking from the left is a move of index ``k`` onto itself (``k`` is the
    output length); taking from the right pulls ``k + left_remaining`` down
    to ``k``.
    """

    descriptor = AlgorithmDescriptor(
        name="Riffle Shuffle",
        description=(
            "Simulates the physical riffle shuffle used in card games. The deck is "
            "split roughly in half and the cards are interleaved with slight "
            "randomization. Commonly used in casinos and card games."
        ),
        complexity="O(n)",
    )

    def _run(self, size: int, rng: RandomSource, emitter: MoveEmitter) -> None:
        split = split_point(size, rng.randint(-1, 1))
        left_size = min(split, size)
        right_size = size - left_size

        everything = range(size)
        emitter.annotate(
            StepKind.SPLIT,
            everything,
            f"Step {emitter.step_number}: Split deck at position {split} "
            f"({left_size} cards left, {right_size} cards right)",
        )

        left_index = 0
        right_index = 0
        while left_index < left_size or right_index < right_size:
            taken = left_index + right_index
            left_remaining = left_size - left_index
            take_left = left_index < left_size and (
                right_index >= right_size or rng.random() < 0.5
            )

            if take_left:
                emitter.move(
                    [taken], [taken],
                    f"Step {emitter.step_number}: Take card from left half "
                    f"(position {left_index} in left half)",
                )
                left_index += 1
            else:
                emitter.move(
                    [taken + left_remaining], [taken],
                    f"Step {emitter.step_number}: Take card from right half "
                    f"(position {right_index} in right half)",
                )
                right_index += 1
