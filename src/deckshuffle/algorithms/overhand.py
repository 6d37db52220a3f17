"""Overhand shuffle: small groups from the top, stacked onto the new pile."""

from deckshuffle.algorithms.base import AlgorithmDescriptor, MoveEmitter, ShuffleAlgorithm
from deckshuffle.random_source import RandomSource


MAX_GROUP_SIZE = 7


class OverhandShuffle(ShuffleAlgorithm):
    """Common casual shuffle with poor mixing.

    Working frame: ``[working | accumulator]``. Each group leaves the front of
    the working part and lands at the front of the accumulator, so the most
    recently taken group ends up on top of the new pile.
    """

    descriptor = AlgorithmDescriptor(
        name="Overhand Shuffle",
        description=(
            "Common casual shuffling method where small groups of cards are taken "
            "from the top of the deck and placed on the bottom. While intuitive, it "
            "requires many iterations to achieve good randomization and has poor "
            "mixing properties."
        ),
        complexity="O(n²) for full randomization",
    )

    def _run(self, size: int, rng: RandomSource, emitter: MoveEmitter) -> None:
        remaining = size
        while remaining > 0:
            group = rng.randint(1, min(MAX_GROUP_SIZE, remaining))
            plural = "s" if group > 1 else ""
            emitter.move(
                range(group),
                range(remaining - group, remaining),
                f"Step {emitter.step_number}: Take {group} card{plural} from top and place on bottom",
            )
            remaining -= group
