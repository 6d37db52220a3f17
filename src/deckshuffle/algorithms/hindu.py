"""Hindu shuffle: packets pulled from the bottom, dropped on top."""

from deckshuffle.algorithms.base import AlgorithmDescriptor, MoveEmitter, ShuffleAlgorithm
from deckshuffle.random_source import RandomSource


MAX_PACKET_SIZE = 6


class HinduShuffle(ShuffleAlgorithm):
    """Mirror of the overhand shuffle.

    Working frame: ``[accumulator | working]``. Each packet leaves the tail of
    the working part with its internal order kept and is appended to the back
    of the accumulator.
    """

    descriptor = AlgorithmDescriptor(
        name="Hindu Shuffle",
        description=(
            "Traditional shuffle method from South Asia where small packets of cards "
            "are pulled from the bottom of the deck and dropped on top. Similar to "
            "overhand shuffle but with opposite direction of movement."
        ),
        complexity="O(n²) for full randomization",
    )

    def _run(self, size: int, rng: RandomSource, emitter: MoveEmitter) -> None:
        dropped = 0
        while dropped < size:
            packet = rng.randint(1, min(MAX_PACKET_SIZE, size - dropped))
            plural = "s" if packet > 1 else ""
            emitter.move(
                range(size - packet, size),
                range(dropped, dropped + packet),
                f"Step {emitter.step_number}: Pull {packet} card{plural} from bottom and drop on top",
            )
            dropped += packet
