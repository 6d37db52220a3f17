"""Injectable randomness for the shuffle algorithms.

Algorithms never touch the global ``random`` module. They draw from a
``RandomSource`` so tests can feed a fixed trace and so a recorded run can be
replayed draw for draw.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union

from deckshuffle.errors import InvalidInputError


Draw = Union[int, float]


class RandomSource(ABC):
    """Base class for random draw providers."""

    @abstractmethod
    def randint(self, a: int, b: int) -> int:
        """Return an integer uniformly drawn from [a, b] inclusive."""
        pass

    @abstractmethod
    def random(self) -> float:
        """Return a float uniformly drawn from [0.0, 1.0)."""
        pass


class SeededRandomSource(RandomSource):
    """Random source backed by ``random.Random``. ``seed=None`` is non-deterministic."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self.rng.randint(a, b)

    def random(self) -> float:
        return self.rng.random()


class ScriptedRandomSource(RandomSource):
    """Replays a fixed sequence of draws.

    Integer draws answer ``randint`` and float draws answer ``random``; the
    trace is consumed strictly in order regardless of which method asks.
    """

    def __init__(self, draws: Iterable[Draw]) -> None:
        self.draws: List[Draw] = list(draws)
        self.cursor = 0

    @property
    def remaining(self) -> int:
        return len(self.draws) - self.cursor

    def _next(self) -> Draw:
        if self.cursor >= len(self.draws):
            raise InvalidInputError(
                f"Scripted random source exhausted after {len(self.draws)} draws"
            )
        value = self.draws[self.cursor]
        self.cursor += 1
        return value

    def randint(self, a: int, b: int) -> int:
        value = self._next()
        if value != int(value) or not a <= value <= b:
            raise InvalidInputError(
                f"Scripted draw {value!r} at index {self.cursor - 1} is not an integer in [{a}, {b}]"
            )
        return int(value)

    def random(self) -> float:
        value = self._next()
        if not 0.0 <= value < 1.0:
            raise InvalidInputError(
                f"Scripted draw {value!r} at index {self.cursor - 1} is not in [0, 1)"
            )
        return float(value)


class RecordingRandomSource(RandomSource):
    """Forwards to another source and keeps every value it hands out."""

    def __init__(self, inner: RandomSource) -> None:
        self.inner = inner
        self.draws: List[Draw] = []

    def randint(self, a: int, b: int) -> int:
        value = self.inner.randint(a, b)
        self.draws.append(value)
        return value

    def random(self) -> float:
        value = self.inner.random()
        self.draws.append(value)
        return value

    def replay(self) -> ScriptedRandomSource:
        """Scripted source that reproduces the draws recorded so far."""
        return ScriptedRandomSource(self.draws)
