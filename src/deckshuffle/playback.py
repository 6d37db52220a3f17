"""Pure helpers for step-by-step playback of a recorded shuffle.

The consumer owns timing, pausing and cancellation. These helpers only
compute the deck for a given step index; the index lives in an immutable
``PlaybackState`` the consumer holds, never inside the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from deckshuffle.deck import Card, Deck
from deckshuffle.errors import InvalidInputError
from deckshuffle.steps import TransformationRecord, apply_step, replay

MIN_SPEED = 0.5
MAX_SPEED = 3.0


@dataclass(frozen=True)
class PlaybackConfig:
    """Timing knobs for a playback consumer."""

    base_delay_ms: float = 1000.0  # Delay between steps at 1x
    speed: float = 1.0             # Clamped to [0.5, 3.0]

    def __post_init__(self) -> None:
        object.__setattr__(self, "speed", min(MAX_SPEED, max(MIN_SPEED, self.speed)))

    @property
    def step_delay_ms(self) -> float:
        return self.base_delay_ms / self.speed

    def with_speed(self, speed: float) -> "PlaybackConfig":
        return replace(self, speed=speed)


@dataclass(frozen=True)
class PlaybackState:
    """Where a playback is: ``index`` is the last applied step (-1 = none)."""

    original: Deck
    steps: tuple[TransformationRecord, ...]
    index: int = -1
    deck: Deck = field(default=())  # Derived from original and index when left empty

    def __post_init__(self) -> None:
        object.__setattr__(self, "original", tuple(self.original))
        object.__setattr__(self, "steps", tuple(self.steps))
        if not self.deck and self.original:
            object.__setattr__(self, "deck", replay(self.original, self.steps, self.index))

    @classmethod
    def start(
        cls,
        original: Sequence[Card],
        steps: Sequence[TransformationRecord],
    ) -> "PlaybackState":
        return cls(original=tuple(original), steps=tuple(steps), index=-1)

    @property
    def is_finished(self) -> bool:
        return self.index == len(self.steps) - 1

    @property
    def current_step(self) -> Optional[TransformationRecord]:
        if self.index < 0:
            return None
        return self.steps[self.index]

    def step_forward(self) -> "PlaybackState":
        """Apply the next step.

        Raises:
            InvalidInputError: If every step has been applied already
        """
        if self.is_finished:
            raise InvalidInputError("Playback is already at the last step")
        next_index = self.index + 1
        return replace(self, index=next_index, deck=apply_step(self.deck, self.steps[next_index]))

    def step_back(self) -> "PlaybackState":
        """Go back one step by replaying from the original deck.

        Raises:
            InvalidInputError: If no step has been applied yet
        """
        if self.index < 0:
            raise InvalidInputError("Playback is already at the start")
        return self.seek(self.index - 1)

    def seek(self, index: int) -> "PlaybackState":
        """Jump to any step index (-1 for the start) by full replay."""
        return replace(self, index=index, deck=replay(self.original, self.steps, index))
