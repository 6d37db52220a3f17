"""Error taxonomy for the shuffle engine."""


class ShuffleEngineError(Exception):
    """Base class for shuffle engine errors."""


class InvalidInputError(ShuffleEngineError, ValueError):
    """Caller passed something the engine cannot work with.

    Raised for empty decks, unknown algorithm names, exhausted draw traces
    and playback requests past either end of a step list.
    """


class InvariantViolationError(ShuffleEngineError, ValueError):
    """A structural invariant was broken (duplicate ids, bad record indices)."""
