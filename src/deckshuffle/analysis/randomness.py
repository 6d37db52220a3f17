"""Randomness quality scores comparing a shuffled deck to its original order.

These are advisory metrics: bad input scores 0 instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from scipy import stats

from deckshuffle.deck import Card

logger = logging.getLogger(__name__)

# Weights of the two displacement components (sum to 1)
DISPLACED_FRACTION_WEIGHT = 0.6
MEAN_DISPLACEMENT_WEIGHT = 0.4


@dataclass(frozen=True)
class RandomnessReport:
    """All randomness figures for one shuffle."""

    displacement_score: int   # 0-100
    entropy_score: float      # 0-100
    run_count: int            # Same-suit runs in the shuffled deck (lower = better mixed)


def displacements(original: Sequence[Card], shuffled: Sequence[Card]) -> Optional[np.ndarray]:
    """Absolute index change of every card, in original order.

    Returns None when the decks differ in length or in their set of ids.
    """
    if len(original) != len(shuffled):
        logger.warning(
            f"Cannot score decks of different lengths ({len(original)} vs {len(shuffled)})"
        )
        return None

    new_index = {card.id: index for index, card in enumerate(shuffled)}
    if (
        len(new_index) != len(shuffled)
        or len({card.id for card in original}) != len(original)
        or any(card.id not in new_index for card in original)
    ):
        logger.warning("Cannot score decks holding different cards")
        return None

    old = np.arange(len(original))
    new = np.array([new_index[card.id] for card in original], dtype=int)
    return np.abs(new - old)


def displacement_score(original: Sequence[Card], shuffled: Sequence[Card]) -> int:
    """Score 0-100 from how many cards moved and how far they moved on average.

    ``round(100 * (0.6 * displaced_fraction + 0.4 * min(mean_d / (N / 2), 1)))``
    """
    d = displacements(original, shuffled)
    if d is None or d.size == 0:
        return 0

    size = d.size
    displaced_fraction = np.count_nonzero(d) / size
    normalized_mean = min(float(d.mean()) / (size / 2), 1.0)
    score = 100 * (
        DISPLACED_FRACTION_WEIGHT * displaced_fraction
        + MEAN_DISPLACEMENT_WEIGHT * normalized_mean
    )
    return int(round(score))


def entropy_score(original: Sequence[Card], shuffled: Sequence[Card]) -> float:
    """Normalized Shannon entropy (0-100) of the displacement histogram.

    Buckets are every integer displacement from 0 to the largest one. An
    unmoved deck scores 0.
    """
    d = displacements(original, shuffled)
    if d is None or d.size == 0:
        return 0.0

    max_displacement = int(d.max())
    if max_displacement == 0:
        return 0.0

    histogram = np.bincount(d, minlength=max_displacement + 1)
    entropy_bits = stats.entropy(histogram, base=2)
    max_entropy = np.log2(histogram.size)
    return float(entropy_bits / max_entropy * 100)


def run_count(deck: Sequence[Card]) -> int:
    """Number of maximal runs of consecutive same-suit cards."""
    if len(deck) == 0:
        return 0
    return 1 + sum(
        1 for previous, card in zip(deck, deck[1:]) if card.suit != previous.suit
    )


def estimate_randomness(original: Sequence[Card], shuffled: Sequence[Card]) -> int:
    """Headline randomness score (the displacement score)."""
    return displacement_score(original, shuffled)


def analyze_randomness(original: Sequence[Card], shuffled: Sequence[Card]) -> RandomnessReport:
    return RandomnessReport(
        displacement_score=displacement_score(original, shuffled),
        entropy_score=entropy_score(original, shuffled),
        run_count=run_count(shuffled),
    )
