"""Statistical checks on shuffle output distributions."""

from collections import Counter
from itertools import permutations

from scipy import stats

from deckshuffle.algorithms import shuffle
from deckshuffle.analysis.randomness import displacement_score
from deckshuffle.deck import create_ordered_deck, deck_ids
from deckshuffle.random_source import SeededRandomSource


def test_fisher_yates_is_uniform() -> None:
    """All 24 orderings of a 4-card deck appear with equal frequency (chi-square)."""
    deck = create_ordered_deck(4)
    rng = SeededRandomSource(seed=20240101)
    trials = 10_000

    counts = Counter(tuple(deck_ids(shuffle("Fisher-Yates", deck, rng))) for _ in range(trials))

    orderings = list(permutations(deck_ids(deck)))
    assert set(counts) == set(orderings)

    observed = [counts[ordering] for ordering in orderings]
    _, p_value = stats.chisquare(observed)
    assert p_value > 0.0001


def test_fisher_yates_mixes_full_deck() -> None:
    """Average displacement score of a uniform shuffle sits well above zero."""
    deck = create_ordered_deck()
    rng = SeededRandomSource(seed=7)

    scores = [displacement_score(deck, shuffle("Fisher-Yates", deck, rng)) for _ in range(200)]

    assert 50 < sum(scores) / len(scores) < 100
