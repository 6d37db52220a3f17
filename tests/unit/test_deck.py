"""Tests for the immutable deck model."""

import pytest
from deckshuffle.deck import (
    Card,
    Rank,
    Suit,
    clear_highlights,
    create_ordered_deck,
    deck_ids,
    renumber,
    reset_positions,
    validate_deck,
)
from deckshuffle.errors import InvalidInputError, InvariantViolationError


def test_ordered_deck_is_suit_major() -> None:
    """Test canonical order: hearts A-K, diamonds, clubs, spades."""
    deck = create_ordered_deck()

    assert len(deck) == 52
    assert deck[0].id == "hearts-A"
    assert deck[12].id == "hearts-K"
    assert deck[13].id == "diamonds-A"
    assert deck[-1].id == "spades-K"
    assert [card.position for card in deck] == list(range(52))
    assert not any(card.highlighted for card in deck)
    assert len(set(deck_ids(deck))) == 52


def test_ordered_deck_smaller_size() -> None:
    deck = create_ordered_deck(5)

    assert deck_ids(deck) == ["hearts-A", "hearts-2", "hearts-3", "hearts-4", "hearts-5"]


@pytest.mark.parametrize("size", [0, -1, 53])
def test_ordered_deck_rejects_bad_size(size: int) -> None:
    with pytest.raises(InvalidInputError):
        create_ordered_deck(size)


def test_card_immutability() -> None:
    """Test Card is immutable."""
    card = Card(id="hearts-A", suit=Suit.HEARTS, rank=Rank.ACE, position=0)

    with pytest.raises(AttributeError):
        card.position = 3  # type: ignore

    moved = card.copy_with(position=3, highlighted=True)
    assert moved.position == 3
    assert moved.highlighted
    assert card.position == 0


def test_reset_positions_renumbers_and_unhighlights() -> None:
    deck = tuple(reversed(renumber(create_ordered_deck(4), highlighted=[0, 2])))

    reset = reset_positions(deck)

    assert [card.position for card in reset] == [0, 1, 2, 3]
    assert deck_ids(reset) == deck_ids(deck)
    assert not any(card.highlighted for card in reset)


def test_clear_highlights_keeps_positions() -> None:
    deck = renumber(create_ordered_deck(3), highlighted=[1])

    cleared = clear_highlights(deck)

    assert [card.position for card in cleared] == [0, 1, 2]
    assert not any(card.highlighted for card in cleared)


def test_validate_deck_rejects_empty() -> None:
    with pytest.raises(InvalidInputError):
        validate_deck(())


def test_validate_deck_rejects_duplicates() -> None:
    deck = create_ordered_deck(3)

    with pytest.raises(InvariantViolationError, match="hearts-A"):
        validate_deck(deck + (deck[0],))
