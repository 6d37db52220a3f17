"""Immutable deck representation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Sequence

from deckshuffle.errors import InvalidInputError, InvariantViolationError


STANDARD_DECK_SIZE = 52


class Suit(Enum):
    """Playing card suits, in canonical deck order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(Enum):
    """Playing card ranks, in canonical deck order."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    ``id`` is the identity key across permutations. ``position`` and
    ``highlighted`` describe where the card currently sits and are replaced,
    never mutated.
    """

    id: str
    suit: Suit
    rank: Rank
    position: int
    highlighted: bool = False

    def copy_with(self, **changes) -> "Card":  # type: ignore
        """Create new Card with changes."""
        return replace(self, **changes)

    def __str__(self) -> str:
        return f"{self.rank.value} of {self.suit.value}"


Deck = tuple[Card, ...]


def card_id(suit: Suit, rank: Rank) -> str:
    return f"{suit.value}-{rank.value}"


def create_ordered_deck(size: int = STANDARD_DECK_SIZE) -> Deck:
    """Create a deck in canonical order (suit-major, rank-minor).

    Order: Hearts A-K, Diamonds A-K, Clubs A-K, Spades A-K. Smaller sizes
    take the first ``size`` cards of that order.

    Raises:
        InvalidInputError: If size is not in 1..52
    """
    if not 1 <= size <= STANDARD_DECK_SIZE:
        raise InvalidInputError(
            f"Deck size must be between 1 and {STANDARD_DECK_SIZE}, got {size}"
        )

    cards = []
    for suit in Suit:
        for rank in Rank:
            if len(cards) == size:
                return tuple(cards)
            cards.append(Card(id=card_id(suit, rank), suit=suit, rank=rank, position=len(cards)))
    return tuple(cards)


def renumber(cards: Iterable[Card], highlighted: Sequence[int] = ()) -> Deck:
    """Set each card's position to its index and highlight only ``highlighted``."""
    marked = set(highlighted)
    return tuple(
        card.copy_with(position=index, highlighted=index in marked)
        for index, card in enumerate(cards)
    )


def reset_positions(deck: Sequence[Card]) -> Deck:
    """Reset positions to current index order and remove highlights."""
    return renumber(deck)


def clear_highlights(deck: Sequence[Card]) -> Deck:
    """Remove highlights without touching positions."""
    return tuple(card.copy_with(highlighted=False) for card in deck)


def validate_deck(deck: Sequence[Card]) -> None:
    """Check that a deck can be permuted.

    Raises:
        InvalidInputError: If the deck is empty
        InvariantViolationError: If two cards share an id
    """
    if len(deck) == 0:
        raise InvalidInputError("Cannot permute an empty deck")

    seen: set[str] = set()
    for card in deck:
        if card.id in seen:
            raise InvariantViolationError(f"Duplicate card id in deck: {card.id}")
        seen.add(card.id)


def deck_ids(deck: Sequence[Card]) -> list[str]:
    return [card.id for card in deck]
