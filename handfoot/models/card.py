"""Card and CardCollection models."""

from collections import Counter
from enum import Enum, IntEnum
from typing import Iterable, Iterator

from pydantic import BaseModel, model_validator


class Color(str, Enum):
    """Suit color."""

    RED = "red"
    BLACK = "black"


class Suit(IntEnum):
    """Card suit."""

    DIAMOND = 0
    CLUB = 1
    HEART = 2
    SPADE = 3

    @property
    def color(self) -> Color:
        if self in (Suit.DIAMOND, Suit.HEART):
            return Color.RED
        return Color.BLACK


class Rank(IntEnum):
    """Card rank.

    Value order matches sorted display order: 3 < 4 < ... < K < A < 2
    """

    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12
    TWO = 13

    @property
    def points(self) -> int:
        """Point value of a regular card of this rank."""
        if self in (Rank.ACE, Rank.TWO):
            return 20
        if self == Rank.THREE:
            return 0
        if self <= Rank.SEVEN:
            return 5
        return 10


# Map rank to display string
RANK_NAMES = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.TWO: "2",
}

SUIT_SYMBOLS = {
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}

JOKER_POINTS = 50
RED_THREE_POINTS = 100


class Card(BaseModel, frozen=True):
    """Single card: a regular rank/suit pair, or the Joker (both None)."""

    rank: Rank | None = None
    suit: Suit | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> "Card":
        if (self.rank is None) != (self.suit is None):
            raise ValueError("Card needs both rank and suit, or neither for a Joker")
        return self

    @property
    def is_joker(self) -> bool:
        return self.rank is None

    @property
    def is_wild(self) -> bool:
        """Jokers and Twos are wild."""
        return self.is_joker or self.rank == Rank.TWO

    @property
    def is_red_three(self) -> bool:
        return self.rank == Rank.THREE and self.suit.color == Color.RED

    @property
    def can_be_booked(self) -> bool:
        """Whether the card can anchor a book or be picked up from the discard pile."""
        return not self.is_wild and self.rank != Rank.THREE

    @property
    def points(self) -> int:
        if self.is_joker:
            return JOKER_POINTS
        if self.is_red_three:
            return RED_THREE_POINTS
        return self.rank.points

    def matches(self, rank: Rank) -> bool:
        """Check if this card may be played onto a book of the given rank."""
        return self.is_wild or self.rank == rank

    def sort_key(self) -> tuple[int, int]:
        if self.is_joker:
            return (len(Rank) + 1, 0)
        return (self.rank.value, self.suit.value)

    def __str__(self) -> str:
        if self.is_joker:
            return "Joker"
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


JOKER = Card()


class CardCollection:
    """Unordered multiset of cards.

    Several decks are shuffled together, so the same card may be held
    more than once. Each held copy can be consumed exactly once.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize collection.

        Args:
            cards: Initial cards.
        """
        self._cards: Counter[Card] = Counter(cards or ())

    def add(self, card: Card) -> None:
        """Add a card."""
        self._cards[card] += 1

    def add_all(self, cards: Iterable[Card]) -> None:
        """Add every card in cards."""
        self._cards.update(cards)

    def remove(self, card: Card) -> None:
        """Remove one copy of card.

        Raises:
            ValueError: If the card is not held.
        """
        if self._cards[card] <= 0:
            raise ValueError(f"{card} not in collection")
        self._cards[card] -= 1
        if self._cards[card] == 0:
            del self._cards[card]

    def remove_all(self, cards: Iterable[Card]) -> None:
        """Remove one copy per listed card, or nothing if any is missing.

        Raises:
            ValueError: If the collection does not contain all the cards.
        """
        cards = list(cards)
        if not self.contains_all(cards):
            raise ValueError("Not all cards in collection")
        self._cards.subtract(cards)
        self._cards = +self._cards

    def contains(self, card: Card) -> bool:
        """Check if at least one copy of card is held."""
        return self._cards[card] > 0

    def contains_all(self, cards: Iterable[Card]) -> bool:
        """Check multiset containment (duplicates must be held as many times)."""
        wanted = Counter(cards)
        return all(self._cards[card] >= n for card, n in wanted.items())

    def count_rank(self, rank: Rank) -> int:
        """Count regular cards of the given rank."""
        return sum(n for card, n in self._cards.items() if card.rank == rank)

    def cards_by_rank(self, rank: Rank) -> list[Card]:
        """Get all regular cards of the given rank."""
        return [c for c in self if c.rank == rank]

    def count(self) -> int:
        """Get number of cards."""
        return self._cards.total()

    def is_empty(self) -> bool:
        """Check if collection is empty."""
        return self.count() == 0

    def points(self) -> int:
        """Sum of point values of all cards."""
        return sum(card.points * n for card, n in self._cards.items())

    def to_list(self) -> list[Card]:
        """Get cards as a sorted list."""
        return sorted(self, key=Card.sort_key)

    def copy(self) -> "CardCollection":
        """Create a copy of this collection."""
        return CardCollection(self)

    def __iter__(self) -> Iterator[Card]:
        return self._cards.elements()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, card: Card) -> bool:
        return self.contains(card)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardCollection):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        if self.is_empty():
            return "[]"
        return "[" + ", ".join(str(c) for c in self.to_list()) + "]"

    def __repr__(self) -> str:
        return f"CardCollection({self.to_list()!r})"


def create_full_deck() -> list[Card]:
    """Create one 54-card deck (52 + 2 jokers)."""
    cards = [Card(rank=rank, suit=suit) for rank in Rank for suit in Suit]
    cards.extend([JOKER, JOKER])
    return cards
