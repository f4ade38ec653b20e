"""Draw pile and discard pile."""

import random
from typing import Iterator

from handfoot.errors import TurnError, TurnErrorCode

from .card import Card, create_full_deck


class Deck:
    """Ordered stack of cards. The top of the stack is the end of the list."""

    def __init__(self, cards: list[Card] | None = None):
        self._cards: list[Card] = list(cards) if cards else []

    @classmethod
    def empty(cls) -> "Deck":
        return cls()

    @classmethod
    def deal(cls, num_players: int, rng: random.Random | None = None) -> "Deck":
        """Build a shuffled draw pile from num_players + 1 full decks.

        Args:
            num_players: Number of players at the table.
            rng: Random source (a fresh unseeded one if not provided).

        Returns:
            Deck of 54 * (num_players + 1) cards.
        """
        if num_players < 1:
            raise ValueError(f"Need at least one player, got {num_players}")
        rng = rng or random.Random()

        cards: list[Card] = []
        for _ in range(num_players + 1):
            cards.extend(create_full_deck())
        rng.shuffle(cards)

        return cls(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._cards)

    def take(self, num: int) -> list[Card]:
        """Remove and return the top num cards, topmost first.

        Raises:
            TurnError: NOT_ENOUGH_CARDS if fewer than num cards remain.
        """
        if len(self._cards) < num:
            raise TurnError(
                TurnErrorCode.NOT_ENOUGH_CARDS,
                f"Wanted {num} cards, only {len(self._cards)} left",
            )
        return [self._cards.pop() for _ in range(num)]

    def pop(self) -> Card:
        """Remove and return the top card."""
        return self.take(1)[0]

    def peek(self) -> Card | None:
        """Get the top card without removing it."""
        return self._cards[-1] if self._cards else None

    def push(self, card: Card) -> None:
        """Put a card on top."""
        self._cards.append(card)

    def is_empty(self) -> bool:
        return not self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
