"""One player's cards: hand, foot, play area, books and red threes."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from handfoot.errors import TurnError, TurnErrorCode
from handfoot.models.card import Card, CardCollection, Rank
from handfoot.models.game_state import Round

from .validator import BOOK_SIZE, MeldValidator, ValidationResult

logger = logging.getLogger(__name__)

_validator = MeldValidator()


def book_rank(book: list[Card]) -> Rank:
    """Get the rank a book is anchored on (the rank of its natural cards)."""
    for card in book:
        if not card.is_wild:
            return card.rank
    raise ValueError("Book holds no natural card")


def is_clean(book: list[Card]) -> bool:
    return not any(c.is_wild for c in book)


class PlayerCards(BaseModel):
    """Cards owned by one player during a round."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    hand: CardCollection = Field(default_factory=CardCollection)
    foot: CardCollection | None = None  # None once picked up

    play_area: dict[Rank, list[Card]] = Field(default_factory=dict)  # Books under construction
    books: list[list[Card]] = Field(default_factory=list)  # Completed, 7 cards each
    red_threes: int = 0

    @property
    def has_melded(self) -> bool:
        """Whether the player has put any cards down this round."""
        return bool(self.books) or any(self.play_area.values())

    @property
    def clean_books(self) -> list[list[Card]]:
        """Completed books without wilds, other than sevens."""
        return [b for b in self.books if is_clean(b) and book_rank(b) != Rank.SEVEN]

    @property
    def dirty_books(self) -> list[list[Card]]:
        """Completed books with at least one wild."""
        return [b for b in self.books if not is_clean(b)]

    @property
    def seven_books(self) -> list[list[Card]]:
        """Completed books of natural sevens."""
        return [b for b in self.books if is_clean(b) and book_rank(b) == Rank.SEVEN]

    @property
    def can_go_out(self) -> bool:
        return bool(self.clean_books) and bool(self.dirty_books)

    def can_play_rank(self, rank: Rank, cards: list[Card]) -> ValidationResult:
        """Check playing cards onto the book of one rank. Does not mutate."""
        return _validator.validate_rank(self, rank, cards)

    def can_play(self, round: Round, groups: dict[Rank, list[Card]]) -> ValidationResult:
        """Check a whole meld action for the given round. Does not mutate."""
        return _validator.validate_meld(self, round, groups)

    def play(self, round: Round, groups: dict[Rank, list[Card]]) -> None:
        """Play every group, or none of them.

        Raises:
            TurnError: The first rule the action breaks.
        """
        self.can_play(round, groups).raise_if_invalid()
        for rank, cards in groups.items():
            self.play_rank(rank, cards)

    def play_rank(self, rank: Rank, cards: list[Card]) -> None:
        """Move cards from the hand onto the book of one rank.

        A book reaching seven cards is completed. An emptied hand is
        refilled from the foot. Without a foot, the hand must keep at least
        two cards unless the player can already go out.

        Raises:
            TurnError: If the play breaks a rule. The hand and play area
                are left unchanged.
        """
        self.can_play_rank(rank, cards).raise_if_invalid()
        if not cards:
            return

        hand_before = self.hand.copy()
        self.hand.remove_all(cards)

        if self.hand.is_empty() and self.foot is not None:
            self.promote_foot()
        elif not _validator.keeps_enough_cards(self, len(self.hand)):
            self.hand = hand_before
            raise TurnError(
                TurnErrorCode.MUST_KEEP_ONE_CARD_IN_HAND,
                f"{len(self.hand) - len(cards)} cards would be left and the player cannot go out",
            )

        book = self.play_area.setdefault(rank, [])
        book.extend(cards)
        logger.debug(f"Played {cards} onto {rank.name} ({len(book)} cards)")

        if len(book) == BOOK_SIZE:
            self.books.append(self.play_area.pop(rank))
            logger.debug(f"Completed book of {rank.name}")

    def promote_foot(self) -> bool:
        """Pick up the foot into the hand.

        Returns:
            True if a foot was still available.
        """
        if self.foot is None:
            return False
        self.hand.add_all(self.foot)
        self.foot = None
        logger.debug("Foot picked up")
        return True

    def total_cards(self) -> int:
        """Count every card the player owns, banked red threes included."""
        return (
            len(self.hand)
            + (len(self.foot) if self.foot is not None else 0)
            + sum(len(cards) for cards in self.play_area.values())
            + sum(len(book) for book in self.books)
            + self.red_threes
        )

    def __str__(self) -> str:
        foot = "picked up" if self.foot is None else f"{len(self.foot)} cards"
        return (
            f"PlayerCards(hand={self.hand}, foot={foot}, "
            f"play_area={len(self.play_area)}, books={len(self.books)}, "
            f"red_threes={self.red_threes})"
        )
