"""Meld validation for plays into the play area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from handfoot.errors import TurnError, TurnErrorCode
from handfoot.models.card import Card, Rank
from handfoot.models.game_state import Round

if TYPE_CHECKING:
    from .player_cards import PlayerCards

BOOK_SIZE = 7  # Cards in a completed book
MIN_BOOK_SIZE = 3  # Cards needed to start a book

# Ranks that can never anchor a book
UNBOOKABLE_RANKS = (Rank.TWO, Rank.THREE)


@dataclass
class ValidationResult:
    """Result of meld validation."""

    is_valid: bool
    error: TurnErrorCode | None = None
    error_message: str = ""

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: TurnErrorCode, message: str) -> ValidationResult:
        return cls(is_valid=False, error=error, error_message=message)

    def raise_if_invalid(self) -> None:
        """Raise the rejection as a TurnError.

        Raises:
            TurnError: If the result is not valid.
        """
        if not self.is_valid:
            raise TurnError(self.error, self.error_message)


class MeldValidator:
    """Validates plays against a player's cards without mutating them."""

    def validate_rank(
        self,
        player: PlayerCards,
        rank: Rank,
        cards: list[Card],
    ) -> ValidationResult:
        """Validate playing cards onto the book of one rank.

        Rules are checked in a fixed order and the first failure is returned.

        Args:
            player: Player making the play
            rank: Rank of the book
            cards: Cards taken from the player's hand

        Returns:
            ValidationResult
        """
        if rank in UNBOOKABLE_RANKS or not all(c.matches(rank) for c in cards):
            return ValidationResult.fail(
                TurnErrorCode.NOT_ALL_CARDS_MATCH_RANK,
                f"Cards must be wild or of rank {rank.name}",
            )

        if not player.hand.contains_all(cards):
            return ValidationResult.fail(
                TurnErrorCode.NOT_ALL_CARDS_IN_HAND,
                "Player does not hold the submitted cards",
            )

        existing = player.play_area.get(rank, [])
        total = len(existing) + len(cards)
        if total > BOOK_SIZE:
            return ValidationResult.fail(
                TurnErrorCode.TOO_MANY_CARDS_IN_BOOK,
                f"Book of {rank.name} would hold {total} cards",
            )

        if not existing and total < MIN_BOOK_SIZE:
            return ValidationResult.fail(
                TurnErrorCode.TOO_FEW_CARDS_IN_BOOK,
                f"A new book needs at least {MIN_BOOK_SIZE} cards, got {total}",
            )

        num_wild = sum(1 for c in existing if c.is_wild) + sum(1 for c in cards if c.is_wild)
        if num_wild >= total - num_wild:
            return ValidationResult.fail(
                TurnErrorCode.TOO_MANY_WILDS_IN_BOOK,
                f"{num_wild} wild cards against {total - num_wild} natural cards",
            )

        return ValidationResult.ok()

    def validate_meld(
        self,
        player: PlayerCards,
        round: Round,
        groups: dict[Rank, list[Card]],
    ) -> ValidationResult:
        """Validate a whole meld action covering one or more books.

        Args:
            player: Player making the play
            round: Current round (sets the first-meld threshold)
            groups: Cards to play, keyed by book rank

        Returns:
            ValidationResult
        """
        all_cards = [card for cards in groups.values() for card in cards]

        # First meld of the round must reach the threshold
        if not player.has_melded:
            points = sum(c.points for c in all_cards)
            if points < round.meld_threshold:
                return ValidationResult.fail(
                    TurnErrorCode.NOT_ENOUGH_MELD,
                    f"First meld worth {points}, round {round.name} needs {round.meld_threshold}",
                )

        for rank, cards in groups.items():
            result = self.validate_rank(player, rank, cards)
            if not result.is_valid:
                return result

        # Groups may each fit the hand yet share the same card
        if not player.hand.contains_all(all_cards):
            return ValidationResult.fail(
                TurnErrorCode.NOT_ALL_CARDS_IN_HAND,
                "Groups use more copies of a card than the hand holds",
            )

        if all_cards and not self.keeps_enough_cards(player, len(player.hand) - len(all_cards)):
            return ValidationResult.fail(
                TurnErrorCode.MUST_KEEP_ONE_CARD_IN_HAND,
                "Playing these cards would leave the hand without a discard",
            )

        return ValidationResult.ok()

    def keeps_enough_cards(self, player: PlayerCards, remaining: int) -> bool:
        """Check the hand-retention rule for a hand of `remaining` cards.

        With a foot left an empty hand is refilled from it. Without one, a
        hand of one card or none is only allowed when the player can go out.
        """
        if player.foot is not None:
            return True
        return remaining > 1 or player.can_go_out
