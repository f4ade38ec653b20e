"""Base strategy class for handfoot.

Defines the decisions a player makes during a turn. The engine only
enforces the rules; what to draw, play and discard comes from here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from handfoot.models.card import Card, Rank
from handfoot.models.game_state import DrawAction, Round

if TYPE_CHECKING:
    from handfoot.game.player_cards import PlayerCards


@dataclass
class DrawChoice:
    """How to take cards at the start of a turn.

    For a pickup, meld_groups lists hand cards to meld together with the
    top card of the discard pile, keyed by book rank.
    """

    action: DrawAction
    meld_groups: dict[Rank, list[Card]] = field(default_factory=dict)

    @classmethod
    def draw(cls) -> DrawChoice:
        return cls(DrawAction.DRAW)

    @classmethod
    def pickup(cls, meld_groups: dict[Rank, list[Card]] | None = None) -> DrawChoice:
        return cls(DrawAction.PICKUP, dict(meld_groups or {}))


class Strategy(ABC):
    """Abstract base class for player strategies.

    All AI or UI players must inherit from this class
    and implement the required methods.
    """

    @abstractmethod
    def choose_draw(self, round: Round, player: PlayerCards) -> DrawChoice:
        """Decide between drawing and picking up the discard pile.

        Args:
            round: Current round
            player: Copy of the acting player's cards

        Returns:
            DrawChoice
        """
        pass

    @abstractmethod
    def choose_play(self, round: Round, player: PlayerCards) -> None:
        """Meld cards by calling player.play any number of times.

        Args:
            round: Current round
            player: The acting player's live cards
        """
        pass

    @abstractmethod
    def choose_discard(self, round: Round, player: PlayerCards) -> Card:
        """Select a card from the hand to discard.

        Called again until the returned card is in the hand.

        Args:
            round: Current round
            player: Copy of the acting player's cards

        Returns:
            Card to discard
        """
        pass


class CallbackStrategy(Strategy):
    """Strategy built from three plain functions."""

    def __init__(
        self,
        draw: Callable[[Round, PlayerCards], DrawChoice],
        play: Callable[[Round, PlayerCards], None],
        discard: Callable[[Round, PlayerCards], Card],
    ):
        self._draw = draw
        self._play = play
        self._discard = discard

    def choose_draw(self, round: Round, player: PlayerCards) -> DrawChoice:
        return self._draw(round, player)

    def choose_play(self, round: Round, player: PlayerCards) -> None:
        self._play(round, player)

    def choose_discard(self, round: Round, player: PlayerCards) -> Card:
        return self._discard(round, player)
