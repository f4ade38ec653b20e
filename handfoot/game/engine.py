"""Game engine for Hand and Foot."""

from __future__ import annotations

import logging
import random

from handfoot.config import Config
from handfoot.errors import TurnError, TurnErrorCode
from handfoot.models.card import Card, CardCollection, Rank
from handfoot.models.deck import Deck
from handfoot.models.game_state import DrawAction, Round, TurnResult
from handfoot.strategy.base import Strategy

from .player_cards import PlayerCards
from .scoring import ScoreBreakdown, score_player

logger = logging.getLogger(__name__)

DRAW_SIZE = 2  # Cards drawn from the deck per turn
PICKUP_SIZE = 7  # Cards taken from the discard pile, top card included
LOCKED_PICKUP_MATCHES = 2  # Same-rank cards needed in hand to pick up a locked pile


class Game:
    """One round of Hand and Foot.

    Holds every player's cards, the draw pile and the discard pile, and
    runs turns for whichever player the caller names.
    """

    def __init__(
        self,
        players: list[PlayerCards],
        deck: Deck,
        round: Round = Round.ONE,
        discard_pile: Deck | None = None,
        locked: bool = False,
        config: Config | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game.

        Args:
            players: Cards of each player, in seat order
            deck: Draw pile
            round: Current round
            discard_pile: Discard pile (empty if not provided)
            locked: Whether the discard pile is locked
            config: Configuration (uses defaults if not provided)
            rng: Random source for later deals (seeded from config if not provided)
        """
        self.players = players
        self.deck = deck
        self.round = round
        self.discard_pile = discard_pile or Deck.empty()
        self.locked = locked
        self.config = config or Config()
        self.rules = self.config.rules
        self.rng = rng or random.Random(self.config.game.seed)

    @classmethod
    def deal(
        cls,
        num_players: int | None = None,
        round: Round = Round.ONE,
        config: Config | None = None,
        rng: random.Random | None = None,
    ) -> Game:
        """Shuffle a fresh deck and deal a hand and a foot to every player.

        Args:
            num_players: Number of players (uses config if not specified)
            round: Round to deal
            config: Configuration (uses defaults if not provided)
            rng: Random source (seeded from config if not provided)

        Returns:
            New Game
        """
        config = config or Config()
        if num_players is None:
            num_players = config.game.num_players
        rng = rng or random.Random(config.game.seed)

        deck = Deck.deal(num_players, rng)
        players = []
        for _ in range(num_players):
            hand = CardCollection(deck.take(config.rules.hand_size))
            foot = CardCollection(deck.take(config.rules.foot_size))
            players.append(PlayerCards(hand=hand, foot=foot))

        logger.info(
            f"Dealt round {round.name} to {num_players} players, {len(deck)} cards left to draw"
        )
        return cls(players, deck, round=round, config=config, rng=rng)

    def deal_next_round(self, rng: random.Random | None = None) -> Game:
        """Deal the following round to the same table.

        The shuffle continues from this game's random source unless
        another is given, so a seeded match deals a new layout each round.

        Raises:
            ValueError: If this is the last round.
        """
        return Game.deal(len(self.players), self.round.next(), self.config, rng or self.rng)

    def take_turn(self, player_idx: int, strategy: Strategy) -> TurnResult:
        """Run one full turn for a player.

        Steps: red threes, draw or pickup, red threes, meld, discard,
        then the foot check.

        Args:
            player_idx: Index of the acting player
            strategy: Decisions for the turn

        Returns:
            TurnResult.OUT if the player went out, else TurnResult.OVER

        Raises:
            TurnError: If the deck runs out or no valid discard is given.
        """
        player = self.players[player_idx]
        logger.debug(f"Player {player_idx} turn start: {player}")

        self.resolve_red_threes(player_idx)

        choice = strategy.choose_draw(self.round, player.model_copy(deep=True))
        if choice.action == DrawAction.PICKUP:
            try:
                self.pickup(player_idx, choice.meld_groups)
            except TurnError as e:
                logger.warning(f"Player {player_idx} pickup rejected ({e.code.name}), drawing instead")
                self.draw(player_idx)
        else:
            self.draw(player_idx)

        self.resolve_red_threes(player_idx)

        # Each play is atomic, a rejected one leaves nothing behind
        try:
            strategy.choose_play(self.round, player)
        except TurnError as e:
            logger.warning(f"Player {player_idx} play rejected: {e}")

        self.discard(player_idx, strategy)

        if player.hand.is_empty():
            if player.promote_foot():
                return TurnResult.OVER
            logger.info(f"Player {player_idx} went out")
            return TurnResult.OUT

        return TurnResult.OVER

    def resolve_red_threes(self, player_idx: int) -> int:
        """Bank every red three in the player's hand and draw replacements.

        Replacements may be red threes too, so this repeats until none is
        left in the hand.

        Returns:
            Number of red threes banked

        Raises:
            TurnError: NOT_ENOUGH_CARDS if the deck cannot cover a
                replacement. The hand is left as it was for that pass.
        """
        player = self.players[player_idx]
        banked = 0

        while True:
            red_threes = [c for c in player.hand if c.is_red_three]
            if not red_threes:
                break

            replacements = self.deck.take(len(red_threes))
            player.hand.remove_all(red_threes)
            player.red_threes += len(red_threes)
            player.hand.add_all(replacements)
            banked += len(red_threes)

        if banked:
            logger.debug(f"Player {player_idx} banked {banked} red threes")
        return banked

    def draw(self, player_idx: int) -> list[Card]:
        """Draw two cards from the deck into the player's hand.

        Raises:
            TurnError: NOT_ENOUGH_CARDS if fewer than two cards remain.
        """
        cards = self.deck.take(DRAW_SIZE)
        self.players[player_idx].hand.add_all(cards)
        logger.debug(f"Player {player_idx} drew {cards}")
        return cards

    def pickup(self, player_idx: int, meld_groups: dict[Rank, list[Card]]) -> None:
        """Pick up the top of the discard pile and meld it at once.

        The top card joins meld_groups at its own rank and the whole meld
        must be legal. The next six cards of the pile then go to the hand.

        Args:
            player_idx: Index of the acting player
            meld_groups: Hand cards to meld with the top card, by rank

        Raises:
            TurnError: If the pickup is not allowed. The discard pile and
                the player's cards are left unchanged.
        """
        player = self.players[player_idx]

        if len(self.discard_pile) < PICKUP_SIZE:
            raise TurnError(
                TurnErrorCode.NOT_ENOUGH_CARDS,
                f"Discard pile holds {len(self.discard_pile)} cards, pickup needs {PICKUP_SIZE}",
            )

        top = self.discard_pile.pop()

        if not top.can_be_booked:
            self.discard_pile.push(top)
            raise TurnError(
                TurnErrorCode.CAN_ONLY_PICKUP_BOOKABLE,
                f"Top card {top} cannot be booked",
            )

        if self.locked and player.hand.count_rank(top.rank) < LOCKED_PICKUP_MATCHES:
            self.discard_pile.push(top)
            raise TurnError(
                TurnErrorCode.DECK_IS_LOCKED_NEED_TWO_IN_HAND,
                f"Pile is locked, need {LOCKED_PICKUP_MATCHES} {top.rank.name} in hand",
            )

        player.hand.add(top)
        groups = {rank: list(cards) for rank, cards in meld_groups.items()}
        groups.setdefault(top.rank, []).append(top)

        try:
            player.play(self.round, groups)
        except TurnError:
            player.hand.remove(top)
            self.discard_pile.push(top)
            raise

        rest = self.discard_pile.take(PICKUP_SIZE - 1)
        player.hand.add_all(rest)
        self.locked = False
        logger.info(f"Player {player_idx} picked up the discard pile on {top}")

    def discard(self, player_idx: int, strategy: Strategy) -> Card | None:
        """Ask the strategy for a discard until it names a card in hand.

        A player who emptied their hand by melding has nothing to discard.

        Returns:
            The discarded card, or None if the hand was empty

        Raises:
            TurnError: NOT_ALL_CARDS_IN_HAND if the strategy never names
                a held card within the configured number of attempts.
        """
        player = self.players[player_idx]
        if player.hand.is_empty():
            return None

        attempts = self.rules.max_discard_attempts
        for _ in range(attempts):
            card = strategy.choose_discard(self.round, player.model_copy(deep=True))
            if card in player.hand:
                player.hand.remove(card)
                self.discard_pile.push(card)
                if card.is_wild and self.rules.lock_on_wild_discard:
                    self.locked = True
                logger.debug(f"Player {player_idx} discarded {card}")
                return card
            logger.debug(f"Player {player_idx} proposed {card}, not in hand")

        raise TurnError(
            TurnErrorCode.NOT_ALL_CARDS_IN_HAND,
            f"No discard from the hand after {attempts} attempts",
        )

    def score(self) -> list[int]:
        """Get each player's score for the round, in seat order."""
        return [b.total for b in self.score_breakdowns()]

    def score_breakdowns(self) -> list[ScoreBreakdown]:
        """Get each player's score term by term, in seat order."""
        return [score_player(p) for p in self.players]

    def total_cards(self) -> int:
        """Count every card in the game, across all piles and players."""
        return len(self.deck) + len(self.discard_pile) + sum(p.total_cards() for p in self.players)

    def __str__(self) -> str:
        lock_str = " [LOCKED]" if self.locked else ""
        return (
            f"Round {self.round.name}, deck {len(self.deck)}, "
            f"discard {len(self.discard_pile)}{lock_str}"
        )
