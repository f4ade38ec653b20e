"""Tests for Deck and round enums."""

import random

import pytest

from handfoot.errors import TurnError, TurnErrorCode
from handfoot.models.card import JOKER, Card, CardCollection, Rank, Suit, create_full_deck
from handfoot.models.deck import Deck
from handfoot.models.game_state import Round


def card(rank: Rank, suit: Suit = Suit.SPADE) -> Card:
    return Card(rank=rank, suit=suit)


class TestDeal:
    """Tests for Deck.deal."""

    @pytest.mark.parametrize("num_players", [1, 2, 4, 6])
    def test_size(self, num_players):
        """Test that a deal uses one more deck than there are players."""
        assert len(Deck.deal(num_players)) == 54 * (num_players + 1)

    def test_contents(self):
        """Test that a deal holds whole decks, only reordered."""
        deck = Deck.deal(2, random.Random(1))
        expected = CardCollection(create_full_deck() * 3)
        assert CardCollection(deck) == expected

    def test_seeded_deal_is_reproducible(self):
        """Test that the same seed gives the same order."""
        a = Deck.deal(4, random.Random(42))
        b = Deck.deal(4, random.Random(42))
        assert a.cards == b.cards

    def test_shuffled(self):
        """Test that the deal is not left in construction order."""
        deck = Deck.deal(4, random.Random(3))
        assert list(deck.cards) != create_full_deck() * 5

    def test_no_players(self):
        """Test that zero players is rejected."""
        with pytest.raises(ValueError):
            Deck.deal(0)


class TestStack:
    """Tests for taking and pushing cards."""

    @pytest.fixture
    def deck(self):
        return Deck([card(Rank.FOUR), card(Rank.FIVE), card(Rank.SIX)])

    def test_take_from_top(self, deck):
        """Test that take returns the top cards, topmost first."""
        assert deck.take(2) == [card(Rank.SIX), card(Rank.FIVE)]
        assert deck.cards == (card(Rank.FOUR),)

    def test_take_too_many(self, deck):
        """Test that an oversized take fails without removing anything."""
        with pytest.raises(TurnError) as exc_info:
            deck.take(4)
        assert exc_info.value.code == TurnErrorCode.NOT_ENOUGH_CARDS
        assert len(deck) == 3

    def test_take_zero(self, deck):
        """Test that taking nothing is allowed."""
        assert deck.take(0) == []
        assert len(deck) == 3

    def test_push_pop_peek(self, deck):
        """Test push puts a card on top."""
        deck.push(JOKER)
        assert deck.peek() == JOKER
        assert deck.pop() == JOKER
        assert deck.peek() == card(Rank.SIX)

    def test_empty(self):
        """Test the empty deck."""
        deck = Deck.empty()
        assert deck.is_empty()
        assert deck.peek() is None
        with pytest.raises(TurnError):
            deck.pop()

    def test_deck_copies_are_independent(self):
        """Test that a deck does not alias the list it was built from."""
        cards = [card(Rank.FOUR)]
        deck = Deck(cards)
        deck.push(JOKER)
        assert cards == [card(Rank.FOUR)]


class TestRound:
    """Tests for Round."""

    @pytest.mark.parametrize(
        "round, threshold",
        [(Round.ONE, 90), (Round.TWO, 120), (Round.THREE, 150), (Round.FOUR, 180)],
    )
    def test_meld_threshold(self, round, threshold):
        """Test first-meld thresholds."""
        assert round.meld_threshold == threshold

    def test_next(self):
        """Test advancing rounds."""
        assert Round.ONE.next() == Round.TWO
        assert Round.THREE.next() == Round.FOUR
        with pytest.raises(ValueError):
            Round.FOUR.next()
