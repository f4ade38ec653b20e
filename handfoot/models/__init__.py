"""Game models."""

from .card import JOKER, Card, CardCollection, Color, Rank, Suit, create_full_deck
from .deck import Deck
from .game_state import DrawAction, Round, TurnResult

__all__ = [
    "JOKER",
    "Card",
    "CardCollection",
    "Color",
    "Rank",
    "Suit",
    "create_full_deck",
    "Deck",
    "DrawAction",
    "Round",
    "TurnResult",
]
