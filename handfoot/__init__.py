"""Rules engine for the Hand and Foot card game."""

from handfoot.config import Config, load_config
from handfoot.errors import HandFootError, TurnError, TurnErrorCode
from handfoot.game import Game, PlayerCards, ScoreBreakdown
from handfoot.models import JOKER, Card, CardCollection, Deck, DrawAction, Rank, Round, Suit, TurnResult
from handfoot.strategy import CallbackStrategy, DrawChoice, Strategy

__all__ = [
    "Config",
    "load_config",
    "HandFootError",
    "TurnError",
    "TurnErrorCode",
    "Game",
    "PlayerCards",
    "ScoreBreakdown",
    "JOKER",
    "Card",
    "CardCollection",
    "Deck",
    "DrawAction",
    "Rank",
    "Round",
    "Suit",
    "TurnResult",
    "CallbackStrategy",
    "DrawChoice",
    "Strategy",
]
