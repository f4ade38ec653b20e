"""Game logic."""

from .engine import Game
from .player_cards import PlayerCards
from .scoring import ScoreBreakdown, score_player
from .validator import MeldValidator, ValidationResult

__all__ = [
    "Game",
    "PlayerCards",
    "ScoreBreakdown",
    "score_player",
    "MeldValidator",
    "ValidationResult",
]
