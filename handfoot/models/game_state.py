"""Round and turn enums."""

from enum import Enum, IntEnum


class Round(IntEnum):
    """Round of a match. Decides the points needed for a player's first meld."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

    @property
    def meld_threshold(self) -> int:
        return MELD_THRESHOLDS[self]

    def next(self) -> "Round":
        """Get the following round.

        Raises:
            ValueError: If this is the last round.
        """
        if self == Round.FOUR:
            raise ValueError("Round FOUR is the last round")
        return Round(self + 1)


MELD_THRESHOLDS = {
    Round.ONE: 90,
    Round.TWO: 120,
    Round.THREE: 150,
    Round.FOUR: 180,
}


class DrawAction(str, Enum):
    """How a player takes cards at the start of a turn."""

    DRAW = "draw"  # Two cards from the draw pile
    PICKUP = "pickup"  # Top of the discard pile, melded at once


class TurnResult(str, Enum):
    """Outcome of a completed turn."""

    OVER = "over"
    OUT = "out"  # Player went out, ending the round
