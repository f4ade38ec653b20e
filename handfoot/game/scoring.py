"""End-of-round scoring."""

from pydantic import BaseModel

from .player_cards import PlayerCards

CLEAN_BOOK_BONUS = 500
DIRTY_BOOK_BONUS = 300
SEVEN_BOOK_BONUS = 1500
RED_THREE_BONUS = 100


class ScoreBreakdown(BaseModel):
    """Score of one player, term by term."""

    clean_books: int = 0
    dirty_books: int = 0
    seven_books: int = 0
    book_bonus: int = 0
    melded_points: int = 0  # Cards in books and the play area
    red_three_bonus: int = 0
    penalty: int = 0  # Cards left in hand and foot

    @property
    def total(self) -> int:
        return self.book_bonus + self.melded_points + self.red_three_bonus - self.penalty


def score_player(player: PlayerCards) -> ScoreBreakdown:
    """Score a player's cards. Does not mutate them."""
    clean = len(player.clean_books)
    dirty = len(player.dirty_books)
    seven = len(player.seven_books)

    melded = sum(c.points for book in player.books for c in book)
    melded += sum(c.points for cards in player.play_area.values() for c in cards)

    penalty = player.hand.points()
    if player.foot is not None:
        penalty += player.foot.points()

    return ScoreBreakdown(
        clean_books=clean,
        dirty_books=dirty,
        seven_books=seven,
        book_bonus=CLEAN_BOOK_BONUS * clean + DIRTY_BOOK_BONUS * dirty + SEVEN_BOOK_BONUS * seven,
        melded_points=melded,
        red_three_bonus=RED_THREE_BONUS * player.red_threes,
        penalty=penalty,
    )
