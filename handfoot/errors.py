"""Turn errors raised by the rules engine."""

from enum import Enum


class TurnErrorCode(str, Enum):
    """Reason an action was rejected."""

    NOT_ALL_CARDS_MATCH_RANK = "not_all_cards_match_rank"
    NOT_ALL_CARDS_IN_HAND = "not_all_cards_in_hand"
    TOO_MANY_CARDS_IN_BOOK = "too_many_cards_in_book"
    TOO_FEW_CARDS_IN_BOOK = "too_few_cards_in_book"
    TOO_MANY_WILDS_IN_BOOK = "too_many_wilds_in_book"
    NOT_ENOUGH_MELD = "not_enough_meld"
    MUST_KEEP_ONE_CARD_IN_HAND = "must_keep_one_card_in_hand"
    CAN_ONLY_PICKUP_BOOKABLE = "can_only_pickup_bookable"
    DECK_IS_LOCKED_NEED_TWO_IN_HAND = "deck_is_locked_need_two_in_hand"
    NOT_ENOUGH_CARDS = "not_enough_cards"


class HandFootError(Exception):
    """Base exception for handfoot errors."""

    pass


class TurnError(HandFootError):
    """Raised when a player action is rejected.

    The game is left as it was before the action started.
    """

    def __init__(self, code: TurnErrorCode, message: str = ""):
        self.code = code
        self.message = message or code.value.replace("_", " ")
        super().__init__(f"{code.name}: {self.message}")
