"""Winner selection across several classified hands."""

from typing import List, Sequence

from loguru import logger

from .hand_evaluator import Hand


class NoHandsError(ValueError):
    """Raised when a winner is requested from an empty set of hands."""


def determine_winner(hands: Sequence[Hand]) -> Hand:
    """
    Return the hand with the strongest category.

    Only categories are compared. When several hands share the best
    category, the first one in ``hands`` wins.

    Raises:
        NoHandsError: if ``hands`` is empty
    """
    if not hands:
        raise NoHandsError("Cannot determine a winner without any hands")

    best_hand = hands[0]
    best_category = best_hand.category
    for hand in hands[1:]:
        category = hand.category
        if category.beats(best_category):
            logger.debug("{} ({}) takes the lead", hand, category.label)
            best_hand, best_category = hand, category

    return best_hand


def rank_hands(hands: Sequence[Hand]) -> List[Hand]:
    """Order hands strongest first, keeping input order between equal categories."""
    return sorted(hands, key=lambda hand: hand.category)
