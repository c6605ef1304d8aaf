"""Hand ranking module for five-card poker hand classification."""

from loguru import logger

from .cards import Card, InvalidCardError, Suit, Value, parse_cards
from .hand_evaluator import Category, Hand, InvalidHandError, classify, construct_hand
from .winner import NoHandsError, determine_winner, rank_hands

# Library logging stays silent until an application enables it.
logger.disable("hand_ranking")

__all__ = [
    "Card",
    "Suit",
    "Value",
    "parse_cards",
    "Category",
    "Hand",
    "classify",
    "construct_hand",
    "determine_winner",
    "rank_hands",
    "InvalidCardError",
    "InvalidHandError",
    "NoHandsError",
]
