"""Five-card poker hand classification.

A hand is classified by walking an ordered cascade of predicates from the
strongest category to the weakest. The first predicate that holds decides
the category; high card is the fallback.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, List, Tuple

from loguru import logger

from .cards import Card, Value, parse_cards

HAND_SIZE = 5


class InvalidHandError(ValueError):
    """Raised when a hand is built from anything other than five cards."""


class Category(IntEnum):
    """Hand categories. A lower value is a stronger hand."""
    ROYAL_FLUSH = 0
    STRAIGHT_FLUSH = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    FLUSH = 4
    STRAIGHT = 5
    THREE_OF_A_KIND = 6
    TWO_PAIR = 7
    PAIR = 8
    HIGH_CARD = 9

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").capitalize()

    def beats(self, other: "Category") -> bool:
        return self < other


@dataclass(frozen=True)
class Hand:
    """An immutable hand of exactly five cards."""
    cards: Tuple[Card, ...]

    def __post_init__(self):
        object.__setattr__(self, "cards", tuple(self.cards))
        if len(self.cards) != HAND_SIZE:
            raise InvalidHandError(
                f"A hand needs exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )

    @classmethod
    def from_string(cls, text: str) -> "Hand":
        return construct_hand(parse_cards(text))

    @property
    def category(self) -> Category:
        return classify(self)

    def values(self) -> List[Value]:
        """Card values sorted ascending."""
        return sorted(card.value for card in self.cards)

    def value_groups(self) -> Counter:
        """Frequency of each card value in the hand."""
        return Counter(card.value for card in self.cards)

    def __str__(self):
        return " ".join(str(card) for card in self.cards)


def construct_hand(cards: Iterable[Card]) -> Hand:
    """Build a hand, raising InvalidHandError unless exactly five cards are given."""
    return Hand(tuple(cards))


ROYAL_VALUES = [Value.TEN, Value.JACK, Value.QUEEN, Value.KING, Value.ACE]


def _longest_run(values: List[Value]) -> int:
    # Equal neighbours neither extend nor break the run.
    streak = best = 1
    for previous, current in zip(values, values[1:]):
        if current == previous + 1:
            streak += 1
        elif current != previous:
            streak = 1
        best = max(best, streak)
    return best


def _group_sizes(hand: Hand) -> List[int]:
    return list(hand.value_groups().values())


def is_flush(hand: Hand) -> bool:
    first_suit = hand.cards[0].suit
    return all(card.suit == first_suit for card in hand.cards)


def is_straight(hand: Hand) -> bool:
    """Five consecutive values, or the wheel (A-2-3-4-5) with the ace played low."""
    values = hand.values()
    if _longest_run(values) == HAND_SIZE:
        return True

    # The ace sorts high, so the wheel shows up as 2-3-4-5 followed by A.
    return (
        values[0] == Value.TWO
        and values[-1] == Value.ACE
        and _longest_run(values[:-1]) == HAND_SIZE - 1
    )


def is_royal_flush(hand: Hand) -> bool:
    return is_flush(hand) and hand.values() == ROYAL_VALUES


def is_straight_flush(hand: Hand) -> bool:
    return is_straight(hand) and is_flush(hand)


def is_four_of_a_kind(hand: Hand) -> bool:
    return 4 in _group_sizes(hand)


def is_full_house(hand: Hand) -> bool:
    sizes = _group_sizes(hand)
    return 3 in sizes and 2 in sizes


def is_three_of_a_kind(hand: Hand) -> bool:
    return 3 in _group_sizes(hand)


def is_two_pair(hand: Hand) -> bool:
    return _group_sizes(hand).count(2) == 2


def is_one_pair(hand: Hand) -> bool:
    return 2 in _group_sizes(hand)


# Strongest first; order matters, e.g. a royal flush also satisfies
# is_straight_flush and a full house also satisfies is_one_pair.
CATEGORY_CASCADE: List[Tuple[Callable[[Hand], bool], Category]] = [
    (is_royal_flush, Category.ROYAL_FLUSH),
    (is_straight_flush, Category.STRAIGHT_FLUSH),
    (is_four_of_a_kind, Category.FOUR_OF_A_KIND),
    (is_full_house, Category.FULL_HOUSE),
    (is_flush, Category.FLUSH),
    (is_straight, Category.STRAIGHT),
    (is_three_of_a_kind, Category.THREE_OF_A_KIND),
    (is_two_pair, Category.TWO_PAIR),
    (is_one_pair, Category.PAIR),
]


def classify(hand: Hand) -> Category:
    """Return the strongest category the hand qualifies for."""
    for predicate, category in CATEGORY_CASCADE:
        if predicate(hand):
            break
    else:
        category = Category.HIGH_CARD

    logger.debug("Classified {} as {}", hand, category.label)
    return category
