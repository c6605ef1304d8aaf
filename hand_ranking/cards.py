"""Playing cards: suits, values and card-string parsing."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List


class InvalidCardError(ValueError):
    """Raised when a card string cannot be parsed."""


class Suit(Enum):
    """Card suits. Suits carry no ordering."""
    SPADES = "s"
    CLUBS = "c"
    HEARTS = "h"
    DIAMONDS = "d"

    @property
    def symbol(self) -> str:
        return self.value


class Value(IntEnum):
    """Card face values, ace highest."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return VALUE_SYMBOLS[self]


VALUE_SYMBOLS = {
    Value.ONE: "1",
    Value.TWO: "2",
    Value.THREE: "3",
    Value.FOUR: "4",
    Value.FIVE: "5",
    Value.SIX: "6",
    Value.SEVEN: "7",
    Value.EIGHT: "8",
    Value.NINE: "9",
    Value.TEN: "T",
    Value.JACK: "J",
    Value.QUEEN: "Q",
    Value.KING: "K",
    Value.ACE: "A",
}

_VALUES_BY_SYMBOL = {symbol: value for value, symbol in VALUE_SYMBOLS.items()}
_VALUES_BY_SYMBOL["10"] = Value.TEN


@dataclass(frozen=True)
class Card:
    """Represents a playing card."""
    suit: Suit
    value: Value

    @classmethod
    def from_string(cls, card_str: str) -> "Card":
        """Build a card from text like 'As' (ace of spades) or '10h'."""
        text = card_str.strip()
        if len(text) not in (2, 3):
            raise InvalidCardError(f"Invalid card string: {card_str!r}")

        value_text, suit_char = text[:-1].upper(), text[-1].lower()
        if value_text not in _VALUES_BY_SYMBOL:
            raise InvalidCardError(f"Invalid value: {value_text}")
        try:
            suit = Suit(suit_char)
        except ValueError:
            raise InvalidCardError(f"Invalid suit: {suit_char}") from None

        return cls(suit=suit, value=_VALUES_BY_SYMBOL[value_text])

    def __str__(self):
        return f"{self.value.symbol}{self.suit.symbol}"


def parse_cards(text: str) -> List[Card]:
    """Parse whitespace or comma separated card strings, e.g. 'As Ks Qs'."""
    return [Card.from_string(token) for token in text.replace(",", " ").split()]
