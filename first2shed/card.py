"""Cards: colours, values and the two-letter card codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CardCodeError(ValueError):
    """A card code could not be parsed."""


class InvalidColorError(CardCodeError):
    """The colour letter of a card code is unknown."""

    def __init__(self, message: str = "invalid color") -> None:
        super().__init__(message)


class InvalidValueError(CardCodeError):
    """The value letter of a card code is unknown."""

    def __init__(self, message: str = "invalid value") -> None:
        super().__init__(message)


class InvalidCardCodeError(CardCodeError):
    """A card code is too short to hold a colour and a value."""

    def __init__(self, message: str = "invalid card code") -> None:
        super().__init__(message)


class Color(IntEnum):
    """Card colours; WILD marks Wild and Wild Draw Four cards."""

    RED = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    WILD = 5

    def __str__(self) -> str:
        return _COLOR_LETTERS[self]


class Value(IntEnum):
    """Card values, numbers first, then actions and wilds."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    SKIP = 10
    REVERSE = 11
    DRAW_TWO = 12
    WILD = 13
    WILD_DRAW_FOUR = 14

    def __str__(self) -> str:
        return _VALUE_LETTERS[self]


_COLOR_LETTERS = {
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.RED: "R",
    Color.YELLOW: "Y",
    Color.WILD: "W",
}

_VALUE_LETTERS = {
    Value.ZERO: "0",
    Value.ONE: "1",
    Value.TWO: "2",
    Value.THREE: "3",
    Value.FOUR: "4",
    Value.FIVE: "5",
    Value.SIX: "6",
    Value.SEVEN: "7",
    Value.EIGHT: "8",
    Value.NINE: "9",
    Value.SKIP: "S",
    Value.REVERSE: "R",
    Value.DRAW_TWO: "T",
    Value.WILD: "W",
    Value.WILD_DRAW_FOUR: "F",
}

_COLORS_BY_LETTER = {letter: color for color, letter in _COLOR_LETTERS.items()}
_VALUES_BY_LETTER = {letter: value for value, letter in _VALUE_LETTERS.items()}

_EFFECT_VALUES = frozenset(
    {Value.DRAW_TWO, Value.SKIP, Value.REVERSE, Value.WILD_DRAW_FOUR}
)


@dataclass(frozen=True)
class Card:
    """A single card, identified by its colour and value."""

    color: Color
    value: Value

    def is_wild(self) -> bool:
        """Whether the card can be played on anything."""
        return (
            self.color == Color.WILD
            or self.value == Value.WILD
            or self.value == Value.WILD_DRAW_FOUR
        )

    def has_effect(self) -> bool:
        """Whether playing the card triggers an action."""
        return self.value in _EFFECT_VALUES

    def can_play_on(self, other: Card) -> bool:
        """Whether this card may be played on top of ``other``."""
        if self.is_wild():
            return True
        return self.color == other.color or self.value == other.value

    def __str__(self) -> str:
        return f"{self.color}{self.value}"

    @classmethod
    def from_code(cls, code: str) -> Card:
        """Parse a two-letter code such as ``"R1"`` or ``"WF"``.

        Characters after the second are ignored.
        """
        if len(code) < 2:
            raise InvalidCardCodeError()
        try:
            color = _COLORS_BY_LETTER[code[0]]
        except KeyError:
            raise InvalidColorError() from None
        try:
            value = _VALUES_BY_LETTER[code[1]]
        except KeyError:
            raise InvalidValueError() from None
        return cls(color, value)