"""Players and the sorted hands of cards they hold."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from first2shed.card import Card


class CardNotInHandError(LookupError):
    """A card was expected in a hand but is not there."""

    def __init__(self, message: str = "card not in hand") -> None:
        super().__init__(message)


class Hand:
    """The cards a player holds, kept ordered by colour then value."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"

    def add(self, card: Card) -> None:
        """Add a card and re-sort the hand."""
        self._cards.append(card)
        self.sort()

    def remove(self, card: Card) -> None:
        """Remove one copy of a card; does nothing if it is not held."""
        if card in self._cards:
            self._cards.remove(card)
            self.sort()

    def sort(self) -> None:
        """Order the cards by colour, then by value."""
        self._cards.sort(key=lambda c: (c.color, c.value))


@dataclass(eq=False)
class Player:
    """A participant in the game; players compare by identity."""

    id: int
    hand: Hand = field(default_factory=Hand)