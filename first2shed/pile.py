"""Stacks of cards such as the draw and discard piles."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from first2shed.card import Card


class EmptyPileError(IndexError):
    """A card was taken from an empty pile."""

    def __init__(self, message: str = "empty pile") -> None:
        super().__init__(message)


class Pile:
    """A stack of cards; the last card pushed is the top."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def peek(self) -> Card | None:
        """Return the top card, or None if the pile is empty."""
        return self._cards[-1] if self._cards else None

    def push(self, card: Card) -> None:
        """Put a card on top of the pile."""
        self._cards.append(card)

    def pop(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyPileError()
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the bottom card to the top card."""
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Pile({self._cards!r})"

    def shuffle(self) -> None:
        """Shuffle the pile in place."""
        random.shuffle(self._cards)