"""Events fed to the game: external commands and internal signals."""

from __future__ import annotations

from dataclasses import dataclass

from first2shed.card import Card, Color
from first2shed.hand import Player


class Event:
    """Base class of everything the game can process."""


class NotifyEvent(Event):
    """An event the surrounding application should announce to players."""


class GlobalEvent(Event):
    """An event the game handles itself, whatever state it is in."""


# Commands issued from outside the game.


@dataclass(frozen=True)
class PlayerJoinCommand(GlobalEvent):
    id: int


@dataclass(frozen=True)
class StartGameCommand(Event):
    pass


@dataclass(frozen=True)
class PlayCardCommand(Event):
    card: Card
    player: Player


@dataclass(frozen=True)
class DrawCardCommand(NotifyEvent):
    player: Player


@dataclass(frozen=True)
class PassCommand(NotifyEvent):
    player: Player


@dataclass(frozen=True)
class SetWildColorCommand(NotifyEvent):
    player: Player
    color: Color


# Events raised by the game itself.


@dataclass(frozen=True)
class DealingFinishedEvent(Event):
    pass


@dataclass(frozen=True)
class InitialCardSetEvent(NotifyEvent):
    pass


@dataclass(frozen=True)
class CardResolvedEvent(Event):
    pass


@dataclass(frozen=True)
class WildCardPlayedEvent(NotifyEvent):
    pass


@dataclass(frozen=True)
class SetWinner(NotifyEvent):
    player: Player