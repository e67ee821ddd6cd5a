"""Interactive two-player game on the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from first2shed.card import Card, CardCodeError
from first2shed.events import (
    DrawCardCommand,
    PassCommand,
    PlayCardCommand,
    PlayerJoinCommand,
    SetWildColorCommand,
    StartGameCommand,
)
from first2shed.game import Game

_MENU = (
    "Input a card code or a command:",
    "1. Draw card",
    "2. Pass",
    "3. Choose Color",
)


def _read_token(stream: TextIO) -> str | None:
    """Return the first word of the next input line, or None at end of input."""
    line = stream.readline()
    if not line:
        return None
    words = line.split()
    return words[0] if words else ""


def _show_hand(game: Game) -> None:
    player = game.current_player
    cards = "".join(f"{card} " for card in player.hand)
    print(f"Player ID {player.id} hand: {cards}")


def _play_card(game: Game, code: str) -> None:
    try:
        card = Card.from_code(code)
    except CardCodeError:
        return
    game.process(PlayCardCommand(card, game.current_player))


def _choose_color(game: Game, stream: TextIO) -> bool:
    """Ask for a colour letter; return False when input has run out."""
    print("Enter color letter: ", end="", flush=True)
    letter = _read_token(stream)
    if letter is None:
        return False
    try:
        card = Card.from_code(letter[:1] + "0")
    except CardCodeError as exc:
        print(exc)
        return True
    game.process(SetWildColorCommand(game.current_player, card.color))
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run a two-player game, reading moves from standard input."""
    parser = argparse.ArgumentParser(
        prog="first2shed",
        description="Play a two-player shedding card game on the terminal.",
    )
    parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(message)s",
        stream=sys.stderr,
        force=True,
    )

    game = Game()
    game.process(PlayerJoinCommand(0))
    game.process(PlayerJoinCommand(1))
    game.process(StartGameCommand())

    print("Initial card:", game.last_played_card)

    stream = sys.stdin
    while True:
        print(f"Last played card: {game.last_played_card}")
        _show_hand(game)
        for line in _MENU:
            print(line)

        command = _read_token(stream)
        if command is None:
            return 0
        if not command:
            continue

        choice = command[0]
        if choice == "1":
            game.process(DrawCardCommand(game.current_player))
        elif choice == "2":
            game.process(PassCommand(game.current_player))
        elif choice == "3":
            if not _choose_color(game, stream):
                return 0
        else:
            _play_card(game, command)


if __name__ == "__main__":
    raise SystemExit(main())