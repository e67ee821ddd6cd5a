# first2shed

An engine for a shedding card game, in which the first player to empty their hand
wins. It uses the classic coloured-deck rules. You match the top card by colour or
by value, or you play a wild card. Action cards skip the next player, reverse the
direction of play, or make the next player draw two or four cards.

The game is a finite state machine that you drive by sending it events. It moves
from the lobby to dealing and then to turning over the first card. After that it
cycles through player turns, card resolution and wild colour choice until a player
has emptied their hand.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing in the terminal

```
first2shed
```

This starts a two-player game, with players 0 and 1, on a single terminal. Each
round it prints the top card of the discard pile and the hand of the player whose
turn it is, then reads one line. The first word of that line decides the move:

- a card code plays that card, for example `R5`, `GT` or `WF`
- `1` draws a card, which you may do once per turn
- `2` passes, which you may do only after drawing
- `3` prompts for a colour letter, to name the colour after a wild card

A card code is a colour letter followed by a value letter:

- Colours: `R` red, `Y` yellow, `G` green, `B` blue, `W` wild.
- Values: `0`–`9`, `S` skip, `R` reverse, `T` draw two, `W` wild, `F` wild draw four.

A move the game cannot accept is ignored. So is an unreadable card code. Examples
of moves it cannot accept are playing out of turn, playing a card you do not hold,
or playing a card that does not match. The program writes its log to standard
error and stops when standard input ends. `first2shed --help` shows its usage.

## Using the engine

```python
from first2shed.card import Card
from first2shed.events import PlayerJoinCommand, StartGameCommand, PlayCardCommand
from first2shed.game import Game

game = Game()
game.process(PlayerJoinCommand(id=0))
game.process(PlayerJoinCommand(id=1))
game.process(StartGameCommand())

player = game.current_player
print(game.last_played_card, [str(card) for card in player.hand])

game.process(PlayCardCommand(card=Card.from_code("R5"), player=player))
```

The modules are:

- `first2shed.card`: `Card`, `Color` and `Value`. `Card.from_code` parses a
  two-letter code and raises `InvalidColorError`, `InvalidValueError` or
  `InvalidCardCodeError`, all subclasses of `CardCodeError`, when it cannot.
- `first2shed.hand`: `Player` and `Hand`. A hand stays sorted by colour, then by
  value.
- `first2shed.pile`: `Pile`, a stack of cards. `Pile.pop` raises `EmptyPileError`
  when the pile is empty.
- `first2shed.events`: the commands you send (`PlayerJoinCommand`,
  `StartGameCommand`, `PlayCardCommand`, `DrawCardCommand`, `PassCommand`,
  `SetWildColorCommand`) and the events the game raises for itself.
- `first2shed.game`: `Game`, its states, `generate_full_deck` (the 108-card deck)
  and `apply_card_effects`.

`Game.process` ignores any event that the current state cannot accept.
`PlayerJoinCommand` is handled in every state, and it ignores IDs that have
already joined. The game starts only when at least two players have joined. When
the draw pile runs out, the discards are shuffled back into it, all except the top
card.

## What it does not do

The events in `first2shed.events` that derive from `NotifyEvent` are only marked
for announcement; the engine sends no notifications of its own. Nothing checks a
limit on the number of players. The lobby is never closed to new players. The
terminal game does not announce a winner. Once a player has emptied their hand,
the game accepts no more moves, and you end the program by ending its input. There
is no network play and no saving of games.