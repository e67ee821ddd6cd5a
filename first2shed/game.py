"""The game engine: a state machine driven by events."""

from __future__ import annotations

import logging

from first2shed.card import Card, Color, Value
from first2shed.events import (
    CardResolvedEvent,
    DealingFinishedEvent,
    DrawCardCommand,
    Event,
    GlobalEvent,
    InitialCardSetEvent,
    PassCommand,
    PlayCardCommand,
    PlayerJoinCommand,
    SetWildColorCommand,
    SetWinner,
    StartGameCommand,
    WildCardPlayedEvent,
)
from first2shed.hand import Hand, Player
from first2shed.pile import EmptyPileError, Pile

logger = logging.getLogger(__name__)

MAX_PLAYERS = 10
MIN_PLAYERS = 2
INITIAL_HAND_SIZE = 7

_CHOOSABLE_COLORS = frozenset({Color.BLUE, Color.GREEN, Color.RED, Color.YELLOW})
_DECK_COLORS = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)
_NUMBER_VALUES = (
    Value.ONE,
    Value.TWO,
    Value.THREE,
    Value.FOUR,
    Value.FIVE,
    Value.SIX,
    Value.SEVEN,
    Value.EIGHT,
    Value.NINE,
)
_ACTION_VALUES = (Value.SKIP, Value.REVERSE, Value.DRAW_TWO)


def generate_full_deck() -> Pile:
    """Build the 108-card deck, unshuffled."""
    deck = Pile()
    for color in _DECK_COLORS:
        deck.push(Card(color, Value.ZERO))
        for value in _NUMBER_VALUES:
            deck.push(Card(color, value))
            deck.push(Card(color, value))
    for color in _DECK_COLORS:
        for value in _ACTION_VALUES:
            deck.push(Card(color, value))
            deck.push(Card(color, value))
    for _ in range(4):
        deck.push(Card(Color.WILD, Value.WILD))
        deck.push(Card(Color.WILD, Value.WILD_DRAW_FOUR))
    return deck


def _make_next_player_draw(game: Game, amount: int) -> None:
    target = game.peek_next_player()
    for _ in range(amount):
        target.hand.add(game.pop_card_from_draw_pile())


def apply_card_effects(game: Game, card: Card) -> None:
    """Carry out the action of a skip, reverse or draw card."""
    if card.value == Value.SKIP:
        game.next_turn()
    elif card.value == Value.REVERSE:
        game.turn_direction *= -1
        game.next_turn()
    elif card.value == Value.DRAW_TWO:
        _make_next_player_draw(game, 2)
        game.next_turn()
    elif card.value == Value.WILD_DRAW_FOUR:
        _make_next_player_draw(game, 4)
        game.next_turn()


class State:
    """A phase of the game; by default it ignores every event."""

    def on_enter(self, game: Game) -> None:
        """Run when the game moves into this state."""

    def can_handle(self, game: Game, event: Event) -> bool:
        """Whether this state accepts the event right now."""
        return False

    def next(self, game: Game, event: Event) -> State | None:
        """Apply the event and return the state to move to, if any."""
        return None


class LobbyState(State):
    """Waiting for players; the game starts once enough have joined."""

    def can_handle(self, game: Game, event: Event) -> bool:
        if isinstance(event, StartGameCommand):
            return len(game.players) >= MIN_PLAYERS
        return False

    def next(self, game: Game, event: Event) -> State | None:
        if isinstance(event, StartGameCommand):
            return game.dealing_state
        return None


class DealingState(State):
    """Builds and shuffles the deck, then deals every player a hand."""

    def on_enter(self, game: Game) -> None:
        game.draw_pile = generate_full_deck()
        game.draw_pile.shuffle()
        for _ in range(INITIAL_HAND_SIZE):
            for player in game.players:
                player.hand.add(game.draw_pile.pop())
        game.process(DealingFinishedEvent())

    def can_handle(self, game: Game, event: Event) -> bool:
        return isinstance(event, DealingFinishedEvent)

    def next(self, game: Game, event: Event) -> State | None:
        if isinstance(event, DealingFinishedEvent):
            return game.setting_initial_card_state
        return None


class SettingInitialCardState(State):
    """Turns over the first non-wild card from the draw pile."""

    def on_enter(self, game: Game) -> None:
        while True:
            card = game.draw_pile.pop()
            if not card.is_wild():
                break
            game.draw_pile.push(card)
            game.draw_pile.shuffle()
        game.play_card(None, card)
        game.process(InitialCardSetEvent())

    def can_handle(self, game: Game, event: Event) -> bool:
        return isinstance(event, InitialCardSetEvent)

    def next(self, game: Game, event: Event) -> State | None:
        if isinstance(event, InitialCardSetEvent):
            return game.resolving_card_state
        return None


class ResolvingCardState(State):
    """Settles the last played card: winner check, wild colour, effects."""

    def on_enter(self, game: Game) -> None:
        current = game.current_player
        if current is not None and len(current.hand) == 0:
            game.process(SetWinner(current))
            return
        card = game.last_played_card
        if card is not None and card.color == Color.WILD:
            game.process(WildCardPlayedEvent())
            return
        if card is not None and card.has_effect():
            apply_card_effects(game, card)
        game.process(CardResolvedEvent())

    def can_handle(self, game: Game, event: Event) -> bool:
        return isinstance(event, (CardResolvedEvent, WildCardPlayedEvent, SetWinner))

    def next(self, game: Game, event: Event) -> State | None:
        if isinstance(event, CardResolvedEvent):
            return game.player_turn_state
        if isinstance(event, WildCardPlayedEvent):
            return game.awaiting_color_choice_state
        if isinstance(event, SetWinner):
            return game.game_over_state
        return None


class PlayerTurnState(State):
    """The current player plays a card, or draws one and may then pass."""

    def __init__(self) -> None:
        self.has_drawn = False

    def on_enter(self, game: Game) -> None:
        game.next_turn()
        self.has_drawn = False
        logger.info("player ID %d, it is your turn", game.current_player.id)

    def can_handle(self, game: Game, event: Event) -> bool:
        if isinstance(event, PlayCardCommand):
            return self._can_play_card(game, event)
        if isinstance(event, DrawCardCommand):
            return event.player is game.current_player and not self.has_drawn
        if isinstance(event, PassCommand):
            return event.player is game.current_player and self.has_drawn
        return False

    def next(self, game: Game, event: Event) -> State | None:
        if isinstance(event, PlayCardCommand):
            game.play_card(event.player, event.card)
            return game.resolving_card_state
        if isinstance(event, DrawCardCommand):
            event.player.hand.add(game.pop_card_from_draw_pile())
            self.has_drawn = True
            return None
        if isinstance(event, PassCommand):
            # Re-entering this state moves the turn on.
            return game.player_turn_state
        return None

    @staticmethod
    def _can_play_card(game: Game, command: PlayCardCommand) -> bool:
        if command.player is not game.current_player:
            logger.info("player ID %d is not the player in turn", command.player.id)
            return False
        if not command.card.can_play_on(game.last_played_card):
            logger.info(
                "card %s cannot be played on card %s",
                command.card,
                game.last_played_card,
            )
            return False
        if command.card not in command.player.hand:
            logger.info(
                "player ID %d does not hold the card %s",
                command.player.id,
                command.card,
            )
            return False
        return True


class AwaitingColorChoiceState(State):
    """Waits for the player of a wild card to name the next colour."""

    def can_handle(self, game: Game, event: Event) -> bool:
        if isinstance(event, SetWildColorCommand):
            return (
                game.current_player is not None
                and event.player.id == game.current_player.id
            )
        return False

    def next(self, game: Game, event: Event) -> State | None:
        if isinstance(event, SetWildColorCommand) and event.color in _CHOOSABLE_COLORS:
            game.last_played_card = Card(event.color, game.last_played_card.value)
            return game.resolving_card_state
        return None


class GameOverState(State):
    """The game has ended; no event is accepted."""

    def can_handle(self, game: Game, event: Event) -> bool:
        return False

    def next(self, game: Game, event: Event) -> State | None:
        return None


class Game:
    """A single game, advanced by feeding events to :meth:`process`."""

    def __init__(self) -> None:
        self.players: list[Player] = []
        self.current_player: Player | None = None
        # Starts before the first seat so the first turn lands on index 0.
        self.current_player_index = -1
        self.turn_direction = 1
        self.draw_pile = Pile()
        self.discard_pile = Pile()
        self.last_played_card: Card | None = None
        self.is_lobby_open = True

        self.lobby_state = LobbyState()
        self.dealing_state = DealingState()
        self.setting_initial_card_state = SettingInitialCardState()
        self.resolving_card_state = ResolvingCardState()
        self.player_turn_state = PlayerTurnState()
        self.awaiting_color_choice_state = AwaitingColorChoiceState()
        self.game_over_state = GameOverState()

        self.state: State = self.lobby_state

    def process(self, event: Event) -> None:
        """Feed an event to the game, moving to a new state if it calls for it."""
        logger.debug("processing event %r", event)
        if isinstance(event, GlobalEvent):
            self._handle_global_event(event)
            return
        if not self.state.can_handle(self, event):
            logger.debug(
                "state %s cannot handle %s",
                type(self.state).__name__,
                type(event).__name__,
            )
            return
        new_state = self.state.next(self, event)
        if new_state is not None:
            logger.debug("moving to state %s", type(new_state).__name__)
            self.state = new_state
            self.state.on_enter(self)

    def play_card(self, player: Player | None, card: Card) -> None:
        """Put a card on the discard pile; a None player means the initial card."""
        self.discard_pile.push(card)
        self.last_played_card = card
        if player is not None:
            player.hand.remove(card)

    def reset_draw_pile(self) -> None:
        """Move all but the top discard back into the draw pile and shuffle it."""
        discarded = list(self.discard_pile)
        if not discarded:
            raise EmptyPileError()
        self.draw_pile = Pile([*self.draw_pile, *discarded[:-1]])
        self.discard_pile = Pile(discarded[-1:])
        self.draw_pile.shuffle()

    def _index_after(self, index: int) -> int:
        index += self.turn_direction
        if index >= len(self.players):
            return 0
        if index < 0:
            return len(self.players) - 1
        return index

    def next_turn(self) -> None:
        """Pass the turn to the next player in the current direction."""
        self.current_player_index = self._index_after(self.current_player_index)
        self.current_player = self.players[self.current_player_index]

    def get_player(self, player_id: int) -> Player | None:
        """Return the player with this ID, or None."""
        return next((p for p in self.players if p.id == player_id), None)

    def peek_next_player(self) -> Player:
        """Return the player whose turn comes next, without moving the turn."""
        return self.players[self._index_after(self.current_player_index)]

    def pop_card_from_draw_pile(self) -> Card:
        """Take the top card of the draw pile, refilling it from discards if empty."""
        try:
            return self.draw_pile.pop()
        except EmptyPileError:
            self.reset_draw_pile()
            return self.draw_pile.pop()

    def _handle_global_event(self, event: GlobalEvent) -> None:
        if isinstance(event, PlayerJoinCommand):
            self._handle_player_join(event)

    def _handle_player_join(self, command: PlayerJoinCommand) -> None:
        if not self.is_lobby_open:
            logger.info("player ID %d can't join, lobby is closed", command.id)
            return
        if self.get_player(command.id) is not None:
            logger.info("player ID %d already in the game", command.id)
            return
        self.players.append(Player(command.id, Hand()))
        logger.info("player ID %d joined", command.id)