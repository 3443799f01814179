"""Indigo game engine with state machine."""

from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import Callable

from transitions import Machine

from indigo.cards import Card, Deck, DrawStatus
from indigo.game.events import EventEmitter, EventType, GameEvent
from indigo.game.state import GameState
from indigo.logging_utils import get_logger
from indigo.piles import Hand, Table, WinPile
from indigo.rules import HAND_SIZE, INITIAL_TABLE_CARDS, Score, matches, score_piles
from indigo.strategy import OpponentStrategy

logger = get_logger(__name__)


class Side(Enum):
    """The two sides of the table."""

    PLAYER = "player"
    COMPUTER = "computer"

    def __str__(self) -> str:
        return self.value.title()


@dataclass
class PlayerState:
    """Cards owned by one side."""

    side: Side
    hand: Hand = field(default_factory=Hand)
    pile: WinPile = field(default_factory=WinPile)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game for the presentation layer."""

    state: GameState
    table: tuple[Card, ...]
    player_hand: tuple[Card, ...]
    computer_hand: tuple[Card, ...]
    player_pile: tuple[Card, ...]
    computer_pile: tuple[Card, ...]
    cards_in_deck: int
    score: Score

    @property
    def table_top(self) -> Card | None:
        """Return the top card of the table, if any."""
        return self.table[-1] if self.table else None


class IndigoGame:
    """
    Indigo game engine using a state machine.

    Owns every card location of a single session: deck, table, both hands
    and both win piles. UI-agnostic; communication happens through events,
    snapshots and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_to_player", "source": "setup", "dest": "human_turn"},
        {"trigger": "deal_to_computer", "source": "setup", "dest": "computer_turn"},
        {"trigger": "player_done", "source": "human_turn", "dest": "computer_turn"},
        {"trigger": "computer_done", "source": "computer_turn", "dest": "human_turn"},
        {"trigger": "end_game", "source": ["human_turn", "computer_turn"], "dest": "game_over"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        strategy: OpponentStrategy | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            rng: Random number generator for shuffling and computer
                tie-breaks, for reproducible games
            strategy: Computer opponent (built on ``rng`` if not provided)
        """
        rng = rng or Random()
        self.deck = Deck(rng=rng)
        self.strategy = strategy or OpponentStrategy(rng=rng)
        self.table = Table()
        self.player = PlayerState(Side.PLAYER)
        self.computer = PlayerState(Side.COMPUTER)
        self.events = EventEmitter()

        # True while it is the player's turn; flipped after every play
        self.play_first = True
        # Leftover table cards go to the last side that captured
        self.last_winner = Side.PLAYER
        self.exited = False
        self.final_score: Score | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="setup",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.state == GameState.GAME_OVER

    @property
    def current(self) -> PlayerState:
        """Return the side whose turn it is."""
        return self.player if self.play_first else self.computer

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start(self, human_first: bool) -> bool:
        """
        Shuffle, deal and hand the first turn out.

        Args:
            human_first: Whether the player takes the first turn

        Returns:
            True if the game was started
        """
        if self.state != GameState.SETUP:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Game already started",
                state=self.state.name,
            )
            return False

        self.deck.reset()
        self.deck.shuffle()
        self.play_first = human_first

        self.table.add_cards(self._draw(INITIAL_TABLE_CARDS))
        self.events.emit_new(EventType.TABLE_DEALT, cards=[str(c) for c in self.table])
        for state in (self.player, self.computer):
            self._deal_hand(state)

        self.events.emit_new(EventType.GAME_STARTED, first=str(self.current.side))
        logger.debug("Game started, %s plays first", self.current.side)

        if human_first:
            self.deal_to_player()
        else:
            self.deal_to_computer()
        self._begin_turn()
        return True

    def play_human(self, index: int) -> bool:
        """
        Player plays a card.

        Args:
            index: 1-based position of the card in the player's hand

        Returns:
            True if the card was played
        """
        if self.state != GameState.HUMAN_TURN:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Not the player's turn",
                state=self.state.name,
            )
            return False

        hand = self.player.hand
        if not 1 <= index <= len(hand):
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"Choose a card between 1 and {len(hand)}",
                index=index,
            )
            return False

        self._play_card(self.player, hand.card_at(index))
        return True

    def play_computer(self) -> Card | None:
        """
        Computer plays the card its strategy picks.

        Returns:
            The card played, or None if it is not the computer's turn
        """
        if self.state != GameState.COMPUTER_TURN:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Not the computer's turn",
                state=self.state.name,
            )
            return None

        card = self.strategy.choose(self.computer.hand.cards, self.table)
        self._play_card(self.computer, card)
        return card

    def exit_game(self) -> bool:
        """
        Player quits mid-game.

        The cards on the table are abandoned and no card-count bonus is
        scored.

        Returns:
            True if the game was ended
        """
        if self.state != GameState.HUMAN_TURN:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Can only exit on the player's turn",
                state=self.state.name,
            )
            return False

        self.exited = True
        self.final_score = self.score()
        self.events.emit_new(EventType.PLAYER_EXITED, abandoned=len(self.table))
        logger.debug("Player exited with %d cards on the table", len(self.table))
        self.end_game()
        self.events.emit_new(EventType.GAME_ENDED, reason="exit", score=self.final_score)
        return True

    def score(self) -> Score:
        """Return the running score (no card-count bonus)."""
        return score_piles(self.player.pile.cards, self.computer.pile.cards)

    def snapshot(self) -> GameSnapshot:
        """Capture the current game for display."""
        return GameSnapshot(
            state=self.state,
            table=tuple(self.table),
            player_hand=tuple(self.player.hand),
            computer_hand=tuple(self.computer.hand),
            player_pile=tuple(self.player.pile),
            computer_pile=tuple(self.computer.pile),
            cards_in_deck=len(self.deck),
            score=self.final_score or self.score(),
        )

    def _draw(self, n: int) -> tuple[Card, ...]:
        """Draw from the deck, reporting short or rejected draws."""
        result = self.deck.draw(n)
        if result.status == DrawStatus.INVALID_REQUEST:
            self.events.emit_new(EventType.INVALID_DRAW, requested=n)
        elif result.status == DrawStatus.INSUFFICIENT:
            self.events.emit_new(
                EventType.INSUFFICIENT_CARDS,
                requested=n,
                drawn=len(result),
            )
        return result.cards

    def _deal_hand(self, state: PlayerState) -> None:
        cards = self._draw(HAND_SIZE)
        state.hand.add_cards(cards)
        self.events.emit_new(
            EventType.HAND_DEALT,
            side=state.side.value,
            count=len(cards),
            cards_in_deck=len(self.deck),
        )

    def _begin_turn(self) -> None:
        """Refill the hand of the side to play, or pass if it has nothing."""
        state = self.current
        if state.hand.is_empty() and not self.deck.is_empty():
            self._deal_hand(state)

        if state.hand.is_empty():
            self.events.emit_new(EventType.TURN_PASSED, side=state.side.value)
            self._end_turn()

    def _play_card(self, state: PlayerState, card: Card) -> None:
        top = self.table.top
        self.table.add_card(card)
        state.hand.remove(card)
        self.events.emit_new(
            EventType.CARD_PLAYED,
            side=state.side.value,
            card=str(card),
            top=str(top) if top else None,
        )

        if matches(card, top):
            won = self.table.take_all()
            state.pile.add_cards(won)
            self.last_winner = state.side
            self.events.emit_new(
                EventType.CARDS_WON,
                side=state.side.value,
                cards=[str(c) for c in won],
                score=self.score(),
            )
            logger.debug("%s wins %d cards with %s", state.side, len(won), card)

        self._end_turn()

    def _end_turn(self) -> None:
        self.play_first = not self.play_first

        if self._cards_exhausted():
            self._finish()
            return

        if self.state == GameState.HUMAN_TURN:
            self.player_done()
        else:
            self.computer_done()
        self._begin_turn()

    def _cards_exhausted(self) -> bool:
        return (
            self.player.hand.is_empty()
            and self.computer.hand.is_empty()
            and self.deck.is_empty()
        )

    def _finish(self) -> None:
        """Award the leftover table and score with the card-count bonus."""
        if not self.table.is_empty():
            winner = self.player if self.last_winner == Side.PLAYER else self.computer
            leftover = self.table.take_all()
            winner.pile.add_cards(leftover)
            self.events.emit_new(
                EventType.TABLE_AWARDED,
                side=winner.side.value,
                cards=[str(c) for c in leftover],
            )

        # play_first has already been flipped past the last play here
        self.final_score = score_piles(
            self.player.pile.cards,
            self.computer.pile.cards,
            play_first=self.play_first,
            add_bonus=True,
        )
        logger.debug("Game over: %r", self.final_score)
        self.end_game()
        self.events.emit_new(EventType.GAME_ENDED, reason="cards_exhausted", score=self.final_score)
