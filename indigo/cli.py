"""
Console front end for playing Indigo against the computer.

Usage:

    python -m indigo --seed 7 --play-first yes
"""

import argparse
from random import Random
from typing import Callable, Sequence

from config import config
from indigo.game import EventType, GameEvent, GameState, IndigoGame, Side
from indigo.logging_utils import get_logger, setup_logging
from indigo.rules import Score

logger = get_logger(__name__)

EXIT_COMMAND = "exit"


class ConsoleGame:
    """Drives an ``IndigoGame`` from text input and prints its events."""

    def __init__(
        self,
        game: IndigoGame,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
        show_computer_hand: bool = True,
    ) -> None:
        self.game = game
        self._read = read
        self._write = write
        self.show_computer_hand = show_computer_hand
        # leftover table as it stood before the final award
        self._awarded: list[str] = []

        game.subscribe(self._on_card_played, EventType.CARD_PLAYED)
        game.subscribe(self._on_cards_won, EventType.CARDS_WON)
        game.subscribe(self._on_table_awarded, EventType.TABLE_AWARDED)

    def ask_play_first(self) -> bool:
        """Ask until the answer is yes or no."""
        while True:
            self._write("Play first?")
            answer = self._read().strip().lower()
            if answer == "yes":
                return True
            if answer == "no":
                return False

    def run(self, human_first: bool | None = None) -> Score | None:
        """
        Play one full game.

        Args:
            human_first: Who opens; asked on the console when None

        Returns:
            The final score, or None if the player exited early
        """
        self._write("Indigo Card Game")
        if human_first is None:
            human_first = self.ask_play_first()

        self.game.start(human_first)
        self._write(f"Initial cards on the table: {self.game.table}")
        self._write("")
        self._write(self._describe_table())

        while not self.game.is_over:
            if self.game.state == GameState.HUMAN_TURN:
                if not self._human_turn():
                    break
            else:
                self._computer_turn()
            self._write("")
            self._write(self._describe_table())

        if not self.game.exited and self.game.final_score is not None:
            self._write(str(self.game.final_score))
        self._write("Game Over")
        return None if self.game.exited else self.game.final_score

    def _human_turn(self) -> bool:
        """Play the player's card; False when the player exits."""
        hand = self.game.player.hand
        self._write(f"Cards in hand: {hand}")
        while True:
            self._write(f"Choose a card to play (1-{len(hand)}):")
            answer = self._ask()
            if answer == EXIT_COMMAND:
                self.game.exit_game()
                return False
            if answer.isdecimal() and 1 <= int(answer) <= len(hand):
                return self.game.play_human(int(answer))

    def _computer_turn(self) -> None:
        if self.show_computer_hand:
            self._write(" ".join(str(card) for card in self.game.computer.hand))
        self.game.play_computer()

    def _ask(self) -> str:
        try:
            return self._read().strip().lower()
        except EOFError:
            logger.info("Input closed, leaving the game")
            return EXIT_COMMAND

    def _describe_table(self) -> str:
        if self._awarded:
            count, top = len(self._awarded), self._awarded[-1]
            return f"{count} cards on the table, and the top card is {top}"
        top = self.game.table.top
        if top is None:
            return "No cards on the table"
        return f"{len(self.game.table)} cards on the table, and the top card is {top}"

    def _on_card_played(self, event: GameEvent) -> None:
        if event.data["side"] == Side.COMPUTER.value:
            self._write(f"Computer plays {event.data['card']}")

    def _on_cards_won(self, event: GameEvent) -> None:
        side = Side(event.data["side"])
        self._write(f"{side} wins cards")
        self._write(str(event.data["score"]))

    def _on_table_awarded(self, event: GameEvent) -> None:
        self._awarded = list(event.data["cards"])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indigo",
        description="Play the Indigo card game against the computer.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.game.seed,
        help="Seed for shuffling and computer tie-breaks (env INDIGO_SEED).",
    )
    parser.add_argument(
        "--play-first",
        choices=["yes", "no"],
        default=None,
        help="Answer the 'Play first?' question up front.",
    )
    parser.add_argument(
        "--log-level",
        default=config.logging.level,
        help="Logging level (env LOG_LEVEL).",
    )
    parser.add_argument(
        "--hide-computer-hand",
        action="store_true",
        default=not config.game.show_computer_hand,
        help="Do not print the computer's cards before it plays.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, debug=config.debug)

    game = IndigoGame(rng=Random(args.seed))
    console = ConsoleGame(game, show_computer_hand=not args.hide_computer_hand)
    human_first = None if args.play_first is None else args.play_first == "yes"

    try:
        console.run(human_first)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
