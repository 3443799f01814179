"""Indigo capture and scoring rules."""

from dataclasses import dataclass
from typing import Collection, Iterable

from indigo.cards import Card

# Fixed rules of the game
HAND_SIZE = 6
INITIAL_TABLE_CARDS = 4
CARD_COUNT_BONUS = 3


def matches(played: Card, table_top: Card | None) -> bool:
    """
    Check if a played card captures the table.

    A card captures when it shares a rank or a suit with the top card.
    Nothing can be captured from an empty table.
    """
    if table_top is None:
        return False
    return played.rank == table_top.rank or played.suit == table_top.suit


def calc_score(cards: Iterable[Card]) -> int:
    """Count the point cards (A, 10, J, Q, K) among captured cards."""
    return sum(1 for card in cards if card.is_point_card)


@dataclass(frozen=True)
class Score:
    """Points and captured card counts for both sides."""

    player: int
    computer: int
    player_cards: int
    computer_cards: int

    def __str__(self) -> str:
        return (
            f"Score: Player {self.player} - Computer {self.computer}\n"
            f"Cards: Player {self.player_cards} - Computer {self.computer_cards}"
        )


def card_count_bonus(
    player_cards: int,
    computer_cards: int,
    play_first: bool,
) -> tuple[int, int]:
    """
    Split the end-of-game bonus for holding more cards.

    Args:
        player_cards: Cards captured by the player
        computer_cards: Cards captured by the computer
        play_first: Turn flag at the moment of scoring; True favours the
            player on a tie. The turn loop flips this flag after every play,
            including the last one, so on a tie the bonus goes to whoever
            would have played next.

    Returns:
        (player bonus, computer bonus)
    """
    if player_cards > computer_cards:
        return CARD_COUNT_BONUS, 0
    if computer_cards > player_cards:
        return 0, CARD_COUNT_BONUS
    if play_first:
        return CARD_COUNT_BONUS, 0
    return 0, CARD_COUNT_BONUS


def score_piles(
    player_pile: Collection[Card],
    computer_pile: Collection[Card],
    play_first: bool = True,
    add_bonus: bool = False,
) -> Score:
    """
    Score both win piles.

    The card-count bonus is only added when ``add_bonus`` is set, which the
    turn loop does once, at the natural end of the game.
    """
    player_bonus, computer_bonus = (
        card_count_bonus(len(player_pile), len(computer_pile), play_first)
        if add_bonus
        else (0, 0)
    )
    return Score(
        player=calc_score(player_pile) + player_bonus,
        computer=calc_score(computer_pile) + computer_bonus,
        player_cards=len(player_pile),
        computer_cards=len(computer_pile),
    )
