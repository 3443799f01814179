"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator

from indigo.logging_utils import get_logger

logger = get_logger(__name__)

DECK_SIZE = 52


class Suit(Enum):
    """Card suits, in deck enumeration order."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """
    Card ranks, highest first.

    Iteration order (KING down to ACE) is the order the deck is built in
    and the order the computer opponent searches rank groups in.
    """

    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    TEN = "10"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"
    ACE = "A"

    def __str__(self) -> str:
        return self.value

    @property
    def is_point_rank(self) -> bool:
        """Check if a card of this rank is worth a point when captured."""
        return self in (Rank.ACE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def is_point_card(self) -> bool:
        """Check if this card scores a point."""
        return self.rank.is_point_rank

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '10♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.value: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class DrawStatus(Enum):
    """Outcome of a draw request."""

    OK = auto()
    # Requested count outside 1..52, nothing drawn
    INVALID_REQUEST = auto()
    # Fewer cards left than requested, whatever remained was drawn
    INSUFFICIENT = auto()


@dataclass(frozen=True)
class DrawResult:
    """Cards handed out by a single draw request."""

    cards: tuple[Card, ...]
    requested: int
    status: DrawStatus = DrawStatus.OK

    @property
    def ok(self) -> bool:
        """Check if the request was fulfilled in full."""
        return self.status == DrawStatus.OK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)


class Deck:
    """A standard 52-card deck, drawn from the front."""

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self._rng.shuffle(self._cards)

    def draw(self, n: int) -> DrawResult:
        """
        Draw ``n`` cards from the top of the deck.

        Never raises. A count outside 1..52 draws nothing and leaves the deck
        untouched; a count larger than what is left draws every remaining
        card. Both cases are reported through ``DrawResult.status``.
        """
        if not 1 <= n <= DECK_SIZE:
            logger.warning("Invalid number of cards: %s", n)
            return DrawResult(cards=(), requested=n, status=DrawStatus.INVALID_REQUEST)

        if len(self._cards) < n:
            logger.warning(
                "The remaining cards are insufficient to meet the request "
                "(requested %d, %d left)",
                n,
                len(self._cards),
            )
            cards = tuple(self._cards)
            self._cards.clear()
            return DrawResult(cards=cards, requested=n, status=DrawStatus.INSUFFICIENT)

        cards = tuple(self._cards[:n])
        del self._cards[:n]
        return DrawResult(cards=cards, requested=n)

    def is_empty(self) -> bool:
        """Check if no cards are left."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
