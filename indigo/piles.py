"""Hand, table and win pile containers."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from indigo.cards import Card
from indigo.rules import calc_score


@dataclass
class Hand:
    """Cards held by one side, in the order they were dealt."""

    cards: list[Card] = field(default_factory=list)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Add dealt cards to the hand."""
        self.cards.extend(cards)

    def card_at(self, index: int) -> Card:
        """Return the card at a 1-based position."""
        if not 1 <= index <= len(self.cards):
            raise IndexError(f"Card index {index} out of range 1-{len(self.cards)}")
        return self.cards[index - 1]

    def remove(self, card: Card) -> None:
        """Remove a played card from the hand."""
        self.cards.remove(card)

    def is_empty(self) -> bool:
        """Check if the hand holds no cards."""
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(f"{i}){card}" for i, card in enumerate(self.cards, start=1))


@dataclass
class Table:
    """Cards played to the middle; the last one played is on top."""

    cards: list[Card] = field(default_factory=list)

    @property
    def top(self) -> Card | None:
        """Return the top card, or None for an empty table."""
        return self.cards[-1] if self.cards else None

    def add_card(self, card: Card) -> None:
        """Put a card on top of the table."""
        self.cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Put several cards on the table, the last one ending on top."""
        self.cards.extend(cards)

    def take_all(self) -> list[Card]:
        """Remove and return every card on the table, bottom first."""
        taken = self.cards.copy()
        self.cards.clear()
        return taken

    def is_empty(self) -> bool:
        """Check if the table is empty."""
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)


@dataclass
class WinPile:
    """Cards captured by one side. Only used for scoring."""

    cards: list[Card] = field(default_factory=list)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Add captured cards to the pile."""
        self.cards.extend(cards)

    @property
    def points(self) -> int:
        """Return the points scored by the captured cards."""
        return calc_score(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)
