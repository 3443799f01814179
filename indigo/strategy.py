"""Computer opponent card selection."""

from random import Random
from typing import Sequence

from indigo.cards import Card, Rank, Suit
from indigo.piles import Table
from indigo.rules import matches


class OpponentStrategy:
    """
    Fixed heuristic used by the computer to pick a card.

    Prefers a lone capturing card, then tries to keep its options open by
    throwing a card from the largest-first suit group, then rank group, and
    otherwise picks at random. Ties inside a group are broken with the
    injected random generator, so a seeded ``Random`` makes play repeatable.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize the strategy.

        Args:
            rng: Random number generator for tie-breaking
        """
        self._rng = rng or Random()

    def choose(self, hand: Sequence[Card], table: Table) -> Card:
        """
        Pick the card to play.

        Args:
            hand: Cards held by the computer (must not be empty)
            table: Current table

        Returns:
            A card from ``hand``
        """
        cards = list(hand)
        if not cards:
            raise ValueError("Cannot choose a card from an empty hand")

        if len(cards) == 1:
            return cards[0]

        candidates: list[Card] = []
        if not table.is_empty():
            candidates = [card for card in cards if matches(card, table.top)]
            if len(candidates) == 1:
                return candidates[0]

        if table.is_empty() or not candidates:
            return self._pick_from_groups(cards)

        return self._pick_from_groups(candidates)

    def _pick_from_groups(self, cards: list[Card]) -> Card:
        """Pick from the first suit group, then rank group, of two or more."""
        group = self._first_group(cards)
        if group:
            return self._rng.choice(group)
        return self._rng.choice(cards)

    @staticmethod
    def _first_group(cards: list[Card]) -> list[Card]:
        # Suits CLUBS..SPADES first, then ranks KING..ACE
        for suit in Suit:
            same_suit = [card for card in cards if card.suit == suit]
            if len(same_suit) > 1:
                return same_suit
        for rank in Rank:
            same_rank = [card for card in cards if card.rank == rank]
            if len(same_rank) > 1:
                return same_rank
        return []
