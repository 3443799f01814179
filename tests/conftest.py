"""Pytest fixtures for Indigo tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from indigo.cards import Card, Deck, Rank, Suit
from indigo.game import IndigoGame
from indigo.piles import Table
from indigo.strategy import OpponentStrategy


def cards(*specs: str) -> list[Card]:
    """Build cards from strings like '10C', 'K♦'."""
    return [Card.from_string(s) for s in specs]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_table():
    """A table with no cards."""
    return Table()


@pytest.fixture
def clubs_ten_table():
    """A table with 10♣ on top."""
    return Table(cards("7H", "10C"))


@pytest.fixture
def strategy(rng):
    """Computer strategy with seeded tie-breaks."""
    return OpponentStrategy(rng=rng)


@pytest.fixture
def game(rng):
    """A new, not yet started game."""
    return IndigoGame(rng=rng)


@pytest.fixture
def started_game(game):
    """A game dealt with the player to open."""
    game.start(human_first=True)
    return game


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=6):
    """Generate a hand of distinct cards."""
    return draw(
        st.lists(card_strategy(), min_size=min_cards, max_size=max_cards, unique=True)
    )
