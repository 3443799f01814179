"""Indigo card game engine - UI-agnostic core plus a console front end."""

from indigo.cards import Card, Deck, DrawResult, DrawStatus, Rank, Suit
from indigo.piles import Hand, Table, WinPile
from indigo.rules import Score, calc_score, matches
from indigo.strategy import OpponentStrategy

__all__ = [
    "Card",
    "Deck",
    "DrawResult",
    "DrawStatus",
    "Rank",
    "Suit",
    "Hand",
    "Table",
    "WinPile",
    "Score",
    "calc_score",
    "matches",
    "OpponentStrategy",
]
