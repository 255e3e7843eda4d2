"""Linked deck exercise."""
from .card import Card, Suit, Rank, STANDARD_SUIT_ORDER
from .linked_deck import LinkedDeck, DeckNode, Position
from .checks import is_sorted, is_stably_sorted, is_permutation

__all__ = [
    "Card",
    "Suit",
    "Rank",
    "STANDARD_SUIT_ORDER",
    "LinkedDeck",
    "DeckNode",
    "Position",
    "is_sorted",
    "is_stably_sorted",
    "is_permutation",
]
