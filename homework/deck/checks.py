"""Order checks for sorted decks."""
from collections import defaultdict
from typing import Iterable

from homework.deck.card import Card, Rank, Suit


def is_sorted(cards: Iterable[Card]) -> bool:
    """Check that ranks never decrease."""
    cards = list(cards)
    return all(not b < a for a, b in zip(cards, cards[1:]))


def _suits_by_rank(cards: Iterable[Card]) -> dict[Rank, list[Suit]]:
    """Suit sequence of each rank, in order of appearance."""
    grouped: dict[Rank, list[Suit]] = defaultdict(list)
    for card in cards:
        grouped[card.rank].append(card.suit)
    return dict(grouped)


def is_stably_sorted(cards: Iterable[Card], reference: Iterable[Card]) -> bool:
    """Check that cards is a stable rank sort of reference.
    
    Args:
        cards: Sorted sequence to verify.
        reference: Sequence as it was before sorting.
        
    Returns:
        True if cards is sorted and, within every rank, keeps the suits in
        the order they had in reference.
    """
    cards = list(cards)
    return is_sorted(cards) and _suits_by_rank(cards) == _suits_by_rank(reference)


def is_permutation(cards: Iterable[Card], reference: Iterable[Card]) -> bool:
    """Check that both sequences hold the same physical cards."""
    return sorted(c.identity for c in cards) == sorted(c.identity for c in reference)
