"""Singly linked card deck with a before-head sentinel."""
import random
from typing import Iterable, Iterator, Optional

from homework.deck.card import Card, Rank, STANDARD_SUIT_ORDER
from homework.utils.logger import get_logger

logger = get_logger(__name__)


class DeckNode:
    """One link in the deck chain."""

    __slots__ = ("card", "next")

    def __init__(self, card: Optional[Card], next: Optional["DeckNode"] = None):
        self.card = card
        self.next = next


class Position:
    """A handle on a node of a deck, or the end marker when empty.

    Positions stay valid while their node is in the deck, including
    across shuffles and sorts.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Optional[DeckNode]):
        self._node = node

    @property
    def node(self) -> Optional[DeckNode]:
        return self._node

    @property
    def is_end(self) -> bool:
        return self._node is None

    @property
    def card(self) -> Card:
        if self._node is None or self._node.card is None:
            raise IndexError("Position does not refer to a card")
        return self._node.card

    @card.setter
    def card(self, value: Card) -> None:
        if self._node is None or self._node.card is None:
            raise IndexError("Position does not refer to a card")
        self._node.card = value

    def next(self) -> "Position":
        """The position one step forward."""
        if self._node is None:
            raise IndexError("Cannot advance past the end of the deck")
        return Position(self._node.next)

    def advance(self, steps: int) -> "Position":
        position = self
        for _ in range(steps):
            position = position.next()
        return position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)


class LinkedDeck:
    """A deck of cards kept as a singly linked list.

    The sentinel node in front of the first card lets every edit go
    through the same insert-after / extract-after primitives.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        """Create a deck holding cards in their iteration order."""
        self._before_head = DeckNode(None)
        self._size = 0

        tail = self.before_begin()
        for card in cards:
            tail = self.insert_after(tail, card)

    @classmethod
    def standard(cls) -> "LinkedDeck":
        """Build the 52-card deck.

        Ranks run from Ace down to Two with suits cycling spade, heart,
        club, diamond, and each card is pushed to the front. Iteration
        therefore starts at the Two of Diamonds and ends at the Ace of
        Spades.
        """
        deck = cls()
        for rank in sorted(Rank, reverse=True):
            for suit in STANDARD_SUIT_ORDER:
                deck.push_front(Card(suit=suit, rank=rank))
        return deck

    def size(self) -> int:
        """Number of cards in the deck."""
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def before_begin(self) -> Position:
        return Position(self._before_head)

    def begin(self) -> Position:
        return Position(self._before_head.next)

    def end(self) -> Position:
        return Position(None)

    def positions(self) -> Iterator[Position]:
        """Yield a position for each card, front to back."""
        node = self._before_head.next
        while node is not None:
            yield Position(node)
            node = node.next

    def __iter__(self) -> Iterator[Card]:
        node = self._before_head.next
        while node is not None:
            yield node.card
            node = node.next

    def to_list(self) -> list[Card]:
        return list(self)

    def push_front(self, card: Card) -> None:
        self.insert_after(self.before_begin(), card)

    def pop_front(self) -> Card:
        """Remove and return the first card.

        Raises:
            IndexError: If the deck is empty.
        """
        if self.empty():
            raise IndexError("pop_front() on an empty deck")
        return self.erase_after(self.before_begin())

    def insert_after(self, position: Position, card: Card) -> Position:
        """Link a new card right after position.

        Args:
            position: Position to insert after (may be before_begin()).
            card: Card to insert.

        Returns:
            Position of the inserted card.
        """
        node = DeckNode(card)
        self._attach_after(position.node, node)
        self._size += 1
        return Position(node)

    def erase_after(self, position: Position) -> Card:
        """Unlink the card following position.

        Args:
            position: Position whose successor is removed.

        Returns:
            The removed card.

        Raises:
            IndexError: If position is the end or has no successor.
        """
        node = self._extract_after(position.node)
        self._size -= 1
        return node.card

    def clear(self) -> None:
        while not self.empty():
            self.pop_front()

    def shuffle(self, rng: random.Random) -> None:
        """Shuffle in place so every ordering is equally likely.

        Each position i, walked front to back, swaps its card with the
        card at an index drawn from [i, size - 1].
        """
        last = self._size - 1
        for index, position in enumerate(self.positions()):
            offset = rng.randint(index, last)
            other = self.begin().advance(offset)
            position.card, other.card = other.card, position.card

        logger.debug(f"Shuffled deck of {self._size} cards")

    def stable_selection_sort(self) -> None:
        """Sort by rank, keeping equal-rank cards in their current order.

        The smallest remaining card (leftmost on ties) is unlinked and
        relinked right after the sorted prefix. Nodes move, cards are
        never copied.
        """
        inserter = self._before_head
        moves = 0

        while inserter.next is not None:
            before_min = self._find_before_min(inserter)
            if before_min is not inserter:
                self._attach_after(inserter, self._extract_after(before_min))
                moves += 1
            inserter = inserter.next

        logger.debug(f"Sorted deck of {self._size} cards with {moves} node moves")

    def __str__(self) -> str:
        return "[" + ", ".join(str(card) for card in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedDeck(size={self._size})"

    @staticmethod
    def _attach_after(node: Optional[DeckNode], node_to_attach: DeckNode) -> None:
        if node is None:
            raise IndexError("Cannot insert after the end of the deck")

        node_to_attach.next = node.next
        node.next = node_to_attach

    @staticmethod
    def _extract_after(node: Optional[DeckNode]) -> DeckNode:
        if node is None or node.next is None:
            raise IndexError("No card follows this position")

        extracted = node.next
        node.next = extracted.next
        extracted.next = None
        return extracted

    @staticmethod
    def _find_before_min(before_start: DeckNode) -> DeckNode:
        """Node preceding the leftmost minimum after before_start."""
        before_min = before_start
        node = before_start.next
        while node.next is not None:
            if node.next.card < before_min.next.card:
                before_min = node
            node = node.next
        return before_min
