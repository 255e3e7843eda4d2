"""Playing card compared by rank alone."""
from enum import Enum
from dataclasses import dataclass


class Suit(str, Enum):
    """Card suits. Suits carry no order."""
    SPADE = "S"
    HEART = "H"
    DIAMOND = "D"
    CLUB = "C"
    
    def __str__(self) -> str:
        return self.value


class Rank(int, Enum):
    """Card ranks (2-14, where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    
    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]


# Suit cycle used when generating a standard deck
STANDARD_SUIT_ORDER = (Suit.SPADE, Suit.HEART, Suit.CLUB, Suit.DIAMOND)


@dataclass(frozen=True, eq=False)
class Card:
    """A playing card.
    
    Equality, ordering and hashing look at the rank only, so two cards of
    the same rank compare equal whatever their suits.
    """
    suit: Suit
    rank: Rank
    
    @property
    def identity(self) -> tuple[Suit, Rank]:
        """The (suit, rank) pair that tells two physical cards apart."""
        return (self.suit, self.rank)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank
    
    def __lt__(self, other: "Card") -> bool:
        return self.rank < other.rank
    
    def __gt__(self, other: "Card") -> bool:
        return other < self
    
    def __le__(self, other: "Card") -> bool:
        return not other < self
    
    def __ge__(self, other: "Card") -> bool:
        return not self < other
    
    def __hash__(self) -> int:
        return hash(self.rank)
    
    def __str__(self) -> str:
        return f"({self.rank}|{self.suit})"
    
    def __repr__(self) -> str:
        return str(self)
    
    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'AS', '10h', '2c'.
        
        Args:
            s: Card string (rank + suit letter).
            
        Returns:
            Card instance.
            
        Raises:
            ValueError: If the rank or suit is not recognised.
        """
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")
        
        suit = Suit(s[-1].upper())
        rank_str = s[:-1].upper()
        
        rank_map = {"A": 14, "K": 13, "Q": 12, "J": 11, "T": 10}
        if rank_str in rank_map:
            rank = Rank(rank_map[rank_str])
        elif rank_str.isdigit():
            rank = Rank(int(rank_str))
        else:
            raise ValueError(f"Invalid card rank: {rank_str!r}")
        
        return cls(suit=suit, rank=rank)
