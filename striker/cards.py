"""Playing cards: ranks, suits and cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_RANK_NAMES = {10: "Ten", 11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}


class Rank(Enum):
    """Card rank, ordered from two to ace."""

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

    def key(self) -> str:
        """Chart key: digits for pips, 'X' for ten-valued cards, 'A' for aces."""
        if self is Rank.ACE:
            return "A"
        if self.value >= 10:
            return "X"
        return str(self.value)

    def points(self) -> int:
        """Blackjack value of the rank, counting an ace as eleven."""
        if self is Rank.ACE:
            return 11
        return min(self.value, 10)

    def __str__(self) -> str:
        return _RANK_NAMES.get(self.value, str(self.value))


class Suit(Enum):
    """Card suit."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def same_rank(self, other: Card) -> bool:
        return self.rank == other.rank

    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"