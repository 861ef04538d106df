"""A blackjack hand and the dealer who holds one."""

from __future__ import annotations

from dataclasses import dataclass, field

from striker.cards import Card


class Hand:
    """Cards held in one hand, with the running blackjack total."""

    def __init__(self) -> None:
        self.cards: list[Card] = []
        self.total = 0
        self._soft_aces = 0

    def __repr__(self) -> str:
        return f"Hand(cards={self.cards!r}, total={self.total})"

    def reset(self) -> None:
        self.cards.clear()
        self.total = 0
        self._soft_aces = 0

    def draw_card(self, card: Card | None) -> None:
        """Add a card to the hand and update the total."""
        if card is None:
            raise ValueError("Expected a card but got None")
        self.cards.append(card)
        self._recalculate()

    def is_blackjack(self) -> bool:
        return len(self.cards) == 2 and self.total == 21

    def is_pair(self) -> bool:
        return len(self.cards) == 2 and self.cards[0].same_rank(self.cards[1])

    def is_pair_of_aces(self) -> bool:
        return self.is_pair() and self.cards[0].is_ace()

    def is_busted(self) -> bool:
        return self.total > 21

    def is_soft(self) -> bool:
        return self._soft_aces > 0

    def is_soft_17(self) -> bool:
        return self.total == 17 and self.is_soft()

    def card_pair(self) -> Card | None:
        """The first card of the hand, used as the pair's key."""
        return self.cards[0] if self.cards else None

    def split_pair(self) -> Card:
        """Remove and return the second card of a pair."""
        if not self.is_pair():
            raise ValueError("Error: Trying to split a non-pair")
        card = self.cards.pop()
        self._recalculate()
        return card

    def _recalculate(self) -> None:
        points = [card.rank.points() for card in self.cards]
        self.total = sum(points)
        self._soft_aces = points.count(11)
        while self.total > 21 and self._soft_aces > 0:
            self.total -= 10
            self._soft_aces -= 1


@dataclass
class Dealer:
    """The dealer's hand and house rule on soft seventeen."""

    hit_soft_17: bool
    hand: Hand = field(default_factory=Hand)

    def should_stand(self) -> bool:
        if self.hit_soft_17 and self.hand.is_soft_17():
            return False
        return self.hand.total >= 17