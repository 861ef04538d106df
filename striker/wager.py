"""A bet on one hand, with its insurance side bet."""

from __future__ import annotations

from striker.hand import Hand


class Wager:
    """A hand together with the amounts bet and won on it."""

    def __init__(self, minimum_bet: int, maximum_bet: int) -> None:
        self.hand = Hand()
        self.minimum_bet = minimum_bet
        self.maximum_bet = maximum_bet
        self.amount_bet = 0
        self.amount_won = 0
        self.insurance_bet = 0
        self.insurance_won = 0

    def __repr__(self) -> str:
        return (
            f"Wager(hand={self.hand!r}, amount_bet={self.amount_bet}, "
            f"amount_won={self.amount_won})"
        )

    def place_bet(self, bet: int) -> None:
        """Start a new hand with the bet clamped to the limits and rounded up to even."""
        self.hand.reset()
        clamped = min(self.maximum_bet, max(self.minimum_bet, bet))
        self.amount_bet = ((clamped + 1) // 2) * 2
        self.amount_won = 0
        self.insurance_bet = 0
        self.insurance_won = 0

    def place_insurance_bet(self) -> None:
        self.insurance_bet = self.amount_bet // 2

    def double_bet(self) -> None:
        self.amount_bet *= 2

    def won_blackjack(self, pays: int, bet: int) -> None:
        self.amount_won = (self.amount_bet * pays) // bet

    def won(self) -> None:
        self.amount_won = self.amount_bet

    def lost(self) -> None:
        self.amount_won = -self.amount_bet

    def push(self) -> None:
        """A tie: nothing is won or lost."""

    def won_insurance(self) -> None:
        self.insurance_won = self.insurance_bet * 2

    def lost_insurance(self) -> None:
        self.insurance_won = -self.insurance_bet

    def split_hand(self, split: Wager) -> None:
        """Move the second card of a pair into ``split`` at the same stake."""
        if not self.hand.is_pair():
            raise ValueError("Cannot split a non-pair hand")
        split.amount_bet = self.amount_bet
        split.hand.draw_card(self.hand.split_pair())