"""A shoe of one or more shuffled decks."""

from __future__ import annotations

import math
import random

from striker.cards import Card, Rank, Suit


class Shoe:
    """Cards dealt in order from a shuffled shoe, with a cut card and a burn card."""

    def __init__(
        self,
        number_of_decks: int,
        penetration: float,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = random.Random() if rng is None else rng
        self.cards: list[Card] = [
            Card(rank, suit)
            for _ in range(number_of_decks)
            for suit in Suit
            for rank in Rank
        ]
        self.number_of_cards = len(self.cards)
        self.cut_card = math.floor(self.number_of_cards * penetration + 0.5)
        self.burn_card = 1
        self.number_of_shuffles = 0
        self.out_of_cards = 0
        self.force_shuffle = False
        self.next_card = self.number_of_cards
        self.last_discard = self.number_of_cards
        self.shuffle()

    def __repr__(self) -> str:
        return (
            f"Shoe(number_of_cards={self.number_of_cards}, "
            f"next_card={self.next_card}, cut_card={self.cut_card})"
        )

    def draw_card(self) -> Card:
        """Deal the next card, reshuffling the discards if the shoe runs dry."""
        if self.next_card >= self.number_of_cards:
            self.force_shuffle = True
            self.out_of_cards += 1
            self._shuffle_random()
        card = self.cards[self.next_card]
        self.next_card += 1
        return card

    def shuffle(self) -> None:
        """Gather every card and shuffle the whole shoe."""
        self.last_discard = self.number_of_cards
        self.force_shuffle = False
        self._shuffle_random()

    def should_shuffle(self) -> bool:
        """Mark the discards and report whether the cut card has been reached."""
        self.last_discard = self.next_card
        return self.next_card >= self.cut_card or self.force_shuffle

    def _shuffle_random(self) -> None:
        discards = self.cards[: self.last_discard]
        self._rng.shuffle(discards)
        self.cards[: self.last_discard] = discards
        self.next_card = self.burn_card
        self.number_of_shuffles += 1