"""A blackjack table and the simulator that runs a session on it."""

from __future__ import annotations

import random

from striker.cards import Card
from striker.constants import STATUS_ROUNDS, STRATEGY_MIMIC
from striker.hand import Dealer
from striker.parameters import Parameters
from striker.player import Player
from striker.report import Report
from striker.rules import Rules
from striker.shoe import Shoe
from striker.strategy import Strategy


class Table:
    """One dealer, one player and a shoe, playing hand after hand."""

    def __init__(
        self,
        parameters: Parameters,
        rules: Rules,
        strategy: Strategy,
        rng: random.Random | None = None,
    ) -> None:
        self.parameters = parameters
        self.player = Player(rules, strategy)
        self.shoe = Shoe(parameters.number_of_decks, rules.penetration, rng)
        self.dealer = Dealer(rules.hit_soft_17)
        self.report = Report()
        self.up: Card | None = None
        self.down: Card | None = None

    def __repr__(self) -> str:
        return f"Table(hands={self.report.total_hands}, rounds={self.report.total_rounds})"

    def session(self, mimic: bool) -> None:
        """Play until this table's share of hands has been dealt."""
        while self.report.total_hands < self.parameters.share_of_hands:
            if self.parameters.verbose:
                self._print_status(self.report.total_rounds, self.report.total_hands)

            self.shoe.shuffle()
            self.player.shuffle()
            self.report.total_rounds += 1

            while not self.shoe.should_shuffle():
                self._play_hand(mimic)

        if self.parameters.verbose:
            print("\r", end="", flush=True)

        self.report.out_of_cards = self.shoe.out_of_cards
        self.report.total_shuffles = self.shoe.number_of_shuffles
        self.report.merge(self.player.report)

    def _play_hand(self, mimic: bool) -> None:
        self.report.total_hands += 1
        self.dealer.hand.reset()
        self.player.place_bet(mimic)
        self.deal_cards()

        if not mimic and self.up is not None and self.up.is_ace():
            self.player.insurance()

        if not self.dealer.hand.is_blackjack():
            self.player.play(self.up, self.shoe, mimic)
            if not self.player.busted_or_blackjack():
                while not self.dealer.should_stand():
                    card = self.shoe.draw_card()
                    self.dealer.hand.draw_card(card)
                    self.show_card(card)

        self.show_card(self.down)
        hand = self.dealer.hand
        self.player.payoff(hand.is_blackjack(), hand.is_busted(), hand.total)

    def deal_cards(self) -> None:
        """Deal two cards each, the dealer's second card face up."""
        self.player.draw_card(self.shoe.draw_card())
        self.down = self.shoe.draw_card()
        self.dealer.hand.draw_card(self.down)
        self.player.draw_card(self.shoe.draw_card())
        self.up = self.shoe.draw_card()
        self.dealer.hand.draw_card(self.up)
        self.show_card(self.up)

    def show_card(self, card: Card | None) -> None:
        """Let the player see a card."""
        self.player.show_card(card)

    @staticmethod
    def _print_status(round_number: int, hand_number: int) -> None:
        if round_number % STATUS_ROUNDS == 0:
            print(
                f"\r    Rounds: [{round_number:>13,}] Hands [{hand_number:>13,}]: Simulating...",
                end="",
                flush=True,
            )


class Simulator:
    """Runs one table's session and keeps its report."""

    def __init__(
        self,
        parameters: Parameters,
        rules: Rules,
        strategy: Strategy,
        rng: random.Random | None = None,
    ) -> None:
        self.parameters = parameters
        self.table = Table(parameters, rules, strategy, rng)
        self.report = Report()

    def __repr__(self) -> str:
        return f"Simulator(hands={self.report.total_hands})"

    def run_once(self) -> Simulator:
        """Play the session and gather its totals."""
        mimic = self.parameters.strategy == STRATEGY_MIMIC
        self.table.session(mimic)
        self.report.merge(self.table.report)
        return self