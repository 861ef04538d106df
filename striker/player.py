"""The player at the table: bets, plays and settles hands."""

from __future__ import annotations

from striker.cards import Card
from striker.constants import MAXIMUM_BET, MINIMUM_BET
from striker.report import Report
from striker.rules import Rules
from striker.shoe import Shoe
from striker.strategy import Strategy
from striker.wager import Wager

_SEEN_SLOTS = 13


def _new_wager() -> Wager:
    return Wager(MINIMUM_BET, MAXIMUM_BET)


def _settle_split(report: Report, wager: Wager, dealer_busted: bool, dealer_total: int) -> None:
    """Settle one hand of a split; blackjacks and insurance do not apply."""
    if wager.hand.is_busted():
        wager.lost()
        report.total_loses += 1
    elif dealer_busted or wager.hand.total > dealer_total:
        wager.won()
        report.total_wins += 1
    elif dealer_total > wager.hand.total:
        wager.lost()
        report.total_loses += 1
    else:
        wager.push()
        report.total_pushes += 1
    report.total_won += wager.amount_won
    report.total_bet += wager.amount_bet


class Player:
    """A player following a strategy, counting every card seen."""

    def __init__(self, rules: Rules, strategy: Strategy) -> None:
        self.rules = rules
        self.strategy = strategy
        self.wager = _new_wager()
        self.splits: list[Wager] = []
        self.report = Report()
        self.seen_cards = [0] * _SEEN_SLOTS

    def __repr__(self) -> str:
        return f"Player(wager={self.wager!r}, splits={len(self.splits)})"

    def shuffle(self) -> None:
        """Forget the cards seen, as the shoe has been shuffled."""
        self.seen_cards = [0] * _SEEN_SLOTS

    def draw_card(self, card: Card | None) -> None:
        """Take a card into the main hand and count it."""
        self.wager.hand.draw_card(card)
        self.show_card(card)

    def show_card(self, card: Card | None) -> None:
        """Count a card that has been exposed."""
        if card is not None:
            self.seen_cards[card.rank.points()] += 1

    def busted_or_blackjack(self) -> bool:
        """Whether the dealer has no need to play out the hand."""
        if not self.splits:
            return self.wager.hand.is_busted() or self.wager.hand.is_blackjack()
        return all(split.hand.is_busted() for split in self.splits)

    def place_bet(self, mimic: bool) -> None:
        """Start a new round with the minimum bet, or the strategy's bet."""
        self.splits.clear()
        self.wager.hand.reset()
        bet = MINIMUM_BET if mimic else self.strategy.bet(self.seen_cards)
        self.wager.place_bet(bet)

    def insurance(self) -> None:
        if self.strategy.want_insurance(self.seen_cards):
            self.wager.place_insurance_bet()

    def mimic_stand(self) -> bool:
        """Stand as a dealer would: on hard 17 or more."""
        hand = self.wager.hand
        return not hand.is_soft_17() and hand.total >= 17

    def play(self, up: Card, shoe: Shoe, mimic: bool) -> None:
        """Play the main hand against the dealer's up card."""
        hand = self.wager.hand
        if hand.is_blackjack():
            self.report.total_blackjacks += 1
            return

        if mimic:
            while not self.mimic_stand():
                self.draw_card(shoe.draw_card())
            return

        if self.strategy.want_double(self.seen_cards, hand.total, hand.is_soft(), up):
            self.wager.double_bet()
            self.draw_card(shoe.draw_card())
            self.report.total_doubles += 1
            return

        if hand.is_pair() and self.strategy.want_split(self.seen_cards, hand.card_pair(), up):
            self._split(shoe, up)
            return

        while not hand.is_busted() and not self.strategy.want_stand(
            self.seen_cards, hand.total, hand.is_soft(), up
        ):
            self.draw_card(shoe.draw_card())

    def _deal_to(self, wager: Wager, shoe: Shoe) -> None:
        card = shoe.draw_card()
        self.show_card(card)
        wager.hand.draw_card(card)

    def _split(self, shoe: Shoe, up: Card) -> None:
        wager = self.wager
        split = _new_wager()

        self.report.total_splits += 1
        if wager.hand.is_pair_of_aces():
            self.report.total_splits_ace += 1
            wager.split_hand(split)
            self._deal_to(wager, shoe)
            self._deal_to(split, shoe)
            self.splits.append(split)
            return

        wager.split_hand(split)
        self.report.total_splits += 1

        self._deal_to(wager, shoe)
        self.play_split(wager, shoe, up)

        self._deal_to(split, shoe)
        self.play_split(split, shoe, up)

        self.splits.append(split)

    def play_split(self, wager: Wager, shoe: Shoe, up: Card) -> None:
        """Play one hand of a split, splitting again where the strategy says so."""
        hand = wager.hand
        if hand.is_pair() and self.strategy.want_split(self.seen_cards, hand.card_pair(), up):
            split = _new_wager()
            wager.split_hand(split)
            self.report.total_splits += 1

            self._deal_to(wager, shoe)
            self.play_split(wager, shoe, up)

            self._deal_to(split, shoe)
            self.play_split(split, shoe, up)

            self.splits.append(split)
            return

        stand = self.strategy.want_stand(self.seen_cards, hand.total, hand.is_soft(), up)
        while not hand.is_busted() and not stand:
            self._deal_to(wager, shoe)
            if not hand.is_busted():
                stand = self.strategy.want_stand(self.seen_cards, hand.total, hand.is_soft(), up)

    def payoff(self, dealer_blackjack: bool, dealer_busted: bool, dealer_total: int) -> None:
        """Settle every hand of the round against the dealer's result."""
        if not self.splits:
            self.payoff_hand(dealer_blackjack, dealer_busted, dealer_total)
            return
        _settle_split(self.report, self.wager, dealer_busted, dealer_total)
        for split in self.splits:
            _settle_split(self.report, split, dealer_busted, dealer_total)

    def payoff_hand(self, dealer_blackjack: bool, dealer_busted: bool, dealer_total: int) -> None:
        """Settle the main hand and its insurance bet."""
        wager = self.wager
        hand = wager.hand
        report = self.report

        if dealer_blackjack:
            wager.won_insurance()
            if hand.is_blackjack():
                wager.push()
                report.total_pushes += 1
            else:
                wager.lost()
                report.total_loses += 1
        else:
            wager.lost_insurance()
            if hand.is_blackjack():
                wager.won_blackjack(self.rules.blackjack_pays, self.rules.blackjack_bets)
            elif hand.is_busted():
                wager.lost()
                report.total_loses += 1
            elif dealer_busted or hand.total > dealer_total:
                wager.won()
                report.total_wins += 1
            elif dealer_total > hand.total:
                wager.lost()
                report.total_loses += 1
            else:
                wager.push()
                report.total_pushes += 1

        report.total_bet += wager.amount_bet + wager.insurance_bet
        report.total_won += wager.amount_won + wager.insurance_won