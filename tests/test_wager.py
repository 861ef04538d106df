import pytest

from striker.cards import Card, Rank, Suit
from striker.constants import MAXIMUM_BET, MINIMUM_BET
from striker.wager import Wager

DOUBLE_MIN_BET = MINIMUM_BET * 2


def new_test_wager():
    return Wager(MINIMUM_BET, MAXIMUM_BET)


def test_initialization():
    wager = new_test_wager()
    assert wager.minimum_bet == MINIMUM_BET
    assert wager.maximum_bet == MAXIMUM_BET
    assert wager.amount_bet == 0
    assert wager.amount_won == 0
    assert wager.insurance_bet == 0
    assert wager.insurance_won == 0


def test_place_bet_within_bounds():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    assert wager.amount_bet == DOUBLE_MIN_BET


def test_place_bet_below_minimum():
    wager = new_test_wager()
    wager.place_bet(MINIMUM_BET - 2)
    assert wager.amount_bet == MINIMUM_BET


def test_place_bet_above_maximum():
    wager = new_test_wager()
    wager.place_bet(MAXIMUM_BET + 2)
    assert wager.amount_bet == MAXIMUM_BET


def test_place_bet_odd_rounds_up():
    wager = new_test_wager()
    wager.place_bet(5)
    assert wager.amount_bet == 6


def test_insurance_and_double_bet():
    wager = new_test_wager()
    wager.place_bet(MINIMUM_BET)
    wager.place_insurance_bet()
    assert wager.insurance_bet == MINIMUM_BET // 2

    wager.double_bet()
    assert wager.amount_bet == DOUBLE_MIN_BET


def test_won_blackjack():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    wager.won_blackjack(3, 2)
    assert wager.amount_won == DOUBLE_MIN_BET * 3 // 2


def test_won_and_lost():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    wager.won()
    assert wager.amount_won == DOUBLE_MIN_BET

    wager.place_bet(DOUBLE_MIN_BET)
    wager.lost()
    assert wager.amount_won == -DOUBLE_MIN_BET


def test_push_leaves_winnings_at_zero():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    wager.push()
    assert wager.amount_won == 0


def test_insurance_outcomes():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    wager.place_insurance_bet()

    wager.won_insurance()
    assert wager.insurance_won == DOUBLE_MIN_BET

    wager.place_insurance_bet()
    wager.lost_insurance()
    assert wager.insurance_won == -MINIMUM_BET


def test_split_hand_valid_pair():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    wager.hand.draw_card(Card(Rank.ACE, Suit.HEARTS))
    wager.hand.draw_card(Card(Rank.ACE, Suit.SPADES))

    split_wager = new_test_wager()
    wager.split_hand(split_wager)

    assert wager.hand.total == 11
    assert split_wager.hand.total == 11
    assert wager.amount_bet == DOUBLE_MIN_BET
    assert split_wager.amount_bet == DOUBLE_MIN_BET


def test_split_hand_invalid_pair_raises():
    wager = new_test_wager()
    wager.place_bet(DOUBLE_MIN_BET)
    wager.hand.draw_card(Card(Rank.ACE, Suit.HEARTS))
    wager.hand.draw_card(Card(Rank.KING, Suit.SPADES))

    split_wager = new_test_wager()
    with pytest.raises(ValueError, match="Cannot split a non-pair hand"):
        wager.split_hand(split_wager)


def test_place_bet_resets_hand():
    wager = new_test_wager()
    wager.hand.draw_card(Card(Rank.NINE, Suit.HEARTS))
    wager.place_bet(DOUBLE_MIN_BET)
    assert wager.hand.cards == []
    assert wager.hand.total == 0