import random
from collections import Counter

import pytest

from striker.cards import Card, Rank, Suit
from striker.shoe import Shoe


@pytest.mark.parametrize("decks", [1, 2, 6])
def test_shoe_creation(decks):
    shoe = Shoe(decks, 0.5)
    assert shoe.number_of_cards == 52 * decks
    assert shoe.cut_card == 26 * decks
    card = shoe.draw_card()
    assert isinstance(card, Card)


@pytest.mark.parametrize("decks", [1, 2, 6])
def test_shoe_holds_each_card_once_per_deck(decks):
    shoe = Shoe(decks, 0.75)
    counts = Counter(shoe.cards)
    assert len(counts) == 52
    assert set(counts.values()) == {decks}


def test_cut_card_rounds_penetration():
    assert Shoe(1, 0.75).cut_card == 39
    assert Shoe(6, 0.75).cut_card == 234


@pytest.mark.parametrize("decks", [1, 2, 6])
def test_shuffle(decks):
    shoe = Shoe(decks, 0.5, rng=random.Random(7))
    original_cards = list(shoe.cards)
    shoe.shuffle()
    assert original_cards != shoe.cards
    assert Counter(original_cards) == Counter(shoe.cards)
    assert not shoe.should_shuffle()
    shoe.next_card = shoe.number_of_cards
    assert shoe.should_shuffle()


@pytest.mark.parametrize("decks", [1, 2, 6])
def test_force_shuffle(decks):
    shoe = Shoe(decks, 0.5)
    shuffles = shoe.number_of_shuffles
    for _ in range(shoe.number_of_cards):
        shoe.draw_card()
        shoe.last_discard = shoe.next_card
    assert shoe.should_shuffle()
    assert shoe.number_of_shuffles == shuffles + 1
    assert shoe.out_of_cards == 1


def test_burn_card_is_skipped_after_shuffle():
    shoe = Shoe(1, 0.75, rng=random.Random(3))
    second = shoe.cards[1]
    assert shoe.draw_card() == second
    assert shoe.next_card == 2


def test_new_shoe_counts_one_shuffle():
    shoe = Shoe(2, 0.5)
    assert shoe.number_of_shuffles == 1
    assert shoe.out_of_cards == 0
    assert Card(Rank.ACE, Suit.SPADES) in shoe.cards