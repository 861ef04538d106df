import copy
from types import SimpleNamespace

import pytest

from striker.cards import Card, Rank, Suit
from striker.playbooks import RULES_TABLE, SINGLE_DECK_BASIC
from striker.rules import Rules
from striker.strategy import Strategy

ONE_OF_EACH = [0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1]


class _Fetcher:
    def __init__(self, data):
        self.data = data
        self.urls = []

    def fetch_json(self, url):
        self.urls.append(url)
        return copy.deepcopy(self.data)


class _FailingFetcher:
    def fetch_json(self, url):
        raise OSError("Cannot fetch json")


def _arguments(strategy="basic", decks="single-deck", number_of_decks=1):
    return SimpleNamespace(strategy=strategy, decks=decks, number_of_decks=number_of_decks)


@pytest.fixture
def basic(monkeypatch, capsys):
    monkeypatch.setenv("STRIKER_URL_CHARTS", "example.com/charts")
    strategy = Strategy()
    strategy.configure(_Fetcher(SINGLE_DECK_BASIC), _arguments())
    capsys.readouterr()
    return strategy


def _with_table(**overrides):
    strategy = Strategy()
    data = {"playbook": "test", "insurance": "N", "counts": [0] * 10}
    data.update(overrides)
    strategy.load_table(data)
    return strategy


def test_fetch_error_raises(monkeypatch):
    monkeypatch.setenv("STRIKER_URL_CHARTS", "example.com/charts")
    with pytest.raises(RuntimeError, match="Error fetching JSON"):
        Strategy().configure(_FailingFetcher(), _arguments())


def test_missing_charts_url_raises(monkeypatch):
    monkeypatch.delenv("STRIKER_URL_CHARTS", raising=False)
    with pytest.raises(RuntimeError, match="Missing strategy chart URL"):
        Strategy().configure(_Fetcher(SINGLE_DECK_BASIC), _arguments())


def test_configure_builds_url_and_prints(monkeypatch, capsys):
    monkeypatch.setenv("STRIKER_URL_CHARTS", "example.com/charts")
    fetcher = _Fetcher(SINGLE_DECK_BASIC)
    strategy = Strategy()
    strategy.configure(fetcher, _arguments(number_of_decks=2, decks="double-deck"))
    assert fetcher.urls == ["http://example.com/charts/double-deck/basic"]
    assert strategy.number_of_cards == 104
    output = capsys.readouterr().out
    assert "Soft Double" in output
    assert "Counts" in output


def test_mimic_does_not_fetch():
    strategy = Strategy()
    strategy.configure(_FailingFetcher(), _arguments(strategy="Mimic", number_of_decks=6))
    assert strategy.number_of_cards == 312
    assert strategy.playbook == "single-deck-mimic"


def test_true_count_nonzero_unseen():
    seen_cards = [0, 0, 2, 2, 2, 2, 2, 2, 2, 2, 8, 2]
    strategy = Strategy()
    running = strategy.running_count(seen_cards)
    assert strategy.true_count(seen_cards, running) == 0


def test_true_count_no_unseen_cards():
    strategy = Strategy()
    assert strategy.true_count([0, 0] + [4] * 8 + [16, 4], 10) == 0


def test_counts_with_weights():
    strategy = _with_table(counts=[1] * 10)
    seen_cards = [0, 0, 3, 3, 3, 3, 2, 2, 2, 2, 4, 2]
    assert strategy.running_count(seen_cards) == 26
    assert strategy.true_count(seen_cards, 26) == 26
    assert strategy.bet(seen_cards) == 52


def test_negative_count_bets_nothing():
    strategy = _with_table(counts=[-1] * 10)
    seen_cards = [0, 0, 3, 3, 3, 3, 2, 2, 2, 2, 4, 2]
    assert strategy.running_count(seen_cards) == -26
    assert strategy.bet(seen_cards) == 0


def test_bet_base_case():
    assert Strategy().bet(ONE_OF_EACH) == 0


def test_insurance_default():
    assert Strategy().want_insurance(ONE_OF_EACH) is False


@pytest.mark.parametrize(
    "value, expected",
    [("yes", True), ("Y", True), ("no", False), ("n", False), ("0", True), ("1", False), ("-2", True), ("r0", True), ("r-1", False), ("r5", True)],
)
def test_insurance_decisions(value, expected):
    strategy = _with_table(insurance=value)
    assert strategy.want_insurance(ONE_OF_EACH) is expected


def test_unparseable_entry_uses_default():
    up = Card(Rank.TEN, Suit.HEARTS)
    strategy = _with_table(**{"hard-double": {"9": ["?"] * 10}, "hard-stand": {"9": ["?"] * 10}})
    assert strategy.want_double(ONE_OF_EACH, 9, False, up) is False
    assert strategy.want_stand(ONE_OF_EACH, 9, False, up) is True


def test_play_double(basic):
    up = Card(Rank.TEN, Suit.HEARTS)
    assert basic.want_double(ONE_OF_EACH, 20, False, up) is False
    assert basic.want_double(ONE_OF_EACH, 11, False, up) is True


def test_play_split(basic):
    up = Card(Rank.TEN, Suit.HEARTS)
    assert basic.want_split(ONE_OF_EACH, Card(Rank.TEN, Suit.HEARTS), up) is False
    assert basic.want_split(ONE_OF_EACH, Card(Rank.EIGHT, Suit.CLUBS), up) is True


def test_play_stand(basic):
    up = Card(Rank.TEN, Suit.HEARTS)
    assert basic.want_stand(ONE_OF_EACH, 20, False, up) is True
    assert basic.want_stand(ONE_OF_EACH, 16, False, up) is False


def test_missing_chart_row_raises(basic):
    with pytest.raises(KeyError):
        basic.want_double(ONE_OF_EACH, 3, True, Card(Rank.TWO, Suit.CLUBS))


def test_single_deck_basic_structure(basic):
    assert basic.playbook == "single-deck-basic"
    assert basic.insurance == "N"
    assert len(basic.counts) == 12
    assert basic.soft_double.get_value("13", 2) == "N"
    assert basic.soft_double.get_value("13", 4) == "Y"
    assert basic.hard_double.get_value("10", 8) == "Y"
    assert basic.pair_split.get_value("8", 10) == "Y"
    assert basic.soft_stand.get_value("18", 9) == "N"
    assert basic.hard_stand.get_value("13", 4) == "Y"


def test_rules_table_contents():
    rules = Rules.from_json(RULES_TABLE)
    assert rules.playbook == "single-deck"
    assert rules.hit_soft_17 is True
    assert rules.surrender is False
    assert rules.double_any_two_cards is True
    assert rules.double_after_split is False
    assert rules.resplit_aces is False
    assert rules.hit_split_aces is False
    assert rules.blackjack_bets == 2
    assert rules.blackjack_pays == 3
    assert rules.penetration == pytest.approx(0.75)


def test_format_counts():
    text = _with_table(counts=[1, -1, 0, 2, 0, 0, 0, 0, 0, 0]).format_counts()
    lines = text.split("\n")
    assert lines[0] == "Counts"
    assert lines[1].endswith("X-----A---")
    assert lines[2] == "     " + "   0, " * 2 + "   1,   -1,    0,    2, " + "   0, " * 6
    assert text.endswith("-\n")