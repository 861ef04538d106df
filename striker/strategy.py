"""Player strategy: charts of decisions and a card-counting system."""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

from striker.cards import Card, Rank
from striker.chart import Chart
from striker.constants import (
    DECKS_SINGLE_DECK,
    NUMBER_OF_CARDS_IN_DECK,
    STRATEGY_MIMIC,
    TRUE_COUNT_BET,
    TRUE_COUNT_MULTIPLIER,
)
from striker.remote import JsonFetcher, charts_url

_NUMBER = re.compile(r"[+-]?\d+")
_COUNT_SLOTS = 12
_HEADER = "--------------------2-----3-----4-----5-----6-----7-----8-----9-----X-----A---"
_FOOTER = "------------------------------------------------------------------------------"


def _parse_int(text: str) -> int | None:
    return int(text) if _NUMBER.fullmatch(text) else None


def _decide(value: str, true_count: int, default: bool) -> bool:
    """Interpret a chart entry: yes/no, a count threshold, or a reverse threshold."""
    entry = value.lower()
    if entry in ("yes", "y"):
        return True
    if entry in ("no", "n"):
        return False
    if entry.startswith("r"):
        limit = _parse_int(entry[1:])
        return true_count <= (0 if limit is None else limit)
    limit = _parse_int(entry)
    return default if limit is None else true_count >= limit


def _load_chart(table: Any, chart: Chart) -> None:
    if not isinstance(table, dict):
        return
    for key, values in table.items():
        if not isinstance(values, list):
            continue
        for up, value in enumerate(values, start=Rank.TWO.points()):
            chart.insert(key, up, value if isinstance(value, str) else "---")


class Strategy:
    """Decides bets, insurance, doubles, splits and stands from charts and counts."""

    def __init__(self) -> None:
        self.playbook = f"{DECKS_SINGLE_DECK}-{STRATEGY_MIMIC}"
        self.counts: list[int] = [0] * _COUNT_SLOTS
        self.insurance = "N"
        self.soft_double = Chart("Soft Double")
        self.hard_double = Chart("Hard Double")
        self.pair_split = Chart("Pair Split")
        self.soft_stand = Chart("Soft Stand")
        self.hard_stand = Chart("Hard Stand")
        self.number_of_cards = NUMBER_OF_CARDS_IN_DECK

    def __repr__(self) -> str:
        return f"Strategy(playbook={self.playbook!r}, number_of_cards={self.number_of_cards})"

    def configure(self, fetcher: JsonFetcher, arguments: Any) -> None:
        """Size the shoe and, unless mimicking the dealer, fetch and show the charts."""
        self.number_of_cards = arguments.number_of_decks * NUMBER_OF_CARDS_IN_DECK
        if arguments.strategy.lower() == STRATEGY_MIMIC:
            return
        base = charts_url()
        if base is None:
            raise RuntimeError("Missing strategy chart URL")
        url = f"http://{base}/{arguments.decks}/{arguments.strategy}"
        try:
            data = fetcher.fetch_json(url)
        except Exception as error:
            raise RuntimeError(f"Error fetching JSON: {error}") from error
        self.load_table(data)
        for chart in self.charts():
            print(chart)
        print(self.format_counts())

    def charts(self) -> tuple[Chart, ...]:
        return (self.soft_double, self.hard_double, self.pair_split, self.soft_stand, self.hard_stand)

    def load_table(self, data: dict[str, Any]) -> None:
        """Fill the strategy from a decoded playbook document."""
        playbook = data.get("playbook")
        self.playbook = playbook if isinstance(playbook, str) else ""
        insurance = data.get("insurance")
        self.insurance = insurance if isinstance(insurance, str) else ""
        counts = data.get("counts")
        if not isinstance(counts, list):
            counts = []
        self.counts = [0, 0] + [
            count if isinstance(count, int) and not isinstance(count, bool) else 0
            for count in counts
        ]
        _load_chart(data.get("soft-double"), self.soft_double)
        _load_chart(data.get("hard-double"), self.hard_double)
        _load_chart(data.get("pair-split"), self.pair_split)
        _load_chart(data.get("soft-stand"), self.soft_stand)
        _load_chart(data.get("hard-stand"), self.hard_stand)

    def running_count(self, seen_cards: Sequence[int]) -> int:
        """Weighted count of the cards seen, indexed by card value."""
        return sum(
            weight * seen
            for weight, seen in zip(self.counts[:_COUNT_SLOTS], seen_cards[:_COUNT_SLOTS])
        )

    def true_count(self, seen_cards: Sequence[int], running_count: int) -> int:
        """Running count per half deck of unseen cards, rounded down."""
        unseen = self.number_of_cards - sum(seen_cards)
        if unseen <= 0:
            return 0
        return math.floor(running_count / (unseen / TRUE_COUNT_MULTIPLIER))

    def _current_true_count(self, seen_cards: Sequence[int]) -> int:
        return self.true_count(seen_cards, self.running_count(seen_cards))

    def bet(self, seen_cards: Sequence[int]) -> int:
        return max(0, self._current_true_count(seen_cards)) * TRUE_COUNT_BET

    def want_insurance(self, seen_cards: Sequence[int]) -> bool:
        return _decide(self.insurance, self._current_true_count(seen_cards), False)

    def want_double(self, seen_cards: Sequence[int], total: int, soft: bool, up: Card) -> bool:
        chart = self.soft_double if soft else self.hard_double
        value = chart.get_value(str(total), up.rank.points())
        return _decide(value, self._current_true_count(seen_cards), False)

    def want_split(self, seen_cards: Sequence[int], pair: Card, up: Card) -> bool:
        value = self.pair_split.get_value(pair.rank.key(), up.rank.points())
        return _decide(value, self._current_true_count(seen_cards), False)

    def want_stand(self, seen_cards: Sequence[int], total: int, soft: bool, up: Card) -> bool:
        chart = self.soft_stand if soft else self.hard_stand
        value = chart.get_value(str(total), up.rank.points())
        return _decide(value, self._current_true_count(seen_cards), True)

    def format_counts(self) -> str:
        """The count weights laid out under the up-card header."""
        cells = "".join(f"{count:4}, " for count in self.counts[:_COUNT_SLOTS])
        return f"Counts\n{_HEADER}\n     {cells}\n{_FOOTER}\n"