"""Totals gathered by a simulation and their presentation."""

from __future__ import annotations

import json
import math
import time
from dataclasses import dataclass
from typing import Any

from striker.constants import BILLION, NUMBER_OF_HANDS_DATABASE, STRIKER_VERSION
from striker.parameters import Parameters
from striker.remote import JsonSender, simulations_url

_MERGED_FIELDS = (
    "total_rounds",
    "total_hands",
    "total_bet",
    "total_won",
    "total_blackjacks",
    "total_doubles",
    "total_splits",
    "total_splits_ace",
    "total_wins",
    "total_loses",
    "total_pushes",
    "total_shuffles",
    "out_of_cards",
)

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


def _ratio(numerator: float, denominator: float) -> float:
    """Divide like floating point hardware: zero denominators give nan or infinity."""
    if denominator:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def _saturating_int(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _INT64_MAX if value > 0 else _INT64_MIN
    return max(_INT64_MIN, min(_INT64_MAX, int(value)))


def _now() -> int:
    return int(time.time())


@dataclass
class Report:
    """Counters of one simulation, or the merged counters of several."""

    name: str = ""
    version: str = ""
    simulator: str = ""
    playbook: str = ""
    strategy: str = ""
    decks: str = ""
    epoch: str = ""
    total_rounds: int = 0
    total_hands: int = 0
    total_bet: int = 0
    total_won: int = 0
    total_blackjacks: int = 0
    total_doubles: int = 0
    total_splits: int = 0
    total_splits_ace: int = 0
    total_wins: int = 0
    total_loses: int = 0
    total_pushes: int = 0
    out_of_cards: int = 0
    total_shuffles: int = 0
    total_threads: int = 0
    start: int = 0
    end: int = 0
    duration: int = 0
    advantage: float = 0.0
    per_billion: float = 0.0

    def begin(self, parameters: Parameters) -> None:
        """Take the run's identity from ``parameters`` and start the clock."""
        self.name = parameters.name
        self.version = STRIKER_VERSION
        self.simulator = parameters.processor
        self.playbook = parameters.playbook
        self.strategy = parameters.strategy
        self.decks = parameters.decks
        self.epoch = parameters.epoch
        self.total_threads = parameters.number_of_threads
        self.start = _now()

    def merge(self, other: Report) -> None:
        """Add the counters of ``other`` to this report."""
        for name in _MERGED_FIELDS:
            setattr(self, name, getattr(self, name) + getattr(other, name))

    def finish(self) -> None:
        """Stop the clock and work out the advantage and the time per billion hands."""
        self.end = _now()
        self.duration = self.end - self.start
        self.advantage = _ratio(self.total_won, self.total_bet) * 100.0
        self.per_billion = _ratio(self.duration * float(BILLION), self.total_hands)

    def insert(self, sender: JsonSender) -> bool:
        """Send the report to the simulations service; return whether it was accepted."""
        if self.total_hands < NUMBER_OF_HANDS_DATABASE:
            print(
                f"    Error: Not enough hands played ({self.total_hands:,}). "
                f"Minimum required is {NUMBER_OF_HANDS_DATABASE:,}"
            )
            return False

        base = simulations_url()
        if base is None:
            raise RuntimeError("Missing simulation URL")
        url = f"http://{base}/{self.simulator}/{self.playbook}/{self.name}"
        try:
            reply = sender.send_json(url, self.to_json())
        except (OSError, ValueError) as error:
            print(f"HTTP error: {error}")
            return False

        if not isinstance(reply, dict) or "status" not in reply:
            return False
        status = reply["status"]
        if status == "success":
            print("Insert successful")
            return True
        print(f"Request failed with status: {json.dumps(status)}")
        return False

    def to_json(self) -> dict[str, Any]:
        """The report as the document the simulations service stores."""
        return {
            "guid": self.name,
            "version": STRIKER_VERSION,
            "simulator": self.simulator,
            "threads": self.total_threads,
            "playbook": self.playbook,
            "decks": self.decks,
            "strategy": self.strategy,
            "rounds": self.total_rounds,
            "hands": self.total_hands,
            "out_of_cards": self.out_of_cards,
            "total_shuffles": self.total_shuffles,
            "total_bet": self.total_bet,
            "total_won": self.total_won,
            "total_blackjacks": self.total_blackjacks,
            "total_doubles": self.total_doubles,
            "total_splits": self.total_splits,
            "total_splits_ace": self.total_splits_ace,
            "total_wins": self.total_wins,
            "total_loses": self.total_loses,
            "total_pushes": self.total_pushes,
            "advantage": self.advantage,
            "epoch": self.epoch,
            "start": self.start,
            "end": self.end,
            "duration": self.duration,
            "per_billion": self.per_billion,
        }

    def __str__(self) -> str:
        hands = self.total_hands

        def count(label: str, value: int, suffix: str = "") -> str:
            line = f"    {label:<26}: {value:>17,}"
            return f"{line} {suffix}" if suffix else line

        def share(label: str, value: int) -> str:
            percent = _ratio(value, hands) * 100.0
            return count(label, value, f"{percent:+08.3f} % of total hands")

        average_time = _saturating_int(_ratio(self.duration * float(BILLION), hands))
        lines = [
            count("Number of hands", self.total_hands),
            count("Number of rounds", self.total_rounds),
            count("Number of shuffles", self.total_shuffles),
            count("Out of cards", self.out_of_cards),
            count(
                "Total bet",
                self.total_bet,
                f"{_ratio(self.total_bet, hands):+08.3f} average bet per hand",
            ),
            count(
                "Total won",
                self.total_won,
                f"{_ratio(self.total_won, hands):+08.3f} average win per hand",
            ),
            share("Number of blackjacks", self.total_blackjacks),
            share("Number of doubles", self.total_doubles),
            share("Number of splits", self.total_splits),
            share("Number of splits - Aces", self.total_splits_ace),
            share("Number of wins", self.total_wins),
            share("Number of pushes", self.total_pushes),
            share("Number of loses", self.total_loses),
            count("Total time", self.duration, "seconds"),
            count("Number of threads", self.total_threads, "threads"),
            count("Average time", average_time, f"seconds per {BILLION:,} hands"),
            f"    {'Player advantage':<26}: {'':>17} {self.advantage:+08.3f} %",
        ]
        return "\n".join(lines)