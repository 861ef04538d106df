"""Settings of one simulation run, derived from the command line."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from striker.constants import STRIKER_VERSION, STRIKER_WHO_AM_I, TIME_LAYOUT


@dataclass
class Parameters:
    """Everything a simulation run needs to know about its configuration."""

    name: str
    processor: str
    playbook: str
    strategy: str
    decks: str
    epoch: str
    number_of_decks: int
    number_of_hands: int
    share_of_hands: int
    number_of_threads: int
    verbose: bool

    @classmethod
    def from_arguments(cls, arguments: Any, now: datetime | None = None) -> Parameters:
        """Derive parameters from parsed arguments at time ``now`` (local time by default)."""
        if now is None:
            now = datetime.now().astimezone()
        threads = max(1, arguments.number_of_threads)
        stamp = int(now.timestamp())
        return cls(
            name=f"{STRIKER_WHO_AM_I}_{now.year:04}_{now.month:02}_{now.day:02}_{stamp:012}",
            processor=STRIKER_WHO_AM_I,
            playbook=f"{arguments.decks}-{arguments.strategy}",
            strategy=arguments.strategy,
            decks=arguments.decks,
            epoch=now.strftime(TIME_LAYOUT),
            number_of_decks=arguments.number_of_decks,
            number_of_hands=arguments.number_of_hands,
            share_of_hands=arguments.number_of_hands // threads + 1,
            number_of_threads=arguments.number_of_threads,
            verbose=arguments.number_of_threads == 1,
        )

    def __str__(self) -> str:
        rows = [
            ("Processor", self.processor),
            ("Threads", str(self.number_of_threads)),
            ("Name", self.name),
            ("Version", STRIKER_VERSION),
            ("Playbook", self.playbook),
            ("Decks", self.decks),
            ("Strategy", self.strategy),
            ("Number of hands", f"{self.number_of_hands:>17,}"),
            ("Thread share of hands", f"{self.share_of_hands:>17,}"),
            ("Epoch", self.epoch),
        ]
        return "\n".join(f"{'':>4}{label:<26}: {value}" for label, value in rows)