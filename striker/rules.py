"""Table rules for a playbook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from striker.remote import JsonFetcher, rules_url


def _require_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if not isinstance(value, bool):
        raise ValueError(f"Missing or invalid rule: {key}")
    return value


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Missing or invalid rule: {key}")
    return value


def _require_float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Missing or invalid rule: {key}")
    return float(value)


@dataclass
class Rules:
    """The house rules of a blackjack table."""

    playbook: str = ""
    hit_soft_17: bool = False
    surrender: bool = False
    double_any_two_cards: bool = False
    double_after_split: bool = False
    resplit_aces: bool = False
    hit_split_aces: bool = False
    blackjack_bets: int = 0
    blackjack_pays: int = 0
    penetration: float = 0.0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Rules:
        """Build rules from a decoded rules document."""
        playbook = data.get("playbook")
        return cls(
            playbook=playbook if isinstance(playbook, str) else "",
            hit_soft_17=_require_bool(data, "hitSoft17"),
            surrender=_require_bool(data, "surrender"),
            double_any_two_cards=_require_bool(data, "doubleAnyTwoCards"),
            double_after_split=_require_bool(data, "doubleAfterSplit"),
            resplit_aces=_require_bool(data, "resplitAces"),
            hit_split_aces=_require_bool(data, "hitSplitAces"),
            blackjack_bets=_require_int(data, "blackjackBets"),
            blackjack_pays=_require_int(data, "blackjackPays"),
            penetration=_require_float(data, "penetration"),
        )

    @classmethod
    def fetch(cls, fetcher: JsonFetcher, decks: str) -> Rules:
        """Fetch the rules for ``decks`` from the rules service."""
        base = rules_url()
        if base is None:
            raise RuntimeError("Missing rules URL")
        try:
            data = fetcher.fetch_json(f"http://{base}/{decks}")
        except Exception as error:
            raise RuntimeError(f"Error fetching JSON: {error}") from error
        return cls.from_json(data)

    def __str__(self) -> str:
        flags = [
            ("Hit soft 17", self.hit_soft_17),
            ("Surrender", self.surrender),
            ("Double any two cards", self.double_any_two_cards),
            ("Double after split", self.double_after_split),
            ("Re-split aces", self.resplit_aces),
            ("Hit split aces", self.hit_split_aces),
        ]
        rows = [("Table", self.playbook)]
        rows.extend((label, str(value).lower()) for label, value in flags)
        rows.extend(
            [
                ("Blackjack bets", str(self.blackjack_bets)),
                ("Blackjack pays", str(self.blackjack_pays)),
                ("Penetration", f"{self.penetration:.3f} %"),
            ]
        )
        lines = ["    Table Rules"]
        lines.extend(f"{'':>6}{label:<24}: {value}" for label, value in rows)
        return "\n".join(lines)