"""Built-in playbook documents: single-deck basic strategy and its table rules."""

from __future__ import annotations

from typing import Any


def _row(decisions: str) -> list[str]:
    """Expand a string of one-letter decisions into a chart row."""
    return list(decisions)


SINGLE_DECK_BASIC: dict[str, Any] = {
    "playbook": "single-deck-basic",
    "counts": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    "insurance": "N",
    "soft-double": {
        "12": _row("NNNNNNNNNN"),
        "13": _row("NNYYYNNNNN"),
        "14": _row("NNYYYNNNNN"),
        "15": _row("NNYYYNNNNN"),
        "16": _row("NNYYYNNNNN"),
        "17": _row("YYYYYNNNNN"),
        "18": _row("NYYYYNNNNN"),
        "19": _row("NNNNYNNNNN"),
        "20": _row("NNNNNNNNNN"),
        "21": _row("NNNNNNNNNN"),
    },
    "hard-double": {
        "4": _row("NNNNNNNNNN"),
        "5": _row("NNNNNNNNNN"),
        "6": _row("NNNNNNNNNN"),
        "7": _row("NNNNNNNNNN"),
        "8": _row("NNNYYNNNNN"),
        "9": _row("YYYYYNNNNN"),
        "10": _row("YYYYYYYYNN"),
        "11": _row("YYYYYYYYYY"),
        "12": _row("NNNNNNNNNN"),
        "13": _row("NNNNNNNNNN"),
        "14": _row("NNNNNNNNNN"),
        "15": _row("NNNNNNNNNN"),
        "16": _row("NNNNNNNNNN"),
        "17": _row("NNNNNNNNNN"),
        "18": _row("NNNNNNNNNN"),
        "19": _row("NNNNNNNNNN"),
        "20": _row("NNNNNNNNNN"),
        "21": _row("NNNNNNNNNN"),
    },
    "pair-split": {
        "2": _row("NYYYYYNNNN"),
        "3": _row("NNYYYYNNNN"),
        "4": _row("NNNNNNNNNN"),
        "5": _row("NNNNNNNNNN"),
        "6": _row("YYYYYNNNNN"),
        "7": _row("YYYYYYNNNN"),
        "8": _row("YYYYYYYYYY"),
        "9": _row("YYYYYNYYNN"),
        "X": _row("NNNNNNNNNN"),
        "A": _row("YYYYYYYYYY"),
    },
    "soft-stand": {
        "12": _row("NNNNNNNNNN"),
        "13": _row("NNNNNNNNNN"),
        "14": _row("NNNNNNNNNN"),
        "15": _row("NNNNNNNNNN"),
        "16": _row("NNNNNNNNNN"),
        "17": _row("NNNNNNNNNN"),
        "18": _row("YYYYYYYNNN"),
        "19": _row("YYYYYYYYYY"),
        "20": _row("YYYYYYYYYY"),
        "21": _row("YYYYYYYYYY"),
    },
    "hard-stand": {
        "4": _row("NNNNNNNNNN"),
        "5": _row("NNNNNNNNNN"),
        "6": _row("NNNNNNNNNN"),
        "7": _row("NNNNNNNNNN"),
        "8": _row("NNNNNNNNNN"),
        "9": _row("NNNNNNNNNN"),
        "10": _row("NNNNNNNNNN"),
        "11": _row("NNNNNNNNNN"),
        "12": _row("NNYYYNNNNN"),
        "13": _row("YYYYYNNNNN"),
        "14": _row("YYYYYNNNNN"),
        "15": _row("YYYYYNNNNN"),
        "16": _row("YYYYYNNNNN"),
        "17": _row("YYYYYYYYYY"),
        "18": _row("YYYYYYYYYY"),
        "19": _row("YYYYYYYYYY"),
        "20": _row("YYYYYYYYYY"),
        "21": _row("YYYYYYYYYY"),
    },
}

RULES_TABLE: dict[str, Any] = {
    "playbook": "single-deck",
    "hitSoft17": True,
    "surrender": False,
    "doubleAnyTwoCards": True,
    "doubleAfterSplit": False,
    "resplitAces": False,
    "hitSplitAces": False,
    "blackjackBets": 2,
    "blackjackPays": 3,
    "penetration": 0.75,
}