"""Command-line options of the simulator."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Sequence

from striker.constants import (
    DECKS_DOUBLE_DECK,
    DECKS_SINGLE_DECK,
    DECKS_SIX_SHOE,
    NUMBER_OF_CORES_DEFAULT,
    NUMBER_OF_CORES_MAXIMUM,
    NUMBER_OF_CORES_MINIMUM,
    NUMBER_OF_HANDS_DEFAULT,
    NUMBER_OF_HANDS_MAXIMUM,
    NUMBER_OF_HANDS_MINIMUM,
    STRATEGY_BASIC,
    STRATEGY_HIGH_LOW,
    STRATEGY_LINEAR,
    STRATEGY_MIMIC,
    STRATEGY_NEURAL,
    STRATEGY_POLYNOMIAL,
    STRATEGY_WONG,
    STRIKER_VERSION,
    STRIKER_WHO_AM_I,
)

_UNSIGNED = re.compile(r"\+?\d+")

_STRATEGY_FLAGS = {
    "-M": STRATEGY_MIMIC,
    "--mimic": STRATEGY_MIMIC,
    "-B": STRATEGY_BASIC,
    "--basic": STRATEGY_BASIC,
    "-L": STRATEGY_LINEAR,
    "--linear": STRATEGY_LINEAR,
    "-P": STRATEGY_POLYNOMIAL,
    "--polynomial": STRATEGY_POLYNOMIAL,
    "-N": STRATEGY_NEURAL,
    "--neural": STRATEGY_NEURAL,
    "-H": STRATEGY_HIGH_LOW,
    "--high-low": STRATEGY_HIGH_LOW,
    "-W": STRATEGY_WONG,
    "--wong": STRATEGY_WONG,
}

_DECK_FLAGS = {
    "-1": (DECKS_SINGLE_DECK, 1),
    "--single-deck": (DECKS_SINGLE_DECK, 1),
    "-2": (DECKS_DOUBLE_DECK, 2),
    "--double-deck": (DECKS_DOUBLE_DECK, 2),
    "-6": (DECKS_SIX_SHOE, 6),
    "--six-shoe": (DECKS_SIX_SHOE, 6),
}

_HELP_LINES = (
    "Usage: striker [options]",
    "",
    "Options:",
    "  --help                                       Show this help message",
    "  --version                                    Display the program version",
    "  -h, --number-of-hands <number of hands>      The number of hands to play in this simulation",
    "  -t, --number-of-threads <number of threads>  The number of threads to use in this simulation",
    "  -M, --mimic                                  Use the mimic dealer player strategy",
    "  -B, --basic                                  Use the basic player strategy",
    "  -N, --neural                                 Use the neural player strategy",
    "  -L, --linear                                 Use the linear regression player strategy",
    "  -P, --polynomial                             Use the polynomial regression player strategy",
    "  -H, --high-low                               Use the high low count player strategy",
    "  -W, --wong                                   Use the Wong count player strategy",
    "  -1, --single-deck                            Use a single deck of cards and rules",
    "  -2, --double-deck                            Use a double deck of cards and rules",
    "  -6, --six-shoe                               Use a six deck shoe of cards and rules",
)


class ArgumentError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class Arguments:
    """Options chosen on the command line."""

    strategy: str = STRATEGY_MIMIC
    decks: str = DECKS_SINGLE_DECK
    number_of_decks: int = 1
    number_of_hands: int = NUMBER_OF_HANDS_DEFAULT
    number_of_threads: int = NUMBER_OF_CORES_DEFAULT


def help_message() -> str:
    """The usage text listing every option."""
    return "\n".join(_HELP_LINES)


def _bounded_count(value: str, minimum: int, maximum: int, field_name: str) -> int:
    text = value.replace(",", "")
    if not _UNSIGNED.fullmatch(text):
        raise ArgumentError(f"Invalid {field_name}")
    number = int(text)
    if not minimum <= number <= maximum:
        raise ArgumentError(f"{field_name} must be between {minimum} and {maximum}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> Arguments:
    """Parse command-line options, not including the program name.

    ``--help`` and ``--version`` print their text and raise ``SystemExit(0)``.
    """
    if argv is None:
        argv = sys.argv[1:]
    arguments = Arguments()
    tokens = iter(argv)
    for token in tokens:
        if token in _STRATEGY_FLAGS:
            arguments.strategy = _STRATEGY_FLAGS[token]
        elif token in _DECK_FLAGS:
            arguments.decks, arguments.number_of_decks = _DECK_FLAGS[token]
        elif token in ("-h", "--number-of-hands"):
            value = next(tokens, None)
            if value is None:
                raise ArgumentError("Missing number of hands")
            arguments.number_of_hands = _bounded_count(
                value, NUMBER_OF_HANDS_MINIMUM, NUMBER_OF_HANDS_MAXIMUM, "number of hands"
            )
        elif token in ("-t", "--number-of-threads"):
            value = next(tokens, None)
            if value is None:
                raise ArgumentError("Missing number of threads")
            arguments.number_of_threads = _bounded_count(
                value, NUMBER_OF_CORES_MINIMUM, NUMBER_OF_CORES_MAXIMUM, "number of threads"
            )
        elif token == "--help":
            print(help_message())
            raise SystemExit(0)
        elif token == "--version":
            print(f"{STRIKER_WHO_AM_I}: version: {STRIKER_VERSION}")
            raise SystemExit(0)
        else:
            print(help_message())
            raise ArgumentError(f"Error: Invalid argument: {token}")
    return arguments