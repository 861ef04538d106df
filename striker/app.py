"""The command that runs a blackjack simulation."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from striker.arguments import ArgumentError, Arguments, parse_args
from striker.constants import STRIKER_WHO_AM_I
from striker.parameters import Parameters
from striker.remote import HttpClient
from striker.report import Report
from striker.rules import Rules
from striker.strategy import Strategy
from striker.table import Simulator

_RULE = "  " + "-" * 80


def _banner(title: str) -> str:
    return f"  -- {title:<10} {'-' * 66}"


def _simulate(parameters: Parameters, rules: Rules, strategy: Strategy) -> Simulator:
    return Simulator(parameters, rules, strategy).run_once()


def run(arguments: Arguments, client) -> Report:
    """Run the simulation described by ``arguments`` and return the merged report.

    ``client`` fetches the rules and charts and receives the finished report.
    """
    parameters = Parameters.from_arguments(arguments)
    rules = Rules.fetch(client, arguments.decks)
    strategy = Strategy()
    strategy.configure(client, arguments)

    print(f"Start: {STRIKER_WHO_AM_I}")
    print(_banner("arguments"))
    print(parameters)
    print(rules)
    print(_RULE)

    final_report = Report()
    final_report.begin(parameters)
    workers = parameters.number_of_threads
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_simulate, parameters, rules, strategy) for _ in range(workers)]
        for future in futures:
            final_report.merge(future.result().report)
    final_report.finish()

    print(_banner("results"))
    print(final_report)
    print(_RULE)
    print(_banner("insert"))
    final_report.insert(client)
    print(_RULE)
    return final_report


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the simulation; return the exit status."""
    try:
        arguments = parse_args(argv)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        run(arguments, HttpClient())
    except (RuntimeError, ValueError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())