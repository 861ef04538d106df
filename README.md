# striker

A blackjack simulator. It deals hand after hand between a dealer and one
player, using the table rules of a chosen game (single deck, double deck or
six-deck shoe) and a chosen player strategy, and then reports the number of
rounds, shuffles, wins, losses, pushes, blackjacks, doubles and splits, the
totals bet and won, and the player's overall advantage.

## Installation

```
pip install .
```

The package uses only the Python standard library (Python 3.10 or later).

## Configuration

Table rules and strategy charts are fetched over HTTP. The simulator finds the
service through these environment variables, each holding a host and path
(the simulator puts `http://` in front):

- `STRIKER_URL_RULES`: serves table rules at `<value>/<decks>`
- `STRIKER_URL_CHARTS`: serves strategy charts at `<value>/<decks>/<strategy>`
- `STRIKER_URL_SIMULATIONS`: accepts finished results, posted as JSON to
  `<value>/<simulator>/<playbook>/<name>`

The rules are always fetched. Charts are fetched for every strategy except
`mimic`. Results are posted only when at least 10,000,000 hands have been
played; otherwise a message says that not enough hands were played.

## Usage

```
striker [options]
```

Options:

```
  --help                                       Show this help message
  --version                                    Display the program version
  -h, --number-of-hands <number of hands>      The number of hands to play in this simulation
  -t, --number-of-threads <number of threads>  The number of threads to use in this simulation
  -M, --mimic                                  Use the mimic dealer player strategy
  -B, --basic                                  Use the basic player strategy
  -N, --neural                                 Use the neural player strategy
  -L, --linear                                 Use the linear regression player strategy
  -P, --polynomial                             Use the polynomial regression player strategy
  -H, --high-low                               Use the high low count player strategy
  -W, --wong                                   Use the Wong count player strategy
  -1, --single-deck                            Use a single deck of cards and rules
  -2, --double-deck                            Use a double deck of cards and rules
  -6, --six-shoe                               Use a six deck shoe of cards and rules
```

Defaults are the `mimic` strategy, a single deck, 500,000,000 hands and 24
threads. The number of hands must be between 100 and 10,000,000,000, and the
number of threads between 1 and 32. Commas are allowed in numbers, as in
`--number-of-hands 1,000,000`. Each thread plays its own table for the number
of hands divided by the number of threads, plus one. With a single thread a
progress line is shown while the simulation runs.

An unknown option prints the help text and an error, and the command exits
with status 1; so does a failure to fetch rules or charts.

Example: play a million hands of single-deck basic strategy on one thread:

```
striker --basic --single-deck --number-of-threads 1 --number-of-hands 1,000,000
```

The `mimic` strategy plays like the dealer (standing on hard 17 or more) and
always bets the table minimum. The other strategies take their doubling,
splitting, standing and insurance decisions, and the card counts used to size
bets, from the fetched chart.

## Using it from Python

```python
from striker.arguments import parse_args
from striker.app import run
from striker.remote import HttpClient

arguments = parse_args(["--basic", "--number-of-hands", "100000"])
report = run(arguments, HttpClient())
print(report.advantage)
```

`striker.app.run` takes any object that provides `fetch_json(url)` and
`send_json(url, payload)`, and returns the merged `striker.report.Report`.
Rules and charts can therefore be supplied without a network service, for
example from the documents in `striker.playbooks` (`RULES_TABLE` and
`SINGLE_DECK_BASIC`). The URL environment variables must still be set, since
the URLs are built from them:

```python
import os

from striker.app import run
from striker.arguments import parse_args
from striker.playbooks import RULES_TABLE, SINGLE_DECK_BASIC


class LocalPlaybooks:
    def fetch_json(self, url):
        return SINGLE_DECK_BASIC if url.endswith("/basic") else RULES_TABLE

    def send_json(self, url, payload):
        return {"status": "success"}


os.environ.setdefault("STRIKER_URL_RULES", "localhost/rules")
os.environ.setdefault("STRIKER_URL_CHARTS", "localhost/charts")
report = run(parse_args(["--basic", "-t", "1", "-h", "10,000"]), LocalPlaybooks())
```

## What it does not do

- It does not include a service for rules, charts or results; only the
  single-deck rules and single-deck basic-strategy chart in
  `striker.playbooks` are built in. The `linear`, `polynomial`, `neural`,
  `high-low` and `wong` strategies are chart names requested from the charts
  service.
- It does not store results itself; finished reports are only printed and,
  above the hand threshold, posted to the simulations service.
- Threads share one Python interpreter, so more threads split the work but do
  not make a run faster.

## Running the tests

```
pip install .[test]
pytest
```