"""Blackjack simulator with fetched table rules and player strategy charts."""

__version__ = "3.0.0"