"""Betboard: customer profit leaderboard filterable by country."""

__version__ = "0.1.0"
