"""Aggregation module for leaderboard rankings.

- Reads DB and produces ranked summaries
- Forbidden: writes, HTTP shaping
"""
