"""API module for Betboard.

API layer:
- Validates inputs, reads DB through the aggregation layer
- Returns payloads for the leaderboard UI
- Forbidden: writes
"""
