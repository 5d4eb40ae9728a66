"""Leaderboard client: API access, country selection and displayed rows."""

from betboard.client.api_client import LeaderboardClient
from betboard.client.reconciler import LeaderboardReconciler

__all__ = ["LeaderboardClient", "LeaderboardReconciler"]
