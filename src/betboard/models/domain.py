"""Domain models for Betboard.

Pure Python dataclasses and enums representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime

# Filter value meaning "no country restriction"
ALL_COUNTRIES = "ALL"


# ============================================================================
# Customer Domain
# ============================================================================


class Country(str, enum.Enum):
    """Closed set of customer countries."""

    ESTONIA = "Estonia"
    FINLAND = "Finland"
    NORWAY = "Norway"
    CHILE = "Chile"
    CANADA = "Canada"

    @classmethod
    def parse(cls, value: str) -> Country | None:
        """Return the matching country, or None when unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_COUNTRIES: list[str] = [c.value for c in Country]


@dataclass
class CustomerEntity:
    """Domain model for a customer."""

    id: str
    first_name: str
    last_name: str
    country: Country
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# ============================================================================
# Bet Domain
# ============================================================================


class BetStatus(str, enum.Enum):
    """Bet settlement status. PENDING bets never count toward stats."""

    PENDING = "PENDING"
    WON = "WON"
    LOST = "LOST"


@dataclass
class BetEntity:
    """Domain model for a bet."""

    id: str
    customer_id: str
    stake: float
    odds: float
    status: BetStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ============================================================================
# Leaderboard Domain
# ============================================================================


@dataclass
class LeaderboardRowEntity:
    """One aggregated row as returned by the leaderboard query.

    win_percentage is None when the customer has no completed bets.
    """

    customer_id: str
    first_name: str
    last_name: str
    country: str
    total_bets: int
    win_percentage: float | None
    profit: float | None
