"""Pydantic models for the Betboard API.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LeaderboardEntry(BaseModel):
    """Computed ranking row for one customer (never persisted)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    country: str
    total_bets: int
    win_percentage: int
    profit: float


class ErrorResponse(BaseModel):
    """Body of a failed API response."""

    error: str


class HealthStatus(BaseModel):
    """Health check response."""

    status: str
