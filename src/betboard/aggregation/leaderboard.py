"""Customer profit leaderboard aggregation.

Ranks customers by net profit over completed bets.
Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from betboard.db import repo
from betboard.db.repo import DbSession
from betboard.models.domain import ALL_COUNTRIES, Country, LeaderboardRowEntity
from betboard.models.types import LeaderboardEntry

logger = logging.getLogger(__name__)

LEADERBOARD_SIZE = 10

CountryFilter = str | Sequence[str] | None


def normalize_country_filter(country_filter: CountryFilter) -> list[Country] | None:
    """Turn a raw country filter into a list of known countries.

    None, blank values, an empty sequence or the ALL sentinel mean
    "no filtering" and return None. Unrecognized values are dropped,
    so a filter made only of unknown values returns an empty list
    (matches nothing).

    Args:
        country_filter: Single country, sequence of countries, or None.

    Returns:
        Deduplicated known countries in input order, or None for no filter.
    """
    if country_filter is None:
        return None

    values = [country_filter] if isinstance(country_filter, str) else list(country_filter)
    values = [v.strip() for v in values if v and v.strip()]

    if not values or ALL_COUNTRIES in values:
        return None

    countries: list[Country] = []
    for value in values:
        country = Country.parse(value)
        if country is None:
            logger.warning(f"Ignoring unknown country filter value: {value!r}")
            continue
        if country not in countries:
            countries.append(country)

    return countries


def get_leaderboard(
    session: DbSession,
    country_filter: CountryFilter = None,
) -> list[LeaderboardEntry]:
    """Compute the top customers by profit.

    Each call recomputes from current data. Database errors propagate
    to the caller.

    Args:
        session: Database session.
        country_filter: Optional country or countries to restrict to.

    Returns:
        At most LEADERBOARD_SIZE entries with profit > 0, highest first.
    """
    countries = normalize_country_filter(country_filter)

    if countries is not None and not countries:
        return []

    rows = repo.get_leaderboard_rows(session, countries=countries, limit=LEADERBOARD_SIZE)
    return [_row_to_entry(row) for row in rows]


def _row_to_entry(row: LeaderboardRowEntity) -> LeaderboardEntry:
    """Build the API entry, resolving missing aggregates to 0."""
    return LeaderboardEntry(
        id=row.customer_id,
        name=f"{row.first_name} {row.last_name}",
        country=row.country,
        total_bets=int(row.total_bets or 0),
        win_percentage=int(row.win_percentage or 0),
        profit=float(row.profit or 0),
    )
