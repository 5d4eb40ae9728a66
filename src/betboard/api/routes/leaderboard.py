"""Leaderboard API endpoints.

GET /customers - Unfiltered top customers by profit
GET /leaderboard?country=X&country=Y - Top customers in the given countries
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from betboard.aggregation.leaderboard import get_leaderboard
from betboard.api.app import get_db_session
from betboard.db.repo import DbSession
from betboard.models.types import ErrorResponse, LeaderboardEntry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["leaderboard"])

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def _server_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/customers",
    response_model=list[LeaderboardEntry],
    responses=_ERROR_RESPONSES,
)
def list_customers(
    session: DbSession = Depends(get_db_session),
) -> list[LeaderboardEntry] | JSONResponse:
    """Get the unfiltered leaderboard."""
    try:
        return get_leaderboard(session)
    except SQLAlchemyError:
        logger.exception("Failed to fetch customers")
        return _server_error("Failed to fetch customers")


@router.get(
    "/leaderboard",
    response_model=list[LeaderboardEntry],
    responses=_ERROR_RESPONSES,
)
def get_country_leaderboard(
    country: list[str] | None = Query(default=None),
    session: DbSession = Depends(get_db_session),
) -> list[LeaderboardEntry] | JSONResponse:
    """Get the leaderboard restricted to the given countries.

    Args:
        country: Repeated country query parameter. Omitted means unfiltered.
        session: Database session (injected).

    Returns:
        Up to 10 entries, or a 500 error body on database failure.
    """
    try:
        return get_leaderboard(session, country)
    except SQLAlchemyError:
        logger.exception("Failed to fetch leaderboard data")
        return _server_error("Failed to fetch leaderboard data")
