"""HTTP client for the leaderboard API.

Failures never raise: they are logged and turn into an empty result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from betboard.config import get_settings
from betboard.models.domain import ALL_COUNTRIES
from betboard.models.types import LeaderboardEntry

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[LeaderboardEntry])


def leaderboard_params(countries: Sequence[str] | None) -> list[tuple[str, str]]:
    """Build repeated country= query parameters.

    No parameters when countries is empty/None or contains ALL.
    """
    if not countries or ALL_COUNTRIES in countries:
        return []
    return [("country", c) for c in countries]


class LeaderboardClient:
    """Async client for GET /customers and GET /leaderboard."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> LeaderboardClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_customers(self) -> list[LeaderboardEntry]:
        """Fetch the unfiltered leaderboard."""
        return await self._get("/customers")

    async def fetch_leaderboard(
        self, countries: Sequence[str] | None = None
    ) -> list[LeaderboardEntry]:
        """Fetch the leaderboard filtered to countries (None means all)."""
        return await self._get("/leaderboard", params=leaderboard_params(countries))

    async def _get(
        self, path: str, params: list[tuple[str, str]] | None = None
    ) -> list[LeaderboardEntry]:
        logger.debug(f"Fetching {path} params={params}")
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return _entries_adapter.validate_python(response.json())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error fetching {path}: {e}")
            return []
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid response from {path}: {e}")
            return []
