"""Leaderboard filter state reconciler.

Owns the country selection and the rows currently displayed. Every
selection change triggers a re-fetch; only the response to the most
recently issued request is applied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from betboard.client import selection as sel
from betboard.client.rows import DisplayRow, display_rows
from betboard.models.domain import ALL_COUNTRIES, DEFAULT_COUNTRIES
from betboard.models.types import LeaderboardEntry

logger = logging.getLogger(__name__)


class LeaderboardSource(Protocol):
    """Anything that can fetch leaderboard entries (e.g. LeaderboardClient)."""

    async def fetch_customers(self) -> list[LeaderboardEntry]: ...

    async def fetch_leaderboard(
        self, countries: Sequence[str] | None = None
    ) -> list[LeaderboardEntry]: ...


class LeaderboardReconciler:
    """Keeps displayed rows in sync with the selected countries."""

    def __init__(self, source: LeaderboardSource):
        self._source = source
        self._selection: sel.CountrySelection = sel.AllSelected()
        self._rows: list[LeaderboardEntry] = []
        self._available: list[str] = list(DEFAULT_COUNTRIES)
        self._latest_request = 0
        self.loading = False

    @property
    def selection(self) -> sel.CountrySelection:
        return self._selection

    @property
    def selected_countries(self) -> frozenset[str]:
        return self._selection.countries

    @property
    def rows(self) -> list[LeaderboardEntry]:
        return list(self._rows)

    @property
    def display_rows(self) -> list[DisplayRow]:
        return display_rows(self._rows)

    @property
    def available_countries(self) -> list[str]:
        return list(self._available)

    @property
    def buttons(self) -> list[str]:
        """Country buttons in display order, ALL first."""
        return [ALL_COUNTRIES, *self._available]

    def is_selected(self, country: str) -> bool:
        return country in self._selection.countries

    async def load(self) -> None:
        """Initial unfiltered fetch; derives the available country buttons."""
        seq = self._begin_request()
        try:
            entries = await self._source.fetch_customers()
        except Exception:
            logger.exception("Error loading customers")
            entries = []

        # Buttons come from the initial result even if a toggle overtook it
        countries = list(dict.fromkeys(entry.country for entry in entries))
        self._available = countries or list(DEFAULT_COUNTRIES)
        if self._is_latest(seq):
            self._finish_request(entries)

    async def toggle(self, country: str, should_select: bool) -> bool:
        """Select or deselect a country and refresh rows if the selection changed.

        Returns:
            True when the selection changed.
        """
        new_selection = sel.toggle(self._selection, country, should_select)
        if new_selection == self._selection:
            return False

        logger.debug(
            f"Selection {sorted(self.selected_countries)} -> {sorted(new_selection.countries)}"
        )
        self._selection = new_selection
        await self.refresh()
        return True

    async def click(self, country: str) -> bool:
        """Button click: flip the country's current membership."""
        return await self.toggle(country, not self.is_selected(country))

    async def refresh(self) -> None:
        """Fetch rows for the current selection."""
        seq = self._begin_request()
        countries = self._selection.query_countries()
        try:
            entries = await self._source.fetch_leaderboard(countries)
        except Exception:
            logger.exception(f"Error refreshing leaderboard for {countries}")
            entries = []
        if self._is_latest(seq):
            self._finish_request(entries)

    def _begin_request(self) -> int:
        self._latest_request += 1
        self.loading = True
        return self._latest_request

    def _is_latest(self, seq: int) -> bool:
        if seq != self._latest_request:
            logger.debug(f"Discarding stale response {seq} (latest {self._latest_request})")
            return False
        return True

    def _finish_request(self, entries: list[LeaderboardEntry]) -> None:
        self._rows = list(entries)
        self.loading = False
