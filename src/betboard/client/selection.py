"""Country selection state machine.

Two states:
- AllSelected: no country restriction ({ALL})
- SubsetSelected: an explicit, non-empty list of countries

The selection is never empty and ALL never coexists with a country.
"""

from __future__ import annotations

from dataclasses import dataclass

from betboard.models.domain import ALL_COUNTRIES


@dataclass(frozen=True)
class AllSelected:
    """No country restriction."""

    @property
    def countries(self) -> frozenset[str]:
        return frozenset({ALL_COUNTRIES})

    def query_countries(self) -> list[str] | None:
        return None


@dataclass(frozen=True)
class SubsetSelected:
    """Explicit country subset, in the order the countries were picked."""

    selected: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.selected:
            raise ValueError("SubsetSelected requires at least one country")
        if ALL_COUNTRIES in self.selected:
            raise ValueError(f"{ALL_COUNTRIES} cannot be part of a country subset")
        if len(set(self.selected)) != len(self.selected):
            raise ValueError(f"Duplicate countries in selection: {self.selected}")

    @property
    def countries(self) -> frozenset[str]:
        return frozenset(self.selected)

    def query_countries(self) -> list[str] | None:
        return list(self.selected)


CountrySelection = AllSelected | SubsetSelected


def toggle(state: CountrySelection, country: str, should_select: bool) -> CountrySelection:
    """Apply one toggle to the selection.

    | country | should_select | result                              |
    |---------|---------------|-------------------------------------|
    | ALL     | True          | AllSelected                         |
    | ALL     | False         | AllSelected (ALL cannot be cleared) |
    | X       | True          | current subset + X (ALL dropped)    |
    | X       | False         | current subset - X, or AllSelected  |

    Args:
        state: Current selection.
        country: Country that was toggled, or the ALL sentinel.
        should_select: True to select, False to deselect.

    Returns:
        The new selection.
    """
    if country == ALL_COUNTRIES:
        return AllSelected()

    current = state.selected if isinstance(state, SubsetSelected) else ()

    if should_select:
        remaining = current if country in current else (*current, country)
    else:
        remaining = tuple(c for c in current if c != country)

    if not remaining:
        return AllSelected()
    return SubsetSelected(remaining)
