"""Table rows for displaying leaderboard entries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from betboard.models.types import LeaderboardEntry

CURRENCY_SYMBOL = "€"

# (field, header) in display order
COLUMNS: list[tuple[str, str]] = [
    ("name", "Name"),
    ("country", "Country"),
    ("total_bets", "Total Bets"),
    ("win_percentage", "Win %"),
    ("profit", "Profit"),
]


@dataclass(frozen=True)
class DisplayRow:
    id: str
    name: str
    country: str
    total_bets: int
    win_percentage: int
    profit: float
    profit_label: str


def round_cents(amount: float) -> float:
    """Round to 2 decimals with halves going up (0.125 -> 0.13)."""
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_profit(profit: float) -> str:
    return f"{profit:.2f} {CURRENCY_SYMBOL}"


def display_rows(entries: list[LeaderboardEntry]) -> list[DisplayRow]:
    """Round profit to cents and attach its formatted label."""
    rows = []
    for entry in entries:
        profit = round_cents(entry.profit)
        rows.append(
            DisplayRow(
                id=entry.id,
                name=entry.name,
                country=entry.country,
                total_bets=entry.total_bets,
                win_percentage=entry.win_percentage,
                profit=profit,
                profit_label=format_profit(profit),
            )
        )
    return rows
