"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from betboard.db.schema import Bet, Customer
from betboard.models.domain import (
    BetEntity,
    BetStatus,
    Country,
    CustomerEntity,
    LeaderboardRowEntity,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _customer_to_entity(customer: Customer) -> CustomerEntity:
    """Convert SQLAlchemy Customer to domain entity."""
    return CustomerEntity(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        country=customer.country,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


def _bet_to_entity(bet: Bet) -> BetEntity:
    """Convert SQLAlchemy Bet to domain entity."""
    return BetEntity(
        id=bet.id,
        customer_id=bet.customer_id,
        stake=bet.stake,
        odds=bet.odds,
        status=bet.status,
        created_at=bet.created_at,
        updated_at=bet.updated_at,
    )


def _country_value(country: Country | str) -> str:
    return country.value if isinstance(country, Country) else country


# ============================================================================
# Customer / Bet Repository
# ============================================================================


def get_customer(session: DbSession, customer_id: str) -> CustomerEntity | None:
    """Get customer by ID."""
    customer = session.query(Customer).filter(Customer.id == customer_id).first()
    return _customer_to_entity(customer) if customer else None


def create_customer(session: DbSession, entity: CustomerEntity) -> CustomerEntity:
    """Create a new customer. Does not commit."""
    customer = Customer(
        id=entity.id,
        first_name=entity.first_name,
        last_name=entity.last_name,
        country=entity.country,
    )
    session.add(customer)
    session.flush()
    return _customer_to_entity(customer)


def get_bets_for_customer(session: DbSession, customer_id: str) -> list[BetEntity]:
    """Get all bets for a customer, any status."""
    bets = session.query(Bet).filter(Bet.customer_id == customer_id).all()
    return [_bet_to_entity(b) for b in bets]


def create_bet(session: DbSession, entity: BetEntity) -> BetEntity:
    """Create a new bet. Does not commit."""
    bet = Bet(
        id=entity.id,
        customer_id=entity.customer_id,
        stake=entity.stake,
        odds=entity.odds,
        status=entity.status,
    )
    session.add(bet)
    session.flush()
    return _bet_to_entity(bet)


# ============================================================================
# Leaderboard Repository
# ============================================================================


def get_leaderboard_rows(
    session: DbSession,
    countries: list[Country] | None = None,
    limit: int = 10,
) -> list[LeaderboardRowEntity]:
    """Aggregate completed bets per customer and rank by profit.

    Customers are left-joined to their bets and grouped by identity.
    Only rows with profit > 0 are kept, ordered by profit descending
    with customer id as tie-breaker.

    Args:
        session: Database session.
        countries: Restrict candidates to these countries. None means all.
        limit: Maximum number of rows.

    Returns:
        Aggregated rows, best first.
    """
    is_won = Bet.status == BetStatus.WON
    is_lost = Bet.status == BetStatus.LOST
    is_completed = Bet.status.in_([BetStatus.WON, BetStatus.LOST])

    won_count = func.count(case((is_won, 1)))
    completed_count = func.count(case((is_completed, 1)))
    win_percentage = func.round(won_count * 100.0 / func.nullif(completed_count, 0))
    profit = func.sum(case((is_won, Bet.stake * Bet.odds - Bet.stake), else_=0)) - func.sum(
        case((is_lost, Bet.stake), else_=0)
    )

    query = session.query(
        Customer.id,
        Customer.first_name,
        Customer.last_name,
        Customer.country,
        completed_count.label("total_bets"),
        win_percentage.label("win_percentage"),
        profit.label("profit"),
    ).outerjoin(Bet, Bet.customer_id == Customer.id)

    if countries is not None:
        query = query.filter(Customer.country.in_(countries))

    rows = (
        query.group_by(
            Customer.id,
            Customer.first_name,
            Customer.last_name,
            Customer.country,
        )
        .having(profit > 0)
        .order_by(profit.desc(), Customer.id.asc())
        .limit(limit)
        .all()
    )

    return [
        LeaderboardRowEntity(
            customer_id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            country=_country_value(row.country),
            total_bets=row.total_bets,
            win_percentage=row.win_percentage,
            profit=row.profit,
        )
        for row in rows
    ]


# ============================================================================
# Transaction Helpers
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit the current transaction."""
    session.commit()
