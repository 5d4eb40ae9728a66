#!/usr/bin/env python3
"""Seed a demo database with customers and bets.

Usage:
    python scripts/seed_demo.py

Writes to BETBOARD_DATABASE_URL (default sqlite:///data/betboard.db).
Bets are generated from a fixed random seed, so repeated runs on an
empty database produce the same leaderboard.
"""

from __future__ import annotations

import logging
import random
import sys
import uuid

from betboard.aggregation.leaderboard import get_leaderboard
from betboard.config import get_settings
from betboard.db import repo
from betboard.db.schema import Customer
from betboard.db.session import get_db_session, init_db
from betboard.models.domain import BetEntity, BetStatus, Country, CustomerEntity

logger = logging.getLogger("seed_demo")

# Constants
DEMO_SEED = 42
CUSTOMERS_PER_COUNTRY = 6
MAX_BETS_PER_CUSTOMER = 25

FIRST_NAMES = ["Mari", "Jaan", "Aino", "Mikko", "Ingrid", "Lars", "Sofia", "Mateo", "Emma", "Liam"]
LAST_NAMES = ["Tamm", "Saar", "Virtanen", "Korhonen", "Hansen", "Berg", "Rojas", "Soto", "Tremblay", "Roy"]

# Weighted outcomes: most bets settled, a few still open
STATUS_WEIGHTS = {BetStatus.WON: 0.42, BetStatus.LOST: 0.48, BetStatus.PENDING: 0.10}


def _random_bet(rng: random.Random, customer_id: str) -> BetEntity:
    status = rng.choices(list(STATUS_WEIGHTS), weights=list(STATUS_WEIGHTS.values()))[0]
    return BetEntity(
        id=str(uuid.UUID(int=rng.getrandbits(128))),
        customer_id=customer_id,
        stake=round(rng.uniform(1, 200), 2),
        odds=round(rng.uniform(1.05, 6.0), 2),
        status=status,
    )


def seed_database(database_url: str) -> bool:
    """Insert demo customers and bets.

    Returns:
        False when the database already holds customers.
    """
    rng = random.Random(DEMO_SEED)

    with get_db_session(database_url) as session:
        if session.query(Customer.id).first() is not None:
            logger.info("Database already seeded, skipping")
            return False

        customer_count = 0
        bet_count = 0
        for country in Country:
            for _ in range(CUSTOMERS_PER_COUNTRY):
                customer = repo.create_customer(
                    session,
                    CustomerEntity(
                        id=str(uuid.UUID(int=rng.getrandbits(128))),
                        first_name=rng.choice(FIRST_NAMES),
                        last_name=rng.choice(LAST_NAMES),
                        country=country,
                    ),
                )
                customer_count += 1

                for _ in range(rng.randint(0, MAX_BETS_PER_CUSTOMER)):
                    repo.create_bet(session, _random_bet(rng, customer.id))
                    bet_count += 1

        logger.info(f"Created {customer_count} customers and {bet_count} bets")
    return True


def print_leaderboard(database_url: str) -> None:
    with get_db_session(database_url) as session:
        entries = get_leaderboard(session)

    print(f"{'Name':<20} {'Country':<8} {'Bets':>5} {'Win %':>6} {'Profit':>10}")
    for entry in entries:
        print(
            f"{entry.name:<20} {entry.country:<8} {entry.total_bets:>5} "
            f"{entry.win_percentage:>6} {entry.profit:>10.2f}"
        )


def describe_leader(database_url: str) -> str | None:
    """Summarize the top customer's bets, including ones still pending."""
    with get_db_session(database_url) as session:
        entries = get_leaderboard(session)
        if not entries:
            return None

        leader = entries[0]
        customer = repo.get_customer(session, leader.id)
        bets = repo.get_bets_for_customer(session, leader.id)

    if customer is None:
        return None

    pending = sum(1 for bet in bets if bet.status == BetStatus.PENDING)
    summary = f"Leader {customer.name} ({leader.country}): {len(bets)} bets, {pending} pending"
    logger.info(summary)
    return summary


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    database_url = get_settings().database_url
    logger.info(f"Database: {database_url}")

    init_db(database_url)
    seed_database(database_url)
    print_leaderboard(database_url)
    describe_leader(database_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
