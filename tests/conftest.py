"""Shared pytest fixtures for betboard tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from betboard.api.app import create_app, get_db_session
from betboard.db import repo
from betboard.db.schema import Base
from betboard.models.domain import BetEntity, BetStatus, Country, CustomerEntity


def make_engine(create_tables: bool = True):
    """In-memory SQLite engine shareable across threads (TestClient)."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_tables:
        Base.metadata.create_all(engine)
    return engine


class Seeder:
    """Inserts customers and bets through the repository."""

    def __init__(self, session: Session):
        self.session = session
        self._bet_counter = 0

    def customer(
        self,
        customer_id: str,
        country: str = "Estonia",
        first_name: str = "Test",
        last_name: str | None = None,
    ) -> str:
        repo.create_customer(
            self.session,
            CustomerEntity(
                id=customer_id,
                first_name=first_name,
                last_name=last_name or customer_id,
                country=Country(country),
            ),
        )
        return customer_id

    def bet(self, customer_id: str, stake: float, odds: float, status: str) -> str:
        self._bet_counter += 1
        bet_id = f"bet-{self._bet_counter:04d}"
        repo.create_bet(
            self.session,
            BetEntity(
                id=bet_id,
                customer_id=customer_id,
                stake=stake,
                odds=odds,
                status=BetStatus(status),
            ),
        )
        return bet_id

    def profitable(self, customer_id: str, profit: float, country: str = "Estonia") -> str:
        """Customer with one WON bet at odds 2, so profit == stake."""
        self.customer(customer_id, country=country)
        self.bet(customer_id, stake=profit, odds=2.0, status="WON")
        return customer_id

    def commit(self) -> None:
        repo.commit(self.session)


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    return make_engine()


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    factory = sessionmaker(bind=engine)
    session = factory()
    yield session
    session.close()


@pytest.fixture
def seed(session):
    """Seeder bound to the test session."""
    return Seeder(session)


@pytest.fixture
def app(engine):
    """App whose database dependency points at the test engine."""
    app = create_app()

    def override_get_db():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_db_session] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def broken_client():
    """Client whose database has no tables, so every query fails."""
    broken_engine = make_engine(create_tables=False)
    app = create_app()

    def override_get_db():
        with Session(broken_engine) as db_session:
            yield db_session

    app.dependency_overrides[get_db_session] = override_get_db
    return TestClient(app)
