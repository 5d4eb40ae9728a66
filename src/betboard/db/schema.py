"""Database schema for Betboard.

Mirrors the `customer` and `bet` tables owned by the ingestion process.
Country and bet status are closed sets enforced at write time.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    String,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship, validates

from betboard.models.domain import BetStatus, Country


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Customer(Base):
    """A betting customer."""

    __tablename__ = "customer"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    country: Mapped[Country] = mapped_column(
        Enum(
            Country,
            name="customer_country",
            native_enum=False,
            length=32,
            values_callable=_enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow, onupdate=_utcnow
    )

    bets: Mapped[list["Bet"]] = relationship(back_populates="customer")

    @validates("country")
    def _validate_country(self, key: str, value: Country | str) -> Country:
        country = Country.parse(value)
        if country is None:
            raise ValueError(f"Unknown country: {value!r}")
        return country


class Bet(Base):
    """A single bet placed by a customer.

    Invariant: stake > 0 and odds > 0
    """

    __tablename__ = "bet"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("customer.id"), nullable=False, index=True
    )
    stake: Mapped[float] = mapped_column(Float, nullable=False)
    odds: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[BetStatus] = mapped_column(
        Enum(
            BetStatus,
            name="bet_status",
            native_enum=False,
            length=16,
            values_callable=_enum_values,
            validate_strings=True,
        ),
        nullable=False,
        default=BetStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow, onupdate=_utcnow
    )

    customer: Mapped[Customer] = relationship(back_populates="bets")

    __table_args__ = (
        CheckConstraint("stake > 0", name="ck_bet_stake_positive"),
        CheckConstraint("odds > 0", name="ck_bet_odds_positive"),
    )

    @validates("status")
    def _validate_status(self, key: str, value: BetStatus | str) -> BetStatus:
        try:
            return BetStatus(value)
        except ValueError as e:
            raise ValueError(f"Unknown bet status: {value!r}") from e

    @validates("stake", "odds")
    def _validate_positive(self, key: str, value: float) -> float:
        if value is None or value <= 0:
            raise ValueError(f"{key} must be positive, got {value!r}")
        return value
