"""Engines and sessions for the betboard database.

Every helper takes an optional SQLAlchemy URL and falls back to
``Settings.database_url``. One engine and one sessionmaker exist per URL
for the life of the process.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from betboard.config import get_settings
from betboard.db.schema import Base

# Keyed by the resolved URL string
_engine_cache: dict[str, Engine] = {}
_session_factory_cache: dict[str, sessionmaker] = {}


def _resolve_url(database_url: str | None) -> str:
    return database_url if database_url is not None else get_settings().database_url


def get_engine(database_url: str | None = None) -> Engine:
    """Return the engine for database_url, building it on first use.

    For a SQLite file the containing directory is created, so the default
    ``sqlite:///data/betboard.db`` works from a fresh checkout. SQLite
    engines share a single connection that request threads may use.
    """
    database_url = _resolve_url(database_url)

    if database_url in _engine_cache:
        return _engine_cache[database_url]

    url = make_url(database_url)
    kwargs: dict = {"echo": False}

    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        # Route handlers run in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **kwargs)
    _engine_cache[database_url] = engine

    return engine


def _get_session_factory(database_url: str | None = None) -> sessionmaker:
    database_url = _resolve_url(database_url)

    if database_url in _session_factory_cache:
        return _session_factory_cache[database_url]

    factory = sessionmaker(bind=get_engine(database_url))
    _session_factory_cache[database_url] = factory

    return factory


def get_session(database_url: str | None = None) -> Session:
    """Open a bare session on database_url; closing it is up to the caller."""
    factory = _get_session_factory(database_url)
    return factory()


@contextmanager
def get_db_session(database_url: str | None = None) -> Generator[Session, None, None]:
    """Session scoped to a with-block.

    The block's work is committed when it exits normally and rolled back
    when it raises. The session is closed in both cases.
    """
    session = get_session(database_url)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(database_url: str | None = None) -> None:
    """Create the customer and bet tables if they are missing."""
    engine = get_engine(database_url)
    Base.metadata.create_all(engine)
