"""Tests for environment-driven settings and engine setup."""

import pytest

from betboard.config import Settings, get_settings
from betboard.db import repo
from betboard.db import session as db_session
from betboard.models.domain import Country, CustomerEntity


def test_defaults(monkeypatch):
    monkeypatch.delenv("BETBOARD_DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///data/betboard.db"
    assert settings.api_base_url == "http://localhost:3001"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BETBOARD_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("BETBOARD_REQUEST_TIMEOUT", "2.5")
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///:memory:"
    assert settings.request_timeout == 2.5


def test_engine_is_cached_per_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'nested' / 'test.db'}"

    engine = db_session.get_engine(url)

    assert db_session.get_engine(url) is engine
    assert (tmp_path / "nested").is_dir()


def test_db_session_commits(tmp_path):
    url = f"sqlite:///{tmp_path / 'commit.db'}"
    db_session.init_db(url)

    with db_session.get_db_session(url) as session:
        repo.create_customer(
            session,
            CustomerEntity(id="c-1", first_name="Mari", last_name="Tamm", country=Country.ESTONIA),
        )

    with db_session.get_db_session(url) as session:
        assert repo.get_customer(session, "c-1") is not None


def test_db_session_rolls_back_on_error(tmp_path):
    url = f"sqlite:///{tmp_path / 'rollback.db'}"
    db_session.init_db(url)

    with pytest.raises(RuntimeError):
        with db_session.get_db_session(url) as session:
            repo.create_customer(
                session,
                CustomerEntity(id="c-1", first_name="Mari", last_name="Tamm", country=Country.ESTONIA),
            )
            raise RuntimeError("abort")

    with db_session.get_db_session(url) as session:
        assert repo.get_customer(session, "c-1") is None


def test_engine_defaults_to_configured_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'configured' / 'betboard.db'}"
    monkeypatch.setenv("BETBOARD_DATABASE_URL", url)
    get_settings.cache_clear()
    try:
        assert db_session.get_engine() is db_session.get_engine(url)
        assert (tmp_path / "configured").is_dir()
    finally:
        get_settings.cache_clear()
