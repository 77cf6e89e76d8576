"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("WEALTH_DB_URL", "postgresql://example")

    assert db_module._get_env_var("WEALTH_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("WEALTH_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("WEALTH_DB_URL")


def test_create_engine_enables_health_checks(monkeypatch):
    """_create_engine should enable pre-ping for server databases."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://wealth")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://wealth"
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_create_engine_shares_in_memory_sqlite(monkeypatch):
    """In-memory SQLite must use a single shared connection."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("sqlite://")

    assert captured["kwargs"]["poolclass"] is db_module.StaticPool


def test_get_wealth_engine_caches_engine(monkeypatch):
    """get_wealth_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_wealth_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("WEALTH_DB_URL", "postgresql://wealth")

    engine_one = db_module.get_wealth_engine()
    engine_two = db_module.get_wealth_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://wealth"
    assert created == ["postgresql://wealth"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(
        db_module,
        "get_wealth_engine",
        lambda db_url=None: f"wealth_engine:{db_url}",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite://")

    assert adapter.get_wealth_engine() == "wealth_engine:sqlite://"
