"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FINANCE_DB_URL", "sqlite:///finance.db")

    assert db_module._get_env_var("FINANCE_DB_URL") == "sqlite:///finance.db"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError naming the variable."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("FINANCE_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="FINANCE_DB_URL"):
        db_module._get_env_var("FINANCE_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://finance")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://finance"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_finance_engine_caches_engine(monkeypatch):
    """get_finance_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_finance_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FINANCE_DB_URL", "postgresql://finance")

    engine_one = db_module.get_finance_engine()
    engine_two = db_module.get_finance_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://finance"
    assert created == ["postgresql://finance"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the module helper."""
    monkeypatch.setattr(db_module, "get_finance_engine", lambda: "engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_finance_engine() == "engine"
