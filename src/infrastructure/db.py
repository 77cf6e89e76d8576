"""Database infrastructure for the wealth dashboard.

This module exposes helpers to create and reuse the SQLAlchemy engine backing
the document store. It belongs to the infrastructure layer because it deals
with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    In-memory SQLite URLs share a single connection so every session sees
    the same database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with health checks enabled.
    """
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_wealth_engine: Optional[Engine] = None


def get_wealth_engine(db_url: str | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the wealth document store.

    Args:
        db_url: Optional URL overriding ``WEALTH_DB_URL``.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _wealth_engine
    if _wealth_engine is None:
        resolved_url = db_url or _get_env_var("WEALTH_DB_URL")
        _wealth_engine = _create_engine(resolved_url)
    return _wealth_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so the document store depends only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_wealth_engine(self) -> Engine:
        """Get the engine for the wealth document store.

        Returns:
            Engine: SQLAlchemy engine connected to the document store.
        """
        return get_wealth_engine(self._db_url)


__all__ = ["get_wealth_engine", "SqlAlchemyDatabaseEngineAdapter"]
