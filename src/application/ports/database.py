"""Database ports for the wealth dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the wealth document store."""

    def get_wealth_engine(self) -> Engine:
        """Get the engine for the wealth document store.

        Returns:
            Engine: SQLAlchemy engine connected to the document store.
        """


__all__ = ["DatabaseEnginePort"]
