"""Database ports for persisted stores.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing the stores."""

    def get_engine(self) -> Engine:
        """Get the engine for the store database.

        Returns:
            Engine: SQLAlchemy engine connected to the store database.
        """


__all__ = ["DatabaseEnginePort"]
