"""Database infrastructure for the persisted stores.

This module exposes concrete helpers to create and reuse SQLAlchemy engines
connected to the store database. It belongs to the infrastructure layer
because it deals with external systems (SQLite or any SQLAlchemy URL).
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from investcalc.application.ports.database import DatabaseEnginePort


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    In-memory SQLite URLs share one connection so every session sees the
    same database.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance with health checks enabled.
    """
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    return create_engine(db_url, pool_pre_ping=True, future=True)


_engines: dict[str, Engine] = {}


def get_engine(db_url: str) -> Engine:
    """Get a cached SQLAlchemy engine for a database URL.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Lazily initialized engine for the URL.
    """
    engine = _engines.get(db_url)
    if engine is None:
        engine = _create_engine(db_url)
        _engines[db_url] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (URL, pooling) behind the port
    so repositories can depend only on the protocol.
    """

    def __init__(self, db_url: str) -> None:
        """Initialize the adapter.

        Args:
            db_url: Fully qualified database URL.
        """
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the store database.

        Returns:
            Engine: SQLAlchemy engine connected to the store database.
        """
        return get_engine(self._db_url)


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
