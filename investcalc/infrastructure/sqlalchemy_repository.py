"""SQLAlchemy-backed repositories storing one JSON document per entity."""

import json

from sqlalchemy import bindparam, text

from investcalc.application.ports.database import DatabaseEnginePort
from investcalc.application.ports.repositories import EntityNotFoundError
from investcalc.domain.models import InvestmentKind
from investcalc.infrastructure.serialization import (
    CASHFLOW_KIND,
    CREDIT_KIND,
    entity_from_payload,
    entity_kind,
    entity_to_payload,
)

INVESTMENT_KINDS = tuple(kind.value for kind in InvestmentKind)
_KINDS = bindparam("kinds", expanding=True)

_CREATE_TABLE = text(
    """
    CREATE TABLE IF NOT EXISTS entities (
        id VARCHAR(64) PRIMARY KEY,
        kind VARCHAR(32) NOT NULL,
        seq INTEGER NOT NULL,
        payload TEXT NOT NULL
    )
    """
)


class SqlAlchemyEntityRepository:
    """Repository backed by an ``entities`` table.

    One instance serves one collection, selected by the entity kinds it
    accepts. Rows are returned in insertion order.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        kinds: tuple[str, ...],
        entity_label: str = "entity",
    ) -> None:
        """Initialize the repository and create the table if needed.

        Args:
            db_port: Port providing access to the store engine.
            kinds: Entity kinds belonging to this collection.
            entity_label: Name used in error messages.
        """
        self._db_port = db_port
        self._kinds = kinds
        self._entity_label = entity_label
        self.ensure_schema()

    def ensure_schema(self) -> None:
        with self._db_port.get_engine().begin() as conn:
            conn.execute(_CREATE_TABLE)

    def add(self, entity):
        """Insert a new entity.

        Raises:
            ValueError: If the entity kind does not belong here or the id
                already exists.
        """
        kind = self._checked_kind(entity)
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            exists = conn.execute(
                text("SELECT 1 FROM entities WHERE id = :id"),
                {"id": entity.id},
            ).first()
            if exists is not None:
                raise ValueError(
                    f"{self._label()} {entity.id} already exists"
                )
            seq = conn.execute(
                text("SELECT COALESCE(MAX(seq), 0) + 1 FROM entities")
            ).scalar_one()
            conn.execute(
                text(
                    """
                    INSERT INTO entities (id, kind, seq, payload)
                    VALUES (:id, :kind, :seq, :payload)
                    """
                ),
                {
                    "id": entity.id,
                    "kind": kind,
                    "seq": seq,
                    "payload": json.dumps(entity_to_payload(entity)),
                },
            )
        return entity

    def get(self, entity_id: str):
        query = text(
            """
            SELECT kind, payload
            FROM entities
            WHERE id = :id
            """
        )
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query, {"id": entity_id}).first()
        if row is None or row.kind not in self._kinds:
            return None
        return entity_from_payload(row.kind, json.loads(row.payload))

    def list(self):
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(
                text("SELECT kind, payload FROM entities ORDER BY seq")
            ).all()
        return [
            entity_from_payload(row.kind, json.loads(row.payload))
            for row in rows
            if row.kind in self._kinds
        ]

    def update(self, entity):
        """Replace a stored entity, keeping its position.

        Raises:
            EntityNotFoundError: If no entity of this collection has the id.
        """
        kind = self._checked_kind(entity)
        with self._db_port.get_engine().begin() as conn:
            result = conn.execute(
                text(
                    """
                    UPDATE entities
                    SET kind = :kind, payload = :payload
                    WHERE id = :id AND kind IN :kinds
                    """
                ).bindparams(_KINDS),
                {
                    "id": entity.id,
                    "kind": kind,
                    "payload": json.dumps(entity_to_payload(entity)),
                    "kinds": list(self._kinds),
                },
            )
        if result.rowcount == 0:
            raise EntityNotFoundError(f"{self._label()} {entity.id} not found")
        return entity

    def remove(self, entity_id: str) -> None:
        """Delete a stored entity.

        Raises:
            EntityNotFoundError: If no entity of this collection has the id.
        """
        with self._db_port.get_engine().begin() as conn:
            result = conn.execute(
                text(
                    "DELETE FROM entities WHERE id = :id AND kind IN :kinds"
                ).bindparams(_KINDS),
                {"id": entity_id, "kinds": list(self._kinds)},
            )
        if result.rowcount == 0:
            raise EntityNotFoundError(f"{self._label()} {entity_id} not found")

    def _checked_kind(self, entity) -> str:
        kind = entity_kind(entity)
        if kind not in self._kinds:
            raise ValueError(
                f"Entity kind {kind} is not stored in the "
                f"{self._entity_label} collection"
            )
        return kind

    def _label(self) -> str:
        return self._entity_label.capitalize()


def build_sqlalchemy_repositories(
    db_port: DatabaseEnginePort,
) -> tuple[
    SqlAlchemyEntityRepository,
    SqlAlchemyEntityRepository,
    SqlAlchemyEntityRepository,
]:
    """Return the investment, credit and cashflow repositories."""
    return (
        SqlAlchemyEntityRepository(db_port, INVESTMENT_KINDS, "investment"),
        SqlAlchemyEntityRepository(db_port, (CREDIT_KIND,), "credit"),
        SqlAlchemyEntityRepository(db_port, (CASHFLOW_KIND,), "cashflow"),
    )


__all__ = [
    "INVESTMENT_KINDS",
    "SqlAlchemyEntityRepository",
    "build_sqlalchemy_repositories",
]
