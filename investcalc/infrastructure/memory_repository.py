"""In-memory repositories for investments, credits and cashflows."""

from typing import Generic, TypeVar

from investcalc.application.ports.repositories import EntityNotFoundError

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Dict-backed store keeping entities in insertion order.

    Satisfies the investment, credit and cashflow repository ports.
    """

    def __init__(self, entity_label: str = "entity") -> None:
        """Initialize the repository.

        Args:
            entity_label: Name used in error messages.
        """
        self._entity_label = entity_label
        self._items: dict[str, T] = {}

    def add(self, entity: T) -> T:
        """Store a new entity.

        Raises:
            ValueError: If an entity with the same id already exists.
        """
        if entity.id in self._items:
            raise ValueError(
                f"{self._entity_label.capitalize()} {entity.id} already exists"
            )
        self._items[entity.id] = entity
        return entity

    def get(self, entity_id: str) -> T | None:
        return self._items.get(entity_id)

    def list(self) -> "list[T]":
        return list(self._items.values())

    def update(self, entity: T) -> T:
        """Replace the stored entity with the same id, keeping its position.

        Raises:
            EntityNotFoundError: If no entity has the id.
        """
        if entity.id not in self._items:
            raise EntityNotFoundError(
                f"{self._entity_label.capitalize()} {entity.id} not found"
            )
        self._items[entity.id] = entity
        return entity

    def remove(self, entity_id: str) -> None:
        """Delete an entity.

        Raises:
            EntityNotFoundError: If no entity has the id.
        """
        if entity_id not in self._items:
            raise EntityNotFoundError(
                f"{self._entity_label.capitalize()} {entity_id} not found"
            )
        del self._items[entity_id]


__all__ = ["InMemoryRepository"]
