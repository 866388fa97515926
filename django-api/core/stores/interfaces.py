"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Generic, TypeVar

from core.domain import EntityId

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Interface for persistence of one entity type."""

    @abstractmethod
    def list(self) -> list[T]:
        """Return every record in the collection's display order."""
        ...

    @abstractmethod
    def get(self, entity_id: EntityId) -> T | None:
        """Return a record by ID, or None if not found."""
        ...

    @abstractmethod
    def add(self, entity: T) -> None:
        """Insert a new record."""
        ...

    @abstractmethod
    def save(self, entity: T) -> bool:
        """Replace an existing record. Return False if it does not exist."""
        ...

    @abstractmethod
    def delete(self, entity_id: EntityId) -> bool:
        """Remove a record. Return False if it did not exist."""
        ...

    @abstractmethod
    def increment(self, entity_id: EntityId, field: str, delta: Any) -> bool:
        """Add ``delta`` to one numeric field in a single step.

        Concurrent increments must not overwrite each other. Return False
        if the record does not exist.
        """
        ...

    def atomic(self) -> AbstractContextManager:
        """Group several writes so they land together or not at all."""
        return nullcontext()
