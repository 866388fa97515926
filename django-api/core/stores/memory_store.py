"""In-memory repository used by tests and the ``memory`` datastore."""

import dataclasses
import threading
from typing import Any, TypeVar

from core.domain import EntityId
from core.stores.interfaces import Repository

T = TypeVar("T")


class InMemoryRepository(Repository[T]):
    """List-backed store keeping insertion order.

    ``newest_first`` decides whether new records are prepended or appended.
    Records must expose an ``id`` attribute holding an ``EntityId``.
    """

    def __init__(self, newest_first: bool = True, initial: list[T] | None = None) -> None:
        self._newest_first = newest_first
        self._items: list[T] = list(initial or [])
        self._lock = threading.Lock()

    def list(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def get(self, entity_id: EntityId) -> T | None:
        with self._lock:
            return next((item for item in self._items if item.id == entity_id), None)

    def add(self, entity: T) -> None:
        with self._lock:
            if self._newest_first:
                self._items.insert(0, entity)
            else:
                self._items.append(entity)

    def save(self, entity: T) -> bool:
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == entity.id:
                    self._items[index] = entity
                    return True
            return False

    def delete(self, entity_id: EntityId) -> bool:
        with self._lock:
            remaining = [item for item in self._items if item.id != entity_id]
            removed = len(remaining) != len(self._items)
            self._items = remaining
            return removed

    def increment(self, entity_id: EntityId, field: str, delta: Any) -> bool:
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == entity_id:
                    value = getattr(item, field) + delta
                    self._items[index] = dataclasses.replace(item, **{field: value})
                    return True
            return False
