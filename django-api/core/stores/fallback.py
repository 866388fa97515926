"""Repository decorator that degrades to a local store.

The primary store is skipped when it is reported unavailable and every
call that raises ``DatabaseError`` is repeated once against the fallback.
Callers are not told which store served them.

Records written to the fallback during an outage stay readable once the
primary is back: lookups that miss the primary fall through to the
fallback, and listings merge both stores.
"""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any, TypeVar

from django.db import DatabaseError

from core.domain import EntityId
from core.stores.interfaces import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackRepository(Repository[T]):
    """Try ``primary`` first, then ``fallback``.

    ``order_key`` re-sorts merged listings; ``newest_first`` sorts them
    descending.
    """

    def __init__(
        self,
        primary: Repository[T],
        fallback: Repository[T],
        is_primary_available: Callable[[], bool] = lambda: True,
        name: str = "store",
        order_key: Callable[[T], Any] | None = None,
        newest_first: bool = True,
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self._is_primary_available = is_primary_available
        self._name = name
        self._order_key = order_key
        self._newest_first = newest_first

    def _call(self, operation: str, *args):
        if not self._is_primary_available():
            logger.info("%s: primary store unavailable, using local store for %s", self._name, operation)
            return getattr(self.fallback, operation)(*args)
        try:
            return getattr(self.primary, operation)(*args)
        except DatabaseError:
            logger.warning(
                "%s: primary store failed during %s, falling back to local store",
                self._name,
                operation,
                exc_info=True,
            )
            return getattr(self.fallback, operation)(*args)

    def _from_fallback(self, operation: str, default, *args):
        """Read-through to the fallback after the primary answered."""
        try:
            return getattr(self.fallback, operation)(*args)
        except DatabaseError:
            logger.warning("%s: local store failed during %s", self._name, operation, exc_info=True)
            return default

    def list(self) -> list[T]:
        if not self._is_primary_available():
            return self._call("list")
        try:
            items = self.primary.list()
        except DatabaseError:
            logger.warning(
                "%s: primary store failed during list, falling back to local store",
                self._name,
                exc_info=True,
            )
            return self.fallback.list()
        known = {item.id for item in items}
        extra = [item for item in self._from_fallback("list", []) if item.id not in known]
        if not extra:
            return items
        merged = items + extra
        if self._order_key is not None:
            merged.sort(key=self._order_key, reverse=self._newest_first)
        return merged

    def get(self, entity_id: EntityId) -> T | None:
        found = self._call("get", entity_id)
        if found is None and self._is_primary_available():
            return self._from_fallback("get", None, entity_id)
        return found

    def add(self, entity: T) -> None:
        self._call("add", entity)

    def save(self, entity: T) -> bool:
        saved = self._call("save", entity)
        if not saved and self._is_primary_available():
            return self._from_fallback("save", False, entity)
        return saved

    def delete(self, entity_id: EntityId) -> bool:
        deleted = self._call("delete", entity_id)
        if self._is_primary_available():
            deleted = self._from_fallback("delete", False, entity_id) or deleted
        return deleted

    def increment(self, entity_id: EntityId, field: str, delta: Any) -> bool:
        changed = self._call("increment", entity_id, field, delta)
        if not changed and self._is_primary_available():
            return self._from_fallback("increment", False, entity_id, field, delta)
        return changed

    def atomic(self) -> AbstractContextManager:
        return self.primary.atomic()
