"""Generic entity service - the CRUD and broadcast contract every app shares.

Services:
- Depend only on interfaces (stores)
- Perform orchestration and error mapping
- Return domain models or domain errors
- Broadcast the full collection to subscribers after every mutation
"""

import dataclasses
import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from core.domain import EntityId, EntityNotFoundError, InvalidEntityIdError
from core.pubsub import SnapshotChannel, Subscriber, Unsubscribe
from core.stores.interfaces import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_entity_id(entity_id: str | EntityId) -> EntityId:
    """Return an EntityId or raise InvalidEntityIdError."""
    if isinstance(entity_id, EntityId):
        return entity_id
    try:
        return EntityId.from_string(entity_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEntityIdError()


class EntityService(Generic[T]):
    """CRUD plus subscription for one entity type.

    Subclasses set ``entity_type`` and ``topic`` and may declare
    ``coercions``: field name to a callable converting raw input values
    into domain values.
    """

    entity_type: ClassVar[type]
    topic: ClassVar[str]
    coercions: ClassVar[dict[str, Callable[[Any], Any]]] = {}

    def __init__(self, store: Repository[T]) -> None:
        self._store = store
        self.channel: SnapshotChannel[T] = SnapshotChannel(self.topic, self._store.list)

    def _coerce(self, data: Mapping[str, Any]) -> dict[str, Any]:
        values = {key: value for key, value in data.items() if key != "id"}
        for name, convert in self.coercions.items():
            if values.get(name) is not None:
                values[name] = convert(values[name])
        return values

    def list(self) -> list[T]:
        """Return a snapshot of every record."""
        return self._store.list()

    def get(self, entity_id: str | EntityId) -> T:
        """Return a record by ID.

        Raises:
            InvalidEntityIdError: If the entity_id is not a valid UUID.
            EntityNotFoundError: If the record does not exist.
        """
        entity = self._store.get(parse_entity_id(entity_id))
        if entity is None:
            raise EntityNotFoundError(self.topic, str(entity_id))
        return entity

    def add(self, data: Mapping[str, Any]) -> str:
        """Store a new record under a fresh ID and return the ID."""
        entity = self.entity_type(id=EntityId.new(), **self._coerce(data))
        self._store.add(entity)
        logger.debug("added %s %s", self.topic, entity.id)
        self.channel.publish()
        return str(entity.id)

    def update(self, entity_id: str | EntityId, changes: Mapping[str, Any]) -> None:
        """Shallow-merge ``changes`` into a record. Unknown IDs are ignored."""
        current = self._find(entity_id)
        if current is None:
            return
        updated = dataclasses.replace(current, **self._coerce(changes))
        self._store.save(updated)
        logger.debug("updated %s %s", self.topic, updated.id)
        self.channel.publish()

    def increment(self, entity_id: str | EntityId, field: str, delta: Any) -> bool:
        """Add ``delta`` to a counter or total in one store call.

        Returns False for unknown IDs, which are otherwise ignored.
        """
        try:
            parsed = parse_entity_id(entity_id)
        except InvalidEntityIdError:
            return False
        if not self._store.increment(parsed, field, delta):
            return False
        logger.debug("incremented %s of %s %s", field, self.topic, parsed)
        self.channel.publish()
        return True

    def delete(self, entity_id: str | EntityId) -> None:
        """Remove a record. Unknown IDs are ignored."""
        try:
            parsed = parse_entity_id(entity_id)
        except InvalidEntityIdError:
            return
        if self._store.delete(parsed):
            logger.debug("deleted %s %s", self.topic, parsed)
        self.channel.publish()

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Replay the current collection to ``callback`` and keep it informed."""
        return self.channel.subscribe(callback)

    def _find(self, entity_id: str | EntityId) -> T | None:
        try:
            return self._store.get(parse_entity_id(entity_id))
        except InvalidEntityIdError:
            return None
