"""Event service - all business logic for the event catalog lives here.

TODO: move ``upcoming`` into the store once the primary database is the
only backend, so the date filter runs as a query.
"""

from datetime import datetime

from django.utils import timezone

from core.services.entity_service import EntityService
from events.domain import Event
from events.stores.interfaces import EventStore


class EventService(EntityService[Event]):
    """Service for event catalog operations."""

    entity_type = Event
    topic = "events"

    def __init__(self, store: EventStore) -> None:
        super().__init__(store)

    def upcoming(self, count: int = 5, now: datetime | None = None) -> list[Event]:
        """Return events dated ``now`` or later, soonest first."""
        now = now or timezone.now()
        future = [event for event in self.list() if event.date >= now]
        return sorted(future, key=lambda event: event.date)[:count]
