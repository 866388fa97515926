"""Django ORM stores for events and registrations."""

from core.stores.django_store import DataclassMapper, DjangoRepository
from events import models
from events.domain import Event, EventRegistration


def event_store(using: str = "default") -> DjangoRepository[Event]:
    """PostgreSQL/SQLite-backed event store; events keep insertion order."""
    return DjangoRepository(
        models.Event, DataclassMapper(Event), ordering=("created_at",), using=using
    )


def registration_store(using: str = "default") -> DjangoRepository[EventRegistration]:
    """Registration store on one database alias, newest registration first."""
    return DjangoRepository(
        models.EventRegistration,
        DataclassMapper(EventRegistration),
        ordering=("-registration_date", "-created_at"),
        using=using,
    )
