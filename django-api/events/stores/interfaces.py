"""Store interfaces for the events app.

Stores must be swappable and return domain models.
"""

from core.stores.interfaces import Repository
from events.domain import Event, EventRegistration

EventStore = Repository[Event]
RegistrationStore = Repository[EventRegistration]
