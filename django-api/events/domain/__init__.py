from events.domain.models import (
    EVENT_TYPES,
    REGISTRATION_CANCELLED,
    REGISTRATION_CONFIRMED,
    REGISTRATION_PENDING,
    REGISTRATION_STATUSES,
    Event,
    EventRegistration,
)

__all__ = [
    "Event",
    "EventRegistration",
    "EVENT_TYPES",
    "REGISTRATION_STATUSES",
    "REGISTRATION_PENDING",
    "REGISTRATION_CONFIRMED",
    "REGISTRATION_CANCELLED",
]
