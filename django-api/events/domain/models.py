"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from core.domain import EntityId

EVENT_TYPES = ("rally", "meeting", "webinar", "fundraiser")

REGISTRATION_PENDING = "pending"
REGISTRATION_CONFIRMED = "confirmed"
REGISTRATION_CANCELLED = "cancelled"
REGISTRATION_STATUSES = (REGISTRATION_PENDING, REGISTRATION_CONFIRMED, REGISTRATION_CANCELLED)

DEFAULT_DURATION_HOURS = 2


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EntityId
    title: str
    description: str
    date: datetime
    location: str
    type: str
    registration_required: bool = False
    image: str | None = None
    duration: float | None = None

    @property
    def duration_hours(self) -> float:
        return self.duration or DEFAULT_DURATION_HOURS


@dataclass(frozen=True)
class EventRegistration:
    """Domain representation of a participant's registration.

    ``event_title`` is a copy taken at registration time.
    """

    id: EntityId
    event_id: str
    event_title: str
    first_name: str
    last_name: str
    email: str
    phone: str
    registration_date: datetime
    confirmation_code: str
    status: str = REGISTRATION_PENDING
    id_number: str = ""
    county: str = ""
    constituency: str = ""
    interests: tuple[str, ...] = ()
    additional_info: str = ""
    checked_in: bool = False
    checked_in_at: datetime | None = None

    @property
    def participant_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
