"""Domain model for membership applications."""

from dataclasses import dataclass
from datetime import date, datetime

from core.domain import EntityId

MEMBERSHIP_PENDING = "pending"
MEMBERSHIP_APPROVED = "approved"
MEMBERSHIP_REJECTED = "rejected"
MEMBERSHIP_STATUSES = (MEMBERSHIP_PENDING, MEMBERSHIP_APPROVED, MEMBERSHIP_REJECTED)
GENDERS = ("male", "female", "other")


@dataclass(frozen=True)
class Membership:
    id: EntityId
    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: date
    gender: str
    county: str
    constituency: str
    occupation: str
    motivation: str
    how_did_you_hear: str
    submitted_at: datetime
    status: str = MEMBERSHIP_PENDING
    ward: str = ""
    organization: str = ""
    interests: tuple[str, ...] = ()
    is_volunteer: bool = False
    volunteer_areas: tuple[str, ...] = ()
    reviewed_at: datetime | None = None
    reviewed_by: str | None = None
    notes: str = ""
