"""Event registration service.

Registrations are written through a store that may silently fall back to
the local database, so every result reports success the same way whichever
store kept the record.
"""

import logging
import secrets
import string
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from django.utils import timezone

from core.services.entity_service import EntityService
from events.domain import (
    REGISTRATION_CANCELLED,
    REGISTRATION_CONFIRMED,
    REGISTRATION_PENDING,
    EventRegistration,
)
from events.stores.interfaces import RegistrationStore

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.digits + string.ascii_uppercase
CODE_LENGTH = 6
CODE_ATTEMPTS = 10

PARTICIPANT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "id_number",
    "county",
    "constituency",
    "interests",
    "additional_info",
)


@dataclass(frozen=True)
class RegistrationResult:
    success: bool
    message: str
    confirmation_code: str | None = None
    registration_id: str | None = None


@dataclass(frozen=True)
class OperationResult:
    success: bool
    message: str


@dataclass(frozen=True)
class RegistrationStats:
    total: int
    confirmed: int
    pending: int
    cancelled: int
    checked_in: int


def generate_confirmation_code() -> str:
    """Six upper-case base-36 characters."""
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


class RegistrationService(EntityService[EventRegistration]):
    """Service for registering participants and managing their status."""

    entity_type = EventRegistration
    topic = "registrations"
    coercions = {"interests": tuple}

    def __init__(self, store: RegistrationStore) -> None:
        super().__init__(store)

    def register_for_event(
        self, event_id: str, event_title: str, details: Mapping[str, Any]
    ) -> RegistrationResult:
        """Register a participant; never raises."""
        try:
            code = self._unused_confirmation_code()
            data = {name: details[name] for name in PARTICIPANT_FIELDS if name in details}
            registration_id = self.add(
                {
                    **data,
                    "event_id": str(event_id),
                    "event_title": event_title,
                    "registration_date": timezone.now(),
                    "status": REGISTRATION_PENDING,
                    "confirmation_code": code,
                    "checked_in": False,
                }
            )
        except Exception:
            logger.exception("registration for event %s failed", event_id)
            return RegistrationResult(success=False, message="Registration failed. Please try again.")

        logger.info("registered participant for event %s with code %s", event_id, code)
        return RegistrationResult(
            success=True,
            message=(
                "Event registration confirmed! You will receive event details via email. "
                f"Confirmation Code: {code}"
            ),
            confirmation_code=code,
            registration_id=registration_id,
        )

    def update_registration_status(self, registration_id: str, status: str) -> OperationResult:
        if self._find(registration_id) is None:
            return OperationResult(success=False, message="Failed to update registration status")
        self.update(registration_id, {"status": status})
        return OperationResult(success=True, message="Registration status updated successfully")

    def check_in_participant(self, registration_id: str) -> OperationResult:
        if self._find(registration_id) is None:
            return OperationResult(success=False, message="Failed to check in participant")
        self.update(registration_id, {"checked_in": True, "checked_in_at": timezone.now()})
        return OperationResult(success=True, message="Participant checked in successfully")

    def can_check_in(self, registration: EventRegistration) -> bool:
        return registration.status == REGISTRATION_CONFIRMED and not registration.checked_in

    def registrations_for_event(self, event_id: str) -> list[EventRegistration]:
        return [reg for reg in self.list() if reg.event_id == str(event_id)]

    def search(
        self, term: str = "", status: str | None = None, event_id: str | None = None
    ) -> list[EventRegistration]:
        """Filter registrations the way the admin list does."""
        needle = term.lower()
        matches = []
        for reg in self.list():
            haystack = (
                reg.first_name,
                reg.last_name,
                reg.email,
                reg.event_title,
                reg.confirmation_code,
            )
            if needle and not any(needle in value.lower() for value in haystack):
                continue
            if status and reg.status != status:
                continue
            if event_id and reg.event_id != event_id:
                continue
            matches.append(reg)
        return matches

    def stats(self) -> RegistrationStats:
        registrations = self.list()
        return RegistrationStats(
            total=len(registrations),
            confirmed=sum(1 for r in registrations if r.status == REGISTRATION_CONFIRMED),
            pending=sum(1 for r in registrations if r.status == REGISTRATION_PENDING),
            cancelled=sum(1 for r in registrations if r.status == REGISTRATION_CANCELLED),
            checked_in=sum(1 for r in registrations if r.checked_in),
        )

    def _unused_confirmation_code(self) -> str:
        taken = {reg.confirmation_code for reg in self.list()}
        for _ in range(CODE_ATTEMPTS):
            code = generate_confirmation_code()
            if code not in taken:
                return code
        raise RuntimeError("could not allocate a unique confirmation code")

