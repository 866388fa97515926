"""CSV export of event registrations."""

import csv
import io
from collections.abc import Iterable

from django.utils import timezone

from events.domain import EventRegistration

CSV_HEADER = (
    "Participant Name",
    "Event",
    "Email",
    "Phone",
    "Status",
    "Registration Date",
    "Confirmation Code",
    "Checked In",
)


def _date_label(registration: EventRegistration) -> str:
    value = registration.registration_date
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime("%Y-%m-%d %H:%M")


def registrations_to_csv(registrations: Iterable[EventRegistration]) -> str:
    """Every field double-quoted, header first."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for reg in registrations:
        writer.writerow(
            (
                reg.participant_name,
                reg.event_title,
                reg.email,
                reg.phone,
                reg.status,
                _date_label(reg),
                reg.confirmation_code,
                "Yes" if reg.checked_in else "No",
            )
        )
    return buffer.getvalue()
