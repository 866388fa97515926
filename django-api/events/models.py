"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class EventType(models.TextChoices):
    RALLY = "rally", "Rally"
    MEETING = "meeting", "Meeting"
    WEBINAR = "webinar", "Webinar"
    FUNDRAISER = "fundraiser", "Fundraiser"


class RegistrationStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CONFIRMED = "confirmed", "Confirmed"
    CANCELLED = "cancelled", "Cancelled"


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    date = models.DateTimeField()
    location = models.CharField(max_length=255)
    type = models.CharField(max_length=20, choices=EventType.choices)
    image = models.URLField(max_length=500, blank=True, null=True)
    registration_required = models.BooleanField(default=False)
    duration = models.FloatField(blank=True, null=True, help_text="Hours")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["date"], name="event_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class EventRegistration(models.Model):
    """Persistence model for event registrations.

    Stored on the primary database and, when that is unreachable, on the
    ``local`` database. ``event_id`` is not a foreign key for that reason.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_id = models.CharField(max_length=64)
    event_title = models.CharField(max_length=255)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=20)
    id_number = models.CharField(max_length=20, blank=True, default="")
    county = models.CharField(max_length=100, blank=True, default="")
    constituency = models.CharField(max_length=100, blank=True, default="")
    interests = models.JSONField(default=list, blank=True)
    additional_info = models.TextField(blank=True, default="")
    registration_date = models.DateTimeField()
    status = models.CharField(
        max_length=20, choices=RegistrationStatus.choices, default=RegistrationStatus.PENDING
    )
    confirmation_code = models.CharField(max_length=12)
    checked_in = models.BooleanField(default=False)
    checked_in_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-registration_date"]
        indexes = [
            models.Index(fields=["event_id"], name="registration_event_idx"),
            models.Index(fields=["email"], name="registration_email_idx"),
            models.Index(fields=["status"], name="registration_status_idx"),
            models.Index(fields=["registration_date"], name="registration_date_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} - {self.event_title}"
