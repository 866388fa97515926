"""Serializers for transforming event domain models to API responses.

They also validate input, the only place required fields are enforced.
"""

from rest_framework import serializers

from core.handlers.fields import EntityIdField
from events.domain import EVENT_TYPES, REGISTRATION_STATUSES


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = EntityIdField()
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True)
    date = serializers.DateTimeField()
    location = serializers.CharField(max_length=255, allow_blank=True)
    type = serializers.ChoiceField(choices=EVENT_TYPES)
    image = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    registration_required = serializers.BooleanField(required=False, default=False)
    duration = serializers.FloatField(required=False, allow_null=True, min_value=0)


class ParticipantSerializer(serializers.Serializer):
    """Details a participant submits when registering for an event."""

    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=20)
    id_number = serializers.CharField(max_length=20, required=False, allow_blank=True)
    county = serializers.CharField(max_length=100, required=False, allow_blank=True)
    constituency = serializers.CharField(max_length=100, required=False, allow_blank=True)
    interests = serializers.ListField(child=serializers.CharField(), required=False)
    additional_info = serializers.CharField(required=False, allow_blank=True)


class EventRegistrationSerializer(ParticipantSerializer):
    """Serializer for EventRegistration domain model."""

    id = EntityIdField()
    event_id = serializers.CharField(read_only=True)
    event_title = serializers.CharField(read_only=True)
    registration_date = serializers.DateTimeField(read_only=True)
    status = serializers.ChoiceField(choices=REGISTRATION_STATUSES, required=False)
    confirmation_code = serializers.CharField(read_only=True)
    checked_in = serializers.BooleanField(read_only=True)
    checked_in_at = serializers.DateTimeField(read_only=True, allow_null=True)


class RegistrationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=REGISTRATION_STATUSES)


class RegistrationResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    confirmation_code = serializers.CharField(allow_null=True)
    registration_id = serializers.CharField(allow_null=True)


class RegistrationStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    confirmed = serializers.IntegerField()
    pending = serializers.IntegerField()
    cancelled = serializers.IntegerField()
    checked_in = serializers.IntegerField()
