from rest_framework import serializers

from core.handlers.fields import EntityIdField
from memberships.domain import GENDERS, MEMBERSHIP_APPROVED, MEMBERSHIP_REJECTED, MEMBERSHIP_STATUSES


class MembershipSerializer(serializers.Serializer):
    id = EntityIdField()
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=20)
    date_of_birth = serializers.DateField()
    gender = serializers.ChoiceField(choices=GENDERS)
    county = serializers.CharField(max_length=100)
    constituency = serializers.CharField(max_length=100)
    ward = serializers.CharField(max_length=100, required=False, allow_blank=True)
    occupation = serializers.CharField(max_length=255)
    organization = serializers.CharField(max_length=255, required=False, allow_blank=True)
    interests = serializers.ListField(child=serializers.CharField(), required=False)
    motivation = serializers.CharField()
    how_did_you_hear = serializers.CharField(max_length=255)
    is_volunteer = serializers.BooleanField(required=False, default=False)
    volunteer_areas = serializers.ListField(child=serializers.CharField(), required=False)
    status = serializers.ChoiceField(choices=MEMBERSHIP_STATUSES, read_only=True)
    submitted_at = serializers.DateTimeField(read_only=True)
    reviewed_at = serializers.DateTimeField(read_only=True, allow_null=True)
    reviewed_by = serializers.CharField(read_only=True, allow_null=True)
    notes = serializers.CharField(read_only=True)


class MembershipReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=(MEMBERSHIP_APPROVED, MEMBERSHIP_REJECTED))
    reviewer = serializers.CharField(max_length=255)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
