"""Serializers for donations, campaigns and M-Pesa payments."""

from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from core.handlers.fields import EntityIdField, MoneyField
from donations.domain import (
    CAMPAIGN_CATEGORIES,
    DEFAULT_CURRENCY,
    DONATION_STATUSES,
    PAYMENT_METHODS,
)
from donations.services.donation_service import progress_percentage


class DonationSerializer(serializers.Serializer):
    id = EntityIdField()
    amount = MoneyField()
    currency = serializers.CharField(max_length=3, required=False, default=DEFAULT_CURRENCY)
    donor_name = serializers.CharField(max_length=255, allow_blank=True)
    donor_email = serializers.EmailField()
    donor_phone = serializers.CharField(max_length=20, required=False, allow_null=True)
    is_anonymous = serializers.BooleanField(required=False, default=False)
    campaign = serializers.CharField(max_length=255, required=False, allow_null=True)
    message = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    payment_method = serializers.ChoiceField(choices=PAYMENT_METHODS)
    status = serializers.ChoiceField(choices=DONATION_STATUSES, required=False, default="pending")
    transaction_id = serializers.CharField(max_length=100, required=False, allow_null=True)
    created_at = serializers.DateTimeField(required=False, default=timezone.now)
    processed_at = serializers.DateTimeField(required=False, allow_null=True)


class DonationSubmissionSerializer(serializers.Serializer):
    """A gift made against one campaign."""

    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal("1"))
    donor_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    donor_email = serializers.EmailField()
    donor_phone = serializers.CharField(max_length=20, required=False, allow_null=True, default=None)
    is_anonymous = serializers.BooleanField(required=False, default=False)
    message = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    payment_method = serializers.ChoiceField(choices=PAYMENT_METHODS)
    transaction_id = serializers.CharField(max_length=100, required=False, allow_null=True, default=None)

    def validate(self, attrs: dict) -> dict:
        if not attrs["is_anonymous"] and not attrs["donor_name"]:
            raise serializers.ValidationError({"donor_name": "Required unless giving anonymously."})
        return attrs


class DonationCampaignSerializer(serializers.Serializer):
    id = EntityIdField()
    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    target_amount = MoneyField()
    current_amount = MoneyField(required=False, default=Decimal("0"))
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField(required=False, allow_null=True)
    is_active = serializers.BooleanField(required=False, default=True)
    featured = serializers.BooleanField(required=False, default=False)
    image = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    category = serializers.ChoiceField(choices=CAMPAIGN_CATEGORIES)
    progress = serializers.SerializerMethodField()

    def get_progress(self, campaign) -> float:
        return progress_percentage(campaign.current_amount.amount, campaign.target_amount.amount)


class PaymentRequestSerializer(serializers.Serializer):
    phone_number = serializers.CharField(max_length=20)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal("1"))
    account_reference = serializers.CharField(max_length=12, required=False, default="UFA Donation")
    transaction_description = serializers.CharField(
        max_length=100, required=False, default="Donation to United Future Alliance"
    )

