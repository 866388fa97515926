"""Django ORM models (persistence layer) for donations."""

import uuid

from django.db import models


class PaymentMethod(models.TextChoices):
    CARD = "card", "Card"
    MOBILE_MONEY = "mobile_money", "Mobile money"
    BANK_TRANSFER = "bank_transfer", "Bank transfer"


class DonationStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    COMPLETED = "completed", "Completed"
    FAILED = "failed", "Failed"
    REFUNDED = "refunded", "Refunded"


class CampaignCategory(models.TextChoices):
    EDUCATION = "education", "Education"
    HEALTHCARE = "healthcare", "Healthcare"
    INFRASTRUCTURE = "infrastructure", "Infrastructure"
    EMERGENCY = "emergency", "Emergency"
    GENERAL = "general", "General"


class Donation(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    currency = models.CharField(max_length=3, default="KES")
    donor_name = models.CharField(max_length=255)
    donor_email = models.EmailField()
    donor_phone = models.CharField(max_length=20, blank=True, null=True)
    is_anonymous = models.BooleanField(default=False)
    # Campaign title, not a foreign key.
    campaign = models.CharField(max_length=255, blank=True, null=True)
    message = models.TextField(blank=True, null=True)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    status = models.CharField(max_length=20, choices=DonationStatus.choices)
    transaction_id = models.CharField(max_length=64, blank=True, null=True)
    created_at = models.DateTimeField()
    processed_at = models.DateTimeField(blank=True, null=True)
    stored_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-stored_at"]
        indexes = [
            models.Index(fields=["campaign"], name="donation_campaign_idx"),
            models.Index(fields=["status"], name="donation_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.donor_name} - {self.amount} {self.currency}"


class DonationCampaign(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    target_amount = models.DecimalField(max_digits=14, decimal_places=2)
    current_amount = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    featured = models.BooleanField(default=False)
    category = models.CharField(max_length=20, choices=CampaignCategory.choices)
    image = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title
