from donations.domain.models import (
    ANONYMOUS_DONOR,
    CAMPAIGN_CATEGORIES,
    DEFAULT_CURRENCY,
    DONATION_STATUSES,
    PAYMENT_METHODS,
    Donation,
    DonationCampaign,
)

__all__ = [
    "Donation",
    "DonationCampaign",
    "PAYMENT_METHODS",
    "DONATION_STATUSES",
    "CAMPAIGN_CATEGORIES",
    "DEFAULT_CURRENCY",
    "ANONYMOUS_DONOR",
]
