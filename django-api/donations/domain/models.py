"""Domain models for donations and fundraising campaigns."""

from dataclasses import dataclass
from datetime import datetime

from core.domain import EntityId, Money

PAYMENT_METHODS = ("card", "mobile_money", "bank_transfer")
DONATION_STATUSES = ("pending", "completed", "failed", "refunded")
CAMPAIGN_CATEGORIES = ("education", "healthcare", "infrastructure", "emergency", "general")

DEFAULT_CURRENCY = "KES"
ANONYMOUS_DONOR = "Anonymous"


@dataclass(frozen=True)
class Donation:
    """A single gift.

    ``campaign`` holds the campaign *title* at the time of giving, not its
    id; renaming a campaign does not rewrite past donations.
    """

    id: EntityId
    amount: Money
    donor_name: str
    donor_email: str
    payment_method: str
    status: str
    created_at: datetime
    currency: str = DEFAULT_CURRENCY
    donor_phone: str | None = None
    is_anonymous: bool = False
    campaign: str | None = None
    message: str | None = None
    transaction_id: str | None = None
    processed_at: datetime | None = None


@dataclass(frozen=True)
class DonationCampaign:
    """A fundraising target; ``current_amount`` is kept by hand, not summed."""

    id: EntityId
    title: str
    description: str
    target_amount: Money
    current_amount: Money
    start_date: datetime
    category: str
    end_date: datetime | None = None
    is_active: bool = True
    featured: bool = False
    image: str | None = None
