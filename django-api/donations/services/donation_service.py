"""Donation and campaign services."""

import logging
import time
from decimal import Decimal

from django.utils import timezone

from core.domain import Money, as_money
from core.services.entity_service import EntityService
from core.stores.interfaces import Repository
from donations.domain import ANONYMOUS_DONOR, DEFAULT_CURRENCY, Donation, DonationCampaign

logger = logging.getLogger(__name__)


def progress_percentage(current: Decimal | int | float, target: Decimal | int | float) -> float:
    """Share of ``target`` reached, capped at 100. A non-positive target gives 0."""
    current, target = Decimal(str(current)), Decimal(str(target))
    if target <= 0:
        return 0.0
    return float(min(current / target * 100, Decimal(100)))


class CampaignService(EntityService[DonationCampaign]):
    entity_type = DonationCampaign
    topic = "campaigns"
    coercions = {"target_amount": as_money, "current_amount": as_money}

    def __init__(self, store: Repository[DonationCampaign]) -> None:
        super().__init__(store)

    def add_to_amount(self, campaign_id: str, amount: Money) -> None:
        """Raise ``current_amount`` by ``amount``; unknown campaigns are ignored."""
        self.increment(campaign_id, "current_amount", as_money(amount))

    def active(self) -> list[DonationCampaign]:
        return [c for c in self.list() if c.is_active]

    def featured(self) -> list[DonationCampaign]:
        return [c for c in self.list() if c.is_active and c.featured]

    def progress(self, campaign: DonationCampaign) -> float:
        return progress_percentage(campaign.current_amount.amount, campaign.target_amount.amount)


class DonationService(EntityService[Donation]):
    entity_type = Donation
    topic = "donations"
    coercions = {"amount": as_money}

    def __init__(self, store: Repository[Donation], campaigns: CampaignService) -> None:
        super().__init__(store)
        self._campaigns = campaigns

    def submit_donation(
        self,
        campaign_id: str,
        amount: Decimal,
        donor_email: str,
        payment_method: str,
        donor_name: str = "",
        donor_phone: str | None = None,
        is_anonymous: bool = False,
        message: str | None = None,
        transaction_id: str | None = None,
    ) -> Donation:
        """Record a completed gift against a campaign and raise its total.

        Raises:
            InvalidEntityIdError: If the campaign_id is not a valid UUID.
            EntityNotFoundError: If the campaign does not exist.
        """
        campaign = self._campaigns.get(campaign_id)
        money = as_money(amount)
        now = timezone.now()
        with self._store.atomic():
            donation_id = self.add(
                {
                    "amount": money,
                    "currency": DEFAULT_CURRENCY,
                    "donor_name": ANONYMOUS_DONOR if is_anonymous else donor_name,
                    "donor_email": donor_email,
                    "donor_phone": donor_phone,
                    "is_anonymous": is_anonymous,
                    "campaign": campaign.title,
                    "message": message,
                    "payment_method": payment_method,
                    "status": "completed",
                    "transaction_id": transaction_id or f"TXN_{int(time.time() * 1000)}",
                    "created_at": now,
                    "processed_at": now,
                }
            )
            self._campaigns.add_to_amount(campaign.id, money)
        logger.info("donation %s of %s recorded for campaign %s", donation_id, money, campaign.title)
        return self.get(donation_id)

    def for_campaign(self, campaign_title: str) -> list[Donation]:
        return [d for d in self.list() if d.campaign == campaign_title]
