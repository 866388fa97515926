"""Django ORM stores for donations and campaigns."""

from core.stores.django_store import DataclassMapper, DjangoRepository
from donations import models
from donations.domain import Donation, DonationCampaign


def donation_store(using: str = "default") -> DjangoRepository[Donation]:
    return DjangoRepository(
        models.Donation,
        DataclassMapper(Donation, money_fields=("amount",)),
        ordering=("-stored_at",),
        using=using,
    )


def campaign_store(using: str = "default") -> DjangoRepository[DonationCampaign]:
    return DjangoRepository(
        models.DonationCampaign,
        DataclassMapper(DonationCampaign, money_fields=("target_amount", "current_amount")),
        using=using,
    )
