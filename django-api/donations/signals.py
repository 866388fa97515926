from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.handlers.cache import invalidate_list
from donations.models import Donation, DonationCampaign


@receiver([post_save, post_delete], sender=Donation)
def invalidate_donation_cache(sender, instance, **kwargs):
    invalidate_list("donations")


@receiver([post_save, post_delete], sender=DonationCampaign)
def invalidate_campaign_cache(sender, instance, **kwargs):
    """Campaign totals change with every donation, so the list goes too."""
    invalidate_list("campaigns")
