from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.handlers.cache import invalidate_list
from memberships.models import Membership


@receiver([post_save, post_delete], sender=Membership)
def invalidate_membership_cache(sender, instance, **kwargs):
    invalidate_list("memberships")
