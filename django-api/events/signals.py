"""Django signals for cache invalidation.

Service mutations refresh the cached lists themselves; these cover writes
that bypass the services, such as the admin.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.handlers.cache import invalidate_list
from events.models import Event, EventRegistration


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_list("events")


@receiver([post_save, post_delete], sender=EventRegistration)
def invalidate_registration_cache(sender, instance, **kwargs):
    """Invalidate caches when a registration is saved or deleted."""
    invalidate_list("registrations")
