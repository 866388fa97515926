from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from content.models import Leader, NewsItem, Resource
from core.handlers.cache import invalidate_list


@receiver([post_save, post_delete], sender=NewsItem)
def invalidate_news_cache(sender, instance, **kwargs):
    invalidate_list("news")


@receiver([post_save, post_delete], sender=Leader)
def invalidate_leader_cache(sender, instance, **kwargs):
    invalidate_list("leaders")


@receiver([post_save, post_delete], sender=Resource)
def invalidate_resource_cache(sender, instance, **kwargs):
    invalidate_list("resources")
