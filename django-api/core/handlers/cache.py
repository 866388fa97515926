"""List response caching kept current by channel subscriptions."""

import weakref
from functools import partial

from django.core.cache import cache

from core.pubsub import SnapshotChannel
from core.services.entity_service import EntityService

LIST_CACHE_TIMEOUT = 300

_watched: "weakref.WeakSet[SnapshotChannel]" = weakref.WeakSet()


def list_cache_key(topic: str) -> str:
    return f"{topic}:list"


def _store_snapshot(key: str, serializer_class, items: list) -> list:
    data = list(serializer_class(items, many=True).data)
    cache.set(key, data, LIST_CACHE_TIMEOUT)
    return data


def cached_list(service: EntityService, serializer_class) -> list:
    """Serialized collection, from cache when possible.

    The first miss subscribes a writer to the service's channel; its replay
    fills the cache and later mutations overwrite it.
    """
    key = list_cache_key(service.topic)
    data = cache.get(key)
    if data is None and service.channel not in _watched:
        _watched.add(service.channel)
        service.subscribe(partial(_store_snapshot, key, serializer_class))
        data = cache.get(key)
    if data is None:
        data = _store_snapshot(key, serializer_class, service.list())
    return data


def invalidate_list(topic: str) -> None:
    cache.delete(list_cache_key(topic))
