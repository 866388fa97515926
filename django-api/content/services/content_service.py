"""Services for news, leaders and resources."""

import logging

from core.services.entity_service import EntityService
from content.domain import Leader, NewsItem, Resource
from core.stores.interfaces import Repository

logger = logging.getLogger(__name__)


def _social_links(value: dict) -> dict[str, str]:
    return {platform: url for platform, url in value.items() if url}


class NewsService(EntityService[NewsItem]):
    entity_type = NewsItem
    topic = "news"

    def __init__(self, store: Repository[NewsItem]) -> None:
        super().__init__(store)

    def latest(self, count: int = 5) -> list[NewsItem]:
        """Most recently added articles first."""
        return self.list()[:count]


class LeaderService(EntityService[Leader]):
    entity_type = Leader
    topic = "leaders"
    coercions = {"social_links": _social_links}

    def __init__(self, store: Repository[Leader]) -> None:
        super().__init__(store)


class ResourceService(EntityService[Resource]):
    entity_type = Resource
    topic = "resources"

    def __init__(self, store: Repository[Resource]) -> None:
        super().__init__(store)

    def record_download(self, resource_id: str) -> Resource:
        """Count one download and return the updated resource.

        Raises:
            InvalidEntityIdError: If the resource_id is not a valid UUID.
            EntityNotFoundError: If the resource does not exist.
        """
        resource = self.get(resource_id)
        self.increment(resource.id, "download_count", 1)
        logger.debug("resource %s downloaded", resource.id)
        return self.get(resource.id)
