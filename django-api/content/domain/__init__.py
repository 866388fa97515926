from content.domain.models import (
    RESOURCE_TYPES,
    SOCIAL_PLATFORMS,
    Leader,
    NewsItem,
    Resource,
    StoredFile,
)

__all__ = [
    "NewsItem",
    "Leader",
    "Resource",
    "StoredFile",
    "RESOURCE_TYPES",
    "SOCIAL_PLATFORMS",
]
