"""Domain models for published content: news, leaders and resources."""

from dataclasses import dataclass, field
from datetime import datetime

from core.domain import EntityId

RESOURCE_TYPES = ("document", "video", "image", "spreadsheet", "presentation", "article", "report")
SOCIAL_PLATFORMS = ("twitter", "linkedin", "facebook", "instagram")


@dataclass(frozen=True)
class NewsItem:
    id: EntityId
    title: str
    excerpt: str
    content: str
    author: str
    publish_date: datetime
    category: str
    image: str | None = None


@dataclass(frozen=True)
class Leader:
    """A person shown on the leadership page.

    ``social_links`` maps a platform name to a profile URL; any platform
    may be missing.
    """

    id: EntityId
    name: str
    position: str
    email: str
    phone: str
    social_links: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Resource:
    id: EntityId
    title: str
    description: str
    type: str
    category: str
    url: str
    publish_date: datetime
    uploaded_by: str
    file_name: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    download_count: int = 0


@dataclass(frozen=True)
class StoredFile:
    """A file held inline (base64) in the local file store."""

    id: str
    name: str
    original_name: str
    size: int
    type: str
    download_url: str
    storage_path: str
    category: str
    upload_date: str
    last_modified: str
    file_data: str
    subcategory: str = ""
    description: str = ""
    author: str = "UFA Admin"
    tags: tuple[str, ...] = ()
    download_count: int = 0
    is_public: bool = True
