from content.handlers.views import (
    FileDetailView,
    FileListView,
    FileStorageView,
    LatestNewsView,
    LeaderDetailView,
    LeaderListView,
    NewsDetailView,
    NewsListView,
    ResourceDetailView,
    ResourceDownloadView,
    ResourceListView,
)

__all__ = [
    "NewsListView",
    "NewsDetailView",
    "LatestNewsView",
    "LeaderListView",
    "LeaderDetailView",
    "ResourceListView",
    "ResourceDetailView",
    "ResourceDownloadView",
    "FileListView",
    "FileStorageView",
    "FileDetailView",
]
