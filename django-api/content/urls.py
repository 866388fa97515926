from django.urls import path

from content.handlers import (
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

urlpatterns = [
    path("news", NewsListView.as_view(), name="news-list"),
    path("news/latest", LatestNewsView.as_view(), name="news-latest"),
    path("news/<str:entity_id>", NewsDetailView.as_view(), name="news-detail"),
    path("leaders", LeaderListView.as_view(), name="leader-list"),
    path("leaders/<str:entity_id>", LeaderDetailView.as_view(), name="leader-detail"),
    path("resources", ResourceListView.as_view(), name="resource-list"),
    path("resources/<str:entity_id>", ResourceDetailView.as_view(), name="resource-detail"),
    path(
        "resources/<str:entity_id>/download",
        ResourceDownloadView.as_view(),
        name="resource-download",
    ),
    path("files", FileListView.as_view(), name="file-list"),
    path("files/storage", FileStorageView.as_view(), name="file-storage"),
    path("files/<str:file_id>", FileDetailView.as_view(), name="file-detail"),
]
