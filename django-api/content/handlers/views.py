"""HTTP handlers for news, leaders, resources and uploaded files."""

from django.http import HttpResponse
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from content.handlers.serializers import (
    FileUploadSerializer,
    LeaderSerializer,
    NewsItemSerializer,
    ResourceSerializer,
    StoredFileSerializer,
)
from core.container import get_services
from core.handlers.views import EntityDetailView, EntityListView


class NewsListView(EntityListView):
    """Handler for GET/POST /api/news"""

    service_name = "news"
    serializer_class = NewsItemSerializer


class NewsDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/news/{entity_id}"""

    service_name = "news"
    serializer_class = NewsItemSerializer


class LatestNewsView(APIView):
    """Handler for GET /api/news/latest?count=N"""

    def get(self, request: Request) -> Response:
        try:
            count = max(int(request.query_params.get("count", 5)), 0)
        except ValueError:
            return Response({"count": ["A valid integer is required."]}, status=status.HTTP_400_BAD_REQUEST)
        return Response(NewsItemSerializer(get_services().news.latest(count), many=True).data)


class LeaderListView(EntityListView):
    """Handler for GET/POST /api/leaders"""

    service_name = "leaders"
    serializer_class = LeaderSerializer


class LeaderDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/leaders/{entity_id}"""

    service_name = "leaders"
    serializer_class = LeaderSerializer


class ResourceListView(EntityListView):
    """Handler for GET/POST /api/resources"""

    service_name = "resources"
    serializer_class = ResourceSerializer


class ResourceDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/resources/{entity_id}"""

    service_name = "resources"
    serializer_class = ResourceSerializer


class ResourceDownloadView(APIView):
    """Handler for POST /api/resources/{entity_id}/download"""

    def post(self, request: Request, entity_id: str) -> Response:
        resource = get_services().resources.record_download(entity_id)
        return Response(ResourceSerializer(resource).data)


class FileListView(APIView):
    """Handler for GET /api/files?category=X and multipart POST /api/files"""

    parser_classes = [MultiPartParser, FormParser]

    def get(self, request: Request) -> Response:
        category = request.query_params.get("category", "")
        files = get_services().files.list_by_category(category)
        return Response(StoredFileSerializer(files, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = FileUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        upload = data["file"]
        stored = get_services().files.upload(
            upload.read(),
            original_name=upload.name,
            content_type=upload.content_type,
            category=data["category"],
            subcategory=data["subcategory"],
            description=data["description"],
            author=data["author"],
            tags=data["tags"],
        )
        return Response(StoredFileSerializer(stored).data, status=status.HTTP_201_CREATED)


class FileStorageView(APIView):
    """Handler for GET /api/files/storage"""

    def get(self, request: Request) -> Response:
        return Response(get_services().files.storage_info())


class FileDetailView(APIView):
    """Handler for GET (download) and DELETE /api/files/{file_id}"""

    def get(self, request: Request, file_id: str) -> HttpResponse:
        found = get_services().files.download(file_id)
        if found is None:
            return Response(
                {"code": "ENTITY_NOT_FOUND", "message": "File not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        stored, data = found
        response = HttpResponse(data, content_type=stored.type)
        response["Content-Disposition"] = f'attachment; filename="{stored.original_name}"'
        return response

    def delete(self, request: Request, file_id: str) -> Response:
        get_services().files.delete(file_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
