"""Serializers for news, leaders, resources and stored files."""

from rest_framework import serializers

from content.domain import RESOURCE_TYPES, SOCIAL_PLATFORMS
from core.handlers.fields import EntityIdField


class NewsItemSerializer(serializers.Serializer):
    id = EntityIdField()
    title = serializers.CharField(max_length=255)
    excerpt = serializers.CharField()
    content = serializers.CharField()
    author = serializers.CharField(max_length=255)
    publish_date = serializers.DateTimeField()
    image = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    category = serializers.CharField(max_length=100)


class LeaderSerializer(serializers.Serializer):
    id = EntityIdField()
    name = serializers.CharField(max_length=255)
    position = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30)
    social_links = serializers.DictField(
        child=serializers.URLField(allow_blank=True), required=False, default=dict
    )

    def validate_social_links(self, value: dict) -> dict:
        unknown = set(value) - set(SOCIAL_PLATFORMS)
        if unknown:
            raise serializers.ValidationError(f"Unknown platforms: {', '.join(sorted(unknown))}")
        return value


class ResourceSerializer(serializers.Serializer):
    id = EntityIdField()
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True)
    type = serializers.ChoiceField(choices=RESOURCE_TYPES)
    category = serializers.CharField(max_length=100)
    url = serializers.CharField(max_length=500)
    file_name = serializers.CharField(max_length=255, required=False, allow_null=True)
    file_size = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    mime_type = serializers.CharField(max_length=100, required=False, allow_null=True)
    publish_date = serializers.DateTimeField()
    uploaded_by = serializers.CharField(max_length=255)
    download_count = serializers.IntegerField(read_only=True)


class StoredFileSerializer(serializers.Serializer):
    """File metadata; the inline bytes never go out in listings."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    original_name = serializers.CharField(read_only=True)
    size = serializers.IntegerField(read_only=True)
    type = serializers.CharField(read_only=True)
    download_url = serializers.CharField(read_only=True)
    storage_path = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    subcategory = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    author = serializers.CharField(read_only=True)
    tags = serializers.ListField(child=serializers.CharField(), read_only=True)
    upload_date = serializers.CharField(read_only=True)
    last_modified = serializers.CharField(read_only=True)
    download_count = serializers.IntegerField(read_only=True)
    is_public = serializers.BooleanField(read_only=True)


class FileUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
    category = serializers.CharField(max_length=100)
    subcategory = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    author = serializers.CharField(max_length=255, required=False, default="UFA Admin")
    tags = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_tags(self, value: str) -> tuple[str, ...]:
        """Comma separated on the wire."""
        return tuple(tag.strip() for tag in value.split(",") if tag.strip())
