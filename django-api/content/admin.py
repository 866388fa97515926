from django.contrib import admin

from content.models import Leader, NewsItem, Resource


@admin.register(NewsItem)
class NewsItemAdmin(admin.ModelAdmin):
    list_display = ["title", "author", "category", "publish_date"]
    list_filter = ["category"]
    search_fields = ["title", "author", "excerpt"]


@admin.register(Leader)
class LeaderAdmin(admin.ModelAdmin):
    list_display = ["name", "position", "email"]
    search_fields = ["name", "position"]


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ["title", "type", "category", "download_count", "publish_date"]
    list_filter = ["type", "category"]
    search_fields = ["title", "description"]
    readonly_fields = ["download_count"]
