from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("events.urls")),
    path("api/", include("content.urls")),
    path("api/", include("donations.urls")),
    path("api/", include("memberships.urls")),
]
