from django.contrib import admin

from events.models import Event, EventRegistration


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "type", "date", "location", "registration_required"]
    list_filter = ["type", "registration_required"]
    search_fields = ["title", "location"]
    date_hierarchy = "date"


@admin.register(EventRegistration)
class EventRegistrationAdmin(admin.ModelAdmin):
    list_display = [
        "confirmation_code",
        "first_name",
        "last_name",
        "event_title",
        "status",
        "checked_in",
        "registration_date",
    ]
    list_filter = ["status", "checked_in"]
    search_fields = ["first_name", "last_name", "email", "event_title", "confirmation_code"]
    readonly_fields = ["confirmation_code", "registration_date", "checked_in_at", "created_at", "updated_at"]
