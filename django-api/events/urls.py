from django.urls import path

from events.handlers import (
    EventCalendarView,
    EventDetailView,
    EventIcsView,
    EventListView,
    EventRegisterView,
    RegistrationCheckInView,
    RegistrationDetailView,
    RegistrationExportView,
    RegistrationListView,
    RegistrationStatsView,
    RegistrationStatusView,
    UpcomingEventsView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/upcoming", UpcomingEventsView.as_view(), name="event-upcoming"),
    path("events/<str:entity_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:entity_id>/calendar", EventCalendarView.as_view(), name="event-calendar"),
    path("events/<str:entity_id>/calendar.ics", EventIcsView.as_view(), name="event-ics"),
    path("events/<str:entity_id>/register", EventRegisterView.as_view(), name="event-register"),
    path("registrations", RegistrationListView.as_view(), name="registration-list"),
    path("registrations/stats", RegistrationStatsView.as_view(), name="registration-stats"),
    path("registrations/export.csv", RegistrationExportView.as_view(), name="registration-export"),
    path("registrations/<str:entity_id>", RegistrationDetailView.as_view(), name="registration-detail"),
    path(
        "registrations/<str:entity_id>/status",
        RegistrationStatusView.as_view(),
        name="registration-status",
    ),
    path(
        "registrations/<str:entity_id>/check-in",
        RegistrationCheckInView.as_view(),
        name="registration-check-in",
    ),
]
