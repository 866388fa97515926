from events.handlers.views import (
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

__all__ = [
    "EventListView",
    "EventDetailView",
    "UpcomingEventsView",
    "EventCalendarView",
    "EventIcsView",
    "EventRegisterView",
    "RegistrationListView",
    "RegistrationDetailView",
    "RegistrationStatsView",
    "RegistrationExportView",
    "RegistrationStatusView",
    "RegistrationCheckInView",
]
