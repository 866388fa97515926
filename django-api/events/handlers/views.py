"""HTTP handlers (views) for events and registrations.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.container import get_services
from core.handlers.cache import cached_list
from core.handlers.views import EntityDetailView, EntityListView
from events.handlers.serializers import (
    EventRegistrationSerializer,
    EventSerializer,
    ParticipantSerializer,
    RegistrationResultSerializer,
    RegistrationStatsSerializer,
    RegistrationStatusSerializer,
)
from events.services.calendar import ICS_CONTENT_TYPE, calendar_links, ics_content, ics_filename
from events.services.registration_export import registrations_to_csv

CSV_CONTENT_TYPE = "text/csv; charset=utf-8"


class EventListView(EntityListView):
    """Handler for GET/POST /api/events"""

    service_name = "events"
    serializer_class = EventSerializer


class EventDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{entity_id}"""

    service_name = "events"
    serializer_class = EventSerializer


class UpcomingEventsView(APIView):
    """Handler for GET /api/events/upcoming?count=N"""

    def get(self, request: Request) -> Response:
        try:
            count = max(int(request.query_params.get("count", 5)), 0)
        except ValueError:
            return Response({"count": ["A valid integer is required."]}, status=status.HTTP_400_BAD_REQUEST)
        events = get_services().events.upcoming(count)
        return Response(EventSerializer(events, many=True).data)


class EventCalendarView(APIView):
    """Handler for GET /api/events/{entity_id}/calendar"""

    def get(self, request: Request, entity_id: str) -> Response:
        event = get_services().events.get(entity_id)
        return Response(calendar_links(event))


class EventIcsView(APIView):
    """Handler for GET /api/events/{entity_id}/calendar.ics"""

    def get(self, request: Request, entity_id: str) -> HttpResponse:
        event = get_services().events.get(entity_id)
        response = HttpResponse(ics_content(event), content_type=ICS_CONTENT_TYPE)
        response["Content-Disposition"] = f'attachment; filename="{ics_filename(event)}"'
        return response


class EventRegisterView(APIView):
    """Handler for POST /api/events/{entity_id}/register"""

    def post(self, request: Request, entity_id: str) -> Response:
        services = get_services()
        event = services.events.get(entity_id)
        serializer = ParticipantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = services.registrations.register_for_event(
            str(event.id), event.title, serializer.validated_data
        )
        http_status = status.HTTP_201_CREATED if result.success else status.HTTP_503_SERVICE_UNAVAILABLE
        return Response(RegistrationResultSerializer(result).data, status=http_status)


class RegistrationListView(APIView):
    """Handler for GET /api/registrations?search=&status=&event_id="""

    def get(self, request: Request) -> Response:
        registrations = get_services().registrations
        params = request.query_params
        term = params.get("search", "")
        reg_status = params.get("status") or None
        event_id = params.get("event_id") or None
        if not (term or reg_status or event_id):
            return Response(cached_list(registrations, EventRegistrationSerializer))
        matches = registrations.search(term, status=reg_status, event_id=event_id)
        return Response(EventRegistrationSerializer(matches, many=True).data)


class RegistrationDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/registrations/{entity_id}"""

    service_name = "registrations"
    serializer_class = EventRegistrationSerializer


class RegistrationStatsView(APIView):
    """Handler for GET /api/registrations/stats"""

    def get(self, request: Request) -> Response:
        return Response(RegistrationStatsSerializer(get_services().registrations.stats()).data)


class RegistrationExportView(APIView):
    """Handler for GET /api/registrations/export.csv"""

    def get(self, request: Request) -> HttpResponse:
        registrations = get_services().registrations
        event_id = request.query_params.get("event_id")
        rows = registrations.registrations_for_event(event_id) if event_id else registrations.list()
        response = HttpResponse(registrations_to_csv(rows), content_type=CSV_CONTENT_TYPE)
        filename = f"event-registrations-{timezone.now():%Y-%m-%d}.csv"
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response


class RegistrationStatusView(APIView):
    """Handler for POST /api/registrations/{entity_id}/status"""

    def post(self, request: Request, entity_id: str) -> Response:
        serializer = RegistrationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = get_services().registrations.update_registration_status(
            entity_id, serializer.validated_data["status"]
        )
        http_status = status.HTTP_200_OK if result.success else status.HTTP_404_NOT_FOUND
        return Response({"success": result.success, "message": result.message}, status=http_status)


class RegistrationCheckInView(APIView):
    """Handler for POST /api/registrations/{entity_id}/check-in

    Only confirmed registrations that have not checked in yet qualify.
    """

    def post(self, request: Request, entity_id: str) -> Response:
        registrations = get_services().registrations
        registration = registrations.get(entity_id)
        if not registrations.can_check_in(registration):
            return Response(
                {"success": False, "message": "Only confirmed registrations can be checked in"},
                status=status.HTTP_409_CONFLICT,
            )
        result = registrations.check_in_participant(entity_id)
        http_status = status.HTTP_200_OK if result.success else status.HTTP_404_NOT_FOUND
        return Response({"success": result.success, "message": result.message}, status=http_status)
