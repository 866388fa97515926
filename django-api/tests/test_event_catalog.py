"""Integration tests for the events and registrations API.

Run with: pytest tests/test_event_catalog.py -v
"""

import pytest
from rest_framework.test import APIClient

from core.container import get_services

MISSING_ID = "00000000-0000-4000-8000-000000000000"


def event_payload(future, **overrides):
    payload = {
        "title": "Town Hall",
        "description": "Quarterly town hall with members.",
        "date": future.isoformat(),
        "location": "Nairobi",
        "type": "meeting",
        "registration_required": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def event_id(api_client, future):
    response = api_client.post("/api/events", event_payload(future), format="json")
    return response.json()["id"]


@pytest.mark.django_db
class TestEventList:
    """Tests for GET/POST /api/events"""

    def test_list_events_empty_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_list_events(self, api_client: APIClient, future):
        created = api_client.post("/api/events", event_payload(future), format="json")
        api_client.post("/api/events", event_payload(future, title="Rally"), format="json")

        assert created.status_code == 201
        assert created.json()["title"] == "Town Hall"
        response = api_client.get("/api/events")
        assert [e["title"] for e in response.json()] == ["Town Hall", "Rally"]

    def test_create_rejects_unknown_type(self, api_client: APIClient, future):
        response = api_client.post("/api/events", event_payload(future, type="picnic"), format="json")
        assert response.status_code == 400
        assert "type" in response.json()

    def test_upcoming(self, api_client: APIClient, future):
        from datetime import timedelta

        api_client.post(
            "/api/events", event_payload(future - timedelta(days=60), title="Past"), format="json"
        )
        api_client.post("/api/events", event_payload(future, title="Next"), format="json")

        response = api_client.get("/api/events/upcoming?count=3")

        assert [e["title"] for e in response.json()] == ["Next"]


@pytest.mark.django_db
class TestEventDetail:
    """Tests for /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, event_id):
        response = api_client.get(f"/api/events/{event_id}")
        assert response.status_code == 200
        assert response.json()["id"] == event_id
        assert response.json()["location"] == "Nairobi"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/events/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json()["code"] == "ENTITY_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ENTITY_ID"

    def test_patch_merges_fields(self, api_client: APIClient, event_id):
        response = api_client.patch(f"/api/events/{event_id}", {"location": "Nakuru"}, format="json")
        assert response.status_code == 200
        assert response.json()["location"] == "Nakuru"
        assert response.json()["title"] == "Town Hall"

    def test_delete(self, api_client: APIClient, event_id):
        assert api_client.delete(f"/api/events/{event_id}").status_code == 204
        assert api_client.get(f"/api/events/{event_id}").status_code == 404

    def test_delete_unknown_is_no_op(self, api_client: APIClient):
        assert api_client.delete(f"/api/events/{MISSING_ID}").status_code == 204


@pytest.mark.django_db
class TestCalendarExport:
    def test_links(self, api_client: APIClient, event_id):
        response = api_client.get(f"/api/events/{event_id}/calendar")
        assert set(response.json()) == {"google", "outlook", "yahoo"}
        assert response.json()["google"].startswith("https://calendar.google.com/calendar/render?")

    def test_ics_download(self, api_client: APIClient, event_id):
        response = api_client.get(f"/api/events/{event_id}/calendar.ics")

        assert response.status_code == 200
        assert response["Content-Type"] == "text/calendar; charset=utf-8"
        assert response["Content-Disposition"] == 'attachment; filename="town_hall.ics"'
        assert f"UID:{event_id}@ufa.org" in response.content.decode()


@pytest.mark.django_db(databases=["default", "local"])
class TestRegistrations:
    """Tests for event registration and the registrations admin endpoints."""

    @pytest.fixture
    def registration(self, api_client, event_id, participant):
        response = api_client.post(f"/api/events/{event_id}/register", participant, format="json")
        return response.json()

    def test_register(self, api_client: APIClient, event_id, participant):
        response = api_client.post(f"/api/events/{event_id}/register", participant, format="json")

        body = response.json()
        assert response.status_code == 201
        assert body["success"] is True
        assert len(body["confirmation_code"]) == 6
        assert body["confirmation_code"] in body["message"]

    def test_register_requires_participant_fields(self, api_client: APIClient, event_id):
        response = api_client.post(f"/api/events/{event_id}/register", {"first_name": "A"}, format="json")
        assert response.status_code == 400
        assert {"last_name", "email", "phone"} <= set(response.json())

    def test_register_for_unknown_event(self, api_client: APIClient, participant):
        response = api_client.post(f"/api/events/{MISSING_ID}/register", participant, format="json")
        assert response.status_code == 404

    def test_list_and_search(self, api_client: APIClient, registration):
        everything = api_client.get("/api/registrations").json()
        found = api_client.get("/api/registrations?search=amina").json()
        missing = api_client.get("/api/registrations?status=cancelled").json()

        assert [r["id"] for r in everything] == [registration["registration_id"]]
        assert [r["email"] for r in found] == ["amina@example.com"]
        assert missing == []

    def test_status_then_check_in(self, api_client: APIClient, registration):
        registration_id = registration["registration_id"]

        early = api_client.post(f"/api/registrations/{registration_id}/check-in")
        confirmed = api_client.post(
            f"/api/registrations/{registration_id}/status", {"status": "confirmed"}, format="json"
        )
        checked_in = api_client.post(f"/api/registrations/{registration_id}/check-in")
        again = api_client.post(f"/api/registrations/{registration_id}/check-in")

        assert early.status_code == 409
        assert confirmed.json() == {"success": True, "message": "Registration status updated successfully"}
        assert checked_in.json()["success"] is True
        assert again.status_code == 409
        detail = api_client.get(f"/api/registrations/{registration_id}").json()
        assert detail["status"] == "confirmed"
        assert detail["checked_in"] is True

    def test_status_for_unknown_registration(self, api_client: APIClient):
        response = api_client.post(
            f"/api/registrations/{MISSING_ID}/status", {"status": "confirmed"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Failed to update registration status"

    def test_stats(self, api_client: APIClient, registration):
        stats = api_client.get("/api/registrations/stats").json()
        assert stats == {"total": 1, "confirmed": 0, "pending": 1, "cancelled": 0, "checked_in": 0}

    def test_csv_export(self, api_client: APIClient, registration):
        response = api_client.get("/api/registrations/export.csv")

        text = response.content.decode()
        assert response["Content-Type"] == "text/csv; charset=utf-8"
        assert response["Content-Disposition"].startswith('attachment; filename="event-registrations-')
        assert text.splitlines()[0].startswith('"Participant Name","Event"')
        assert registration["confirmation_code"] in text

    def test_fallback_store_serves_api(self, api_client: APIClient, site_settings, event_id, participant):
        site_settings.REMOTE_DATASTORE_ENABLED = False

        response = api_client.post(f"/api/events/{event_id}/register", participant, format="json")

        assert response.json()["success"] is True
        assert len(get_services().registrations.list()) == 1
