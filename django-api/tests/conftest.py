"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone

import pytest
from rest_framework.test import APIClient

from core.container import DATASTORE_MEMORY, build_services, reset_services
from donations.payments import SimulatedGateway


class FakeClock:
    """Monotonic stand-in advanced by hand."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def site_settings(settings, tmp_path):
    """Fresh service graph per test, with files kept under tmp_path."""
    settings.FILE_STORE_PATH = tmp_path / "files.json"
    settings.MPESA_GATEWAY = "simulated"
    settings.REMOTE_DATASTORE_ENABLED = True
    reset_services()
    yield settings
    reset_services()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def services(clock):
    """Service graph on in-memory stores with a simulated gateway."""
    return build_services(DATASTORE_MEMORY, gateway=SimulatedGateway(clock=clock))


@pytest.fixture
def future():
    return datetime.now(dt_timezone.utc).replace(microsecond=0) + timedelta(days=7)


@pytest.fixture
def event_data(future):
    return {
        "title": "Town Hall",
        "description": "Quarterly town hall with members.",
        "date": future,
        "location": "Nairobi",
        "type": "meeting",
        "registration_required": True,
    }


@pytest.fixture
def participant():
    return {
        "first_name": "Amina",
        "last_name": "Otieno",
        "email": "amina@example.com",
        "phone": "0712345678",
        "county": "Nairobi",
        "interests": ["youth", "policy"],
    }
