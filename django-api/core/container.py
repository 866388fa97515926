"""Builds the service graph once from settings.

Views and commands reach services through ``get_services()``; tests call
``reset_services()`` or build their own graph with ``build_services``.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings

from content.services.content_service import LeaderService, NewsService, ResourceService
from content.stores.django_store import leader_store, news_store as news_store_factory, resource_store
from content.stores.file_store import LocalFileStore
from core.stores.fallback import FallbackRepository
from core.stores.memory_store import InMemoryRepository
from donations.payments import DarajaGateway, PaymentGateway, PaymentService, SimulatedGateway
from donations.services.donation_service import CampaignService, DonationService
from donations.stores.django_store import campaign_store, donation_store
from events.services.event_service import EventService
from events.services.registration_service import RegistrationService
from events.stores.django_store import event_store, registration_store
from memberships.services.membership_service import MembershipService
from memberships.stores.django_store import membership_store

logger = logging.getLogger(__name__)

DATASTORE_DJANGO = "django"
DATASTORE_MEMORY = "memory"


@dataclass(frozen=True)
class Services:
    events: EventService
    registrations: RegistrationService
    news: NewsService
    leaders: LeaderService
    resources: ResourceService
    campaigns: CampaignService
    donations: DonationService
    memberships: MembershipService
    payments: PaymentService
    files: LocalFileStore


def remote_datastore_available() -> bool:
    return bool(getattr(settings, "REMOTE_DATASTORE_ENABLED", True))


def build_gateway(kind: str) -> PaymentGateway:
    if kind == "daraja":
        return DarajaGateway(
            consumer_key=settings.MPESA_CONSUMER_KEY,
            consumer_secret=settings.MPESA_CONSUMER_SECRET,
            short_code=settings.MPESA_SHORT_CODE,
            passkey=settings.MPESA_PASSKEY,
            callback_url=settings.MPESA_CALLBACK_URL,
            base_url=settings.MPESA_BASE_URL,
        )
    if kind != "simulated":
        raise ValueError(f"unknown payment gateway {kind!r}")
    return SimulatedGateway()


def build_services(datastore: str = DATASTORE_DJANGO, gateway: PaymentGateway | None = None) -> Services:
    if datastore == DATASTORE_MEMORY:
        events_store = InMemoryRepository(newest_first=False)
        registrations_store = InMemoryRepository()
        news_store = InMemoryRepository()
        leaders_store = InMemoryRepository(newest_first=False)
        resources_store = InMemoryRepository()
        campaigns_store = InMemoryRepository()
        donations_store = InMemoryRepository()
        memberships_store = InMemoryRepository()
    elif datastore == DATASTORE_DJANGO:
        events_store = event_store()
        registrations_store = FallbackRepository(
            registration_store("default"),
            registration_store(settings.LOCAL_DATABASE_ALIAS),
            is_primary_available=remote_datastore_available,
            name="registrations",
            order_key=lambda registration: registration.registration_date,
        )
        news_store = news_store_factory()
        leaders_store = leader_store()
        resources_store = resource_store()
        campaigns_store = campaign_store()
        donations_store = donation_store()
        memberships_store = membership_store()
    else:
        raise ValueError(f"unknown datastore {datastore!r}")

    campaigns = CampaignService(campaigns_store)
    logger.info("services built on %s datastore", datastore)
    return Services(
        events=EventService(events_store),
        registrations=RegistrationService(registrations_store),
        news=NewsService(news_store),
        leaders=LeaderService(leaders_store),
        resources=ResourceService(resources_store),
        campaigns=campaigns,
        donations=DonationService(donations_store, campaigns),
        memberships=MembershipService(memberships_store),
        payments=PaymentService(gateway or build_gateway(settings.MPESA_GATEWAY)),
        files=LocalFileStore(settings.FILE_STORE_PATH, quota_bytes=settings.FILE_STORE_QUOTA_BYTES),
    )


@lru_cache(maxsize=1)
def get_services() -> Services:
    return build_services(settings.SITE_DATASTORE)


def reset_services() -> None:
    get_services.cache_clear()
