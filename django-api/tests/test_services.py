"""Unit tests for the entity services on in-memory stores.

These test the CRUD and broadcast contract plus per-entity operations.
Run with: pytest tests/test_services.py -v
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from decimal import Decimal

import pytest

from core.domain import EntityNotFoundError, InvalidEntityIdError, Money
from core.stores.memory_store import InMemoryRepository
from donations.services.donation_service import CampaignService, progress_percentage

MISSING_ID = "00000000-0000-4000-8000-000000000000"


class Snapshots:
    def __init__(self) -> None:
        self.calls: list[list] = []

    def __call__(self, snapshot: list) -> None:
        self.calls.append(snapshot)


class TestEntityService:
    """Tests for the shared CRUD contract, exercised through EventService."""

    def test_add_assigns_uuid_and_get_returns_record(self, services, event_data):
        event_id = services.events.add(event_data)

        event = services.events.get(event_id)

        assert str(event.id) == event_id
        assert event.title == "Town Hall"

    def test_add_ignores_client_supplied_id(self, services, event_data):
        event_id = services.events.add({**event_data, "id": MISSING_ID})
        assert event_id != MISSING_ID

    def test_get_invalid_id_raises_error(self, services):
        with pytest.raises(InvalidEntityIdError):
            services.events.get("not-a-uuid")

    def test_get_not_found_raises_error(self, services):
        with pytest.raises(EntityNotFoundError):
            services.events.get(MISSING_ID)

    def test_events_list_in_creation_order(self, services, event_data):
        first = services.events.add({**event_data, "title": "First"})
        second = services.events.add({**event_data, "title": "Second"})
        assert [str(e.id) for e in services.events.list()] == [first, second]

    def test_news_list_newest_first(self, services, future):
        news = {
            "excerpt": "e",
            "content": "c",
            "author": "UFA Team",
            "publish_date": future,
            "category": "announcement",
        }
        services.news.add({**news, "title": "Older"})
        services.news.add({**news, "title": "Newer"})
        assert [n.title for n in services.news.list()] == ["Newer", "Older"]

    def test_update_merges_changes(self, services, event_data):
        event_id = services.events.add(event_data)

        services.events.update(event_id, {"location": "Mombasa"})

        event = services.events.get(event_id)
        assert event.location == "Mombasa"
        assert event.title == "Town Hall"

    def test_update_unknown_id_is_silent_and_does_not_broadcast(self, services):
        listener = Snapshots()
        services.events.subscribe(listener)

        services.events.update(MISSING_ID, {"title": "x"})
        services.events.update("garbage", {"title": "x"})

        assert len(listener.calls) == 1

    def test_delete_removes_record(self, services, event_data):
        event_id = services.events.add(event_data)
        services.events.delete(event_id)
        assert services.events.list() == []

    def test_delete_unknown_id_still_broadcasts(self, services):
        listener = Snapshots()
        services.events.subscribe(listener)

        services.events.delete(MISSING_ID)

        assert listener.calls == [[], []]

    def test_subscribe_replays_and_follows_mutations(self, services, event_data):
        services.events.add(event_data)
        listener = Snapshots()

        unsubscribe = services.events.subscribe(listener)
        services.events.add({**event_data, "title": "Second"})
        unsubscribe()
        services.events.add({**event_data, "title": "Third"})

        assert [len(snapshot) for snapshot in listener.calls] == [1, 2]


class LockstepReads(InMemoryRepository):
    """Makes concurrent readers wait for each other before returning."""

    barrier: threading.Barrier | None = None

    def get(self, entity_id):
        if self.barrier is not None:
            self.barrier.wait()
        return super().get(entity_id)


SERVICE_NAMES = (
    "events",
    "registrations",
    "news",
    "leaders",
    "resources",
    "campaigns",
    "donations",
    "memberships",
)


def sample_record(name: str, when) -> dict:
    """Valid domain-form field values for one record of each collection."""
    return {
        "events": {
            "title": "Town Hall",
            "description": "Quarterly town hall",
            "date": when,
            "location": "Nairobi",
            "type": "meeting",
        },
        "registrations": {
            "event_id": MISSING_ID,
            "event_title": "Town Hall",
            "first_name": "Amina",
            "last_name": "Otieno",
            "email": "amina@example.com",
            "phone": "0712345678",
            "registration_date": when,
            "confirmation_code": "AB12CD",
            "interests": ("youth",),
        },
        "news": {
            "title": "Launch",
            "excerpt": "e",
            "content": "c",
            "author": "UFA Team",
            "publish_date": when,
            "category": "announcement",
        },
        "leaders": {
            "name": "John Mwangi",
            "position": "Chairman",
            "email": "john@ufa.org",
            "phone": "+254700000001",
            "social_links": {"twitter": "https://twitter.com/john"},
        },
        "resources": {
            "title": "Constitution",
            "description": "Governing documents",
            "type": "document",
            "category": "governance",
            "url": "#",
            "publish_date": when,
            "uploaded_by": "UFA Admin",
        },
        "campaigns": {
            "title": "Youth Fund",
            "description": "Scholarships",
            "target_amount": Money(Decimal("1000")),
            "current_amount": Money(Decimal("0")),
            "start_date": when,
            "category": "education",
        },
        "donations": {
            "amount": Money(Decimal("250")),
            "donor_name": "Wanjiru",
            "donor_email": "donor@example.com",
            "payment_method": "card",
            "status": "completed",
            "created_at": when,
        },
        "memberships": {
            "first_name": "Kevin",
            "last_name": "Kamau",
            "email": "kevin@example.com",
            "phone": "0722000000",
            "date_of_birth": date(1995, 4, 1),
            "gender": "male",
            "county": "Kiambu",
            "constituency": "Thika Town",
            "occupation": "Teacher",
            "motivation": "Serve my community",
            "how_did_you_hear": "Friend",
            "submitted_at": when,
        },
    }[name]


@pytest.mark.parametrize("name", SERVICE_NAMES)
class TestEveryEntityService:
    """The shared contract holds for every collection, not just events."""

    def test_subscribe_replays_empty_collection_once(self, services, name):
        listener = Snapshots()

        getattr(services, name).subscribe(listener)

        assert listener.calls == [[]]

    def test_add_then_get_preserves_fields(self, services, future, name):
        service = getattr(services, name)
        data = sample_record(name, future)

        record = service.get(service.add(data))

        assert {field: getattr(record, field) for field in data} == data

    def test_second_delete_is_harmless(self, services, future, name):
        service = getattr(services, name)
        record_id = service.add(sample_record(name, future))

        service.delete(record_id)
        service.delete(record_id)

        assert service.list() == []

    def test_unsubscribe_stops_delivery(self, services, future, name):
        service = getattr(services, name)
        listener = Snapshots()

        unsubscribe = service.subscribe(listener)
        service.add(sample_record(name, future))
        unsubscribe()
        service.add(sample_record(name, future))

        assert [len(snapshot) for snapshot in listener.calls] == [0, 1]


class TestEventService:
    def test_upcoming_skips_past_and_sorts_by_date(self, services, event_data, future):
        services.events.add({**event_data, "title": "Later", "date": future + timedelta(days=3)})
        services.events.add({**event_data, "title": "Past", "date": future - timedelta(days=30)})
        services.events.add({**event_data, "title": "Sooner", "date": future})

        upcoming = services.events.upcoming(count=5)

        assert [e.title for e in upcoming] == ["Sooner", "Later"]

    def test_upcoming_limits_count(self, services, event_data, future):
        for day in range(4):
            services.events.add({**event_data, "date": future + timedelta(days=day)})
        assert len(services.events.upcoming(count=2)) == 2


class TestContentServices:
    def test_latest_news_returns_most_recent(self, services, future):
        for title in ("one", "two", "three"):
            services.news.add(
                {
                    "title": title,
                    "excerpt": "e",
                    "content": "c",
                    "author": "a",
                    "publish_date": future,
                    "category": "report",
                }
            )
        assert [n.title for n in services.news.latest(2)] == ["three", "two"]

    def test_leader_social_links_drop_empty_urls(self, services):
        leader_id = services.leaders.add(
            {
                "name": "Mary Wanjiku",
                "position": "Secretary",
                "email": "mary@ufa.org",
                "phone": "+254700000002",
                "social_links": {"linkedin": "https://linkedin.com/in/mary", "twitter": ""},
            }
        )
        assert services.leaders.get(leader_id).social_links == {"linkedin": "https://linkedin.com/in/mary"}

    def test_record_download_counts(self, services, future):
        resource_id = services.resources.add(
            {
                "title": "Constitution",
                "description": "Governing documents",
                "type": "document",
                "category": "governance",
                "url": "#",
                "publish_date": future,
                "uploaded_by": "UFA Admin",
            }
        )
        services.resources.record_download(resource_id)
        assert services.resources.record_download(resource_id).download_count == 2

    def test_concurrent_downloads_are_all_counted(self, services, future):
        resource_id = services.resources.add(sample_record("resources", future))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: services.resources.record_download(resource_id), range(25)))

        assert services.resources.get(resource_id).download_count == 25


@pytest.fixture
def campaign_id(services, future):
    return services.campaigns.add(
        {
            "title": "Youth Fund",
            "description": "Scholarships",
            "target_amount": Decimal("1000"),
            "current_amount": Decimal("0"),
            "start_date": future,
            "category": "education",
            "featured": True,
        }
    )


class TestDonations:
    def test_progress_percentage(self):
        assert progress_percentage(250, 1000) == 25.0
        assert progress_percentage(500, 1000) == 50.0
        assert progress_percentage(1500, 1000) == 100.0
        assert progress_percentage(10, 0) == 0.0
        assert progress_percentage(10, -5) == 0.0

    def test_submit_donation_raises_campaign_total(self, services, campaign_id):
        donation = services.donations.submit_donation(
            campaign_id,
            Decimal("250"),
            donor_email="donor@example.com",
            payment_method="mobile_money",
            donor_name="Wanjiru",
        )

        campaign = services.campaigns.get(campaign_id)
        assert donation.campaign == "Youth Fund"
        assert donation.status == "completed"
        assert donation.transaction_id.startswith("TXN_")
        assert campaign.current_amount == Money(Decimal("250"))
        assert services.campaigns.progress(campaign) == 25.0

    def test_concurrent_gifts_are_all_counted(self, future):
        store = LockstepReads()
        campaigns = CampaignService(store)
        campaign_id = campaigns.add(sample_record("campaigns", future))
        store.barrier = threading.Barrier(2, timeout=2)

        givers = [
            threading.Thread(target=campaigns.add_to_amount, args=(campaign_id, Money(Decimal("100"))))
            for _ in range(2)
        ]
        for giver in givers:
            giver.start()
        for giver in givers:
            giver.join()
        store.barrier = None

        assert campaigns.get(campaign_id).current_amount == Money(Decimal("200"))

    def test_add_to_unknown_campaign_is_ignored(self, services):
        services.campaigns.add_to_amount(MISSING_ID, Money(Decimal("100")))
        assert services.campaigns.list() == []

    def test_anonymous_donor_name_is_hidden(self, services, campaign_id):
        donation = services.donations.submit_donation(
            campaign_id,
            Decimal("100"),
            donor_email="donor@example.com",
            payment_method="card",
            donor_name="Wanjiru",
            is_anonymous=True,
        )
        assert donation.donor_name == "Anonymous"

    def test_submit_to_unknown_campaign_raises(self, services):
        with pytest.raises(EntityNotFoundError):
            services.donations.submit_donation(
                MISSING_ID, Decimal("100"), donor_email="d@example.com", payment_method="card"
            )

    def test_featured_and_active_campaigns(self, services, campaign_id, future):
        services.campaigns.add(
            {
                "title": "Closed",
                "description": "d",
                "target_amount": Decimal("10"),
                "current_amount": Decimal("0"),
                "start_date": future,
                "category": "general",
                "is_active": False,
                "featured": True,
            }
        )
        assert [c.title for c in services.campaigns.featured()] == ["Youth Fund"]
        assert [c.title for c in services.campaigns.active()] == ["Youth Fund"]


class TestMemberships:
    @pytest.fixture
    def application(self):
        return {
            "first_name": "Kevin",
            "last_name": "Kamau",
            "email": "kevin@example.com",
            "phone": "0722000000",
            "date_of_birth": "1995-04-01",
            "gender": "male",
            "county": "Kiambu",
            "constituency": "Thika Town",
            "occupation": "Teacher",
            "motivation": "Serve my community",
            "how_did_you_hear": "Friend",
            "interests": ["education"],
        }

    def test_apply_starts_pending(self, services, application):
        membership_id = services.memberships.apply(application)
        membership = services.memberships.get(membership_id)
        assert membership.status == "pending"
        assert membership.interests == ("education",)
        assert services.memberships.pending() == [membership]

    def test_review_records_reviewer(self, services, application):
        membership_id = services.memberships.apply(application)

        reviewed = services.memberships.review(membership_id, "approved", "admin@ufa.org", "Welcome")

        assert reviewed.status == "approved"
        assert reviewed.reviewed_by == "admin@ufa.org"
        assert reviewed.reviewed_at is not None
        assert services.memberships.pending() == []
