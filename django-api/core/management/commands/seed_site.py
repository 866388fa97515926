"""Load sample events, news, leaders, resources and a campaign.

Each collection is seeded only while it is empty, so the command can run
on every deploy.
"""

import logging
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.utils import timezone

from core.container import get_services

logger = logging.getLogger(__name__)


def sample_events(now):
    return [
        {
            "title": "UFA Annual General Meeting",
            "description": "Join us for our annual general meeting to discuss our progress and future plans.",
            "date": now + timedelta(days=30),
            "location": "Nairobi, Kenya",
            "type": "meeting",
            "registration_required": True,
        },
        {
            "title": "Community Outreach Program",
            "description": "Volunteer with us to make a difference in local communities.",
            "date": now + timedelta(days=35),
            "location": "Various Locations",
            "type": "rally",
            "registration_required": False,
        },
        {
            "title": "Youth Leadership Summit",
            "description": "Empowering the next generation of Kenyan leaders.",
            "date": now + timedelta(days=40),
            "location": "KICC, Nairobi",
            "type": "rally",
            "registration_required": True,
            "duration": 6,
        },
    ]


def sample_news(now):
    return [
        {
            "title": "UFA Launches New Community Initiative",
            "excerpt": "A new outreach program aimed at supporting local families.",
            "content": "Full article content here...",
            "author": "UFA Team",
            "publish_date": now - timedelta(days=14),
            "category": "announcement",
        },
        {
            "title": "Annual Report Released",
            "excerpt": "Our annual report shows the impact we have made in communities across Kenya.",
            "content": "Full article content here...",
            "author": "UFA Board",
            "publish_date": now - timedelta(days=7),
            "category": "report",
        },
    ]


SAMPLE_LEADERS = [
    {
        "name": "John Mwangi",
        "position": "Chairman",
        "email": "john.mwangi@ufa.org",
        "phone": "+254 700 000 001",
        "social_links": {
            "linkedin": "https://linkedin.com/in/johnmwangi",
            "twitter": "https://twitter.com/johnmwangi",
        },
    },
    {
        "name": "Mary Wanjiku",
        "position": "Secretary",
        "email": "mary.wanjiku@ufa.org",
        "phone": "+254 700 000 002",
        "social_links": {"linkedin": "https://linkedin.com/in/marywanjiku"},
    },
]


def sample_resources(now):
    return [
        {
            "title": "UFA Constitution",
            "description": "Our official constitution and governing documents.",
            "type": "document",
            "category": "governance",
            "url": "#",
            "publish_date": now,
            "uploaded_by": "UFA Admin",
        },
    ]


def sample_campaigns(now):
    return [
        {
            "title": "Youth Empowerment Fund",
            "description": "Scholarships and mentorship for young leaders.",
            "target_amount": Decimal("500000"),
            "current_amount": Decimal("0"),
            "start_date": now,
            "category": "education",
            "featured": True,
        },
    ]


class Command(BaseCommand):
    help = "Seed empty collections with sample site content"

    def handle(self, *args, **options):
        services = get_services()
        now = timezone.now()
        collections = [
            ("events", services.events, sample_events(now)),
            ("news", services.news, sample_news(now)),
            ("leaders", services.leaders, SAMPLE_LEADERS),
            ("resources", services.resources, sample_resources(now)),
            ("campaigns", services.campaigns, sample_campaigns(now)),
        ]
        for name, service, records in collections:
            if service.list():
                self.stdout.write(f"{name}: already populated, skipped")
                continue
            for record in records:
                service.add(record)
            logger.info("seeded %d %s", len(records), name)
            self.stdout.write(self.style.SUCCESS(f"{name}: added {len(records)}"))
