"""Membership applications and their review."""

import logging

from django.utils import timezone

from core.services.entity_service import EntityService
from core.stores.interfaces import Repository
from memberships.domain import MEMBERSHIP_PENDING, Membership

logger = logging.getLogger(__name__)


class MembershipService(EntityService[Membership]):
    entity_type = Membership
    topic = "memberships"
    coercions = {"interests": tuple, "volunteer_areas": tuple}

    def __init__(self, store: Repository[Membership]) -> None:
        super().__init__(store)

    def apply(self, data: dict) -> str:
        """Store a new application as pending."""
        return self.add({**data, "status": MEMBERSHIP_PENDING, "submitted_at": timezone.now()})

    def review(self, membership_id: str, status: str, reviewer: str, notes: str = "") -> Membership:
        """Approve or reject an application.

        Raises:
            InvalidEntityIdError: If the membership_id is not a valid UUID.
            EntityNotFoundError: If the application does not exist.
        """
        membership = self.get(membership_id)
        self.update(
            membership.id,
            {
                "status": status,
                "reviewed_at": timezone.now(),
                "reviewed_by": reviewer,
                "notes": notes,
            },
        )
        logger.info("membership %s %s by %s", membership.id, status, reviewer)
        return self.get(membership.id)

    def pending(self) -> list[Membership]:
        return [m for m in self.list() if m.status == MEMBERSHIP_PENDING]
