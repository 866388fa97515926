from memberships.domain.models import (
    GENDERS,
    MEMBERSHIP_APPROVED,
    MEMBERSHIP_PENDING,
    MEMBERSHIP_REJECTED,
    MEMBERSHIP_STATUSES,
    Membership,
)

__all__ = [
    "Membership",
    "GENDERS",
    "MEMBERSHIP_STATUSES",
    "MEMBERSHIP_PENDING",
    "MEMBERSHIP_APPROVED",
    "MEMBERSHIP_REJECTED",
]
