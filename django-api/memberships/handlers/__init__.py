from memberships.handlers.views import MembershipDetailView, MembershipListView, MembershipReviewView

__all__ = ["MembershipListView", "MembershipDetailView", "MembershipReviewView"]
