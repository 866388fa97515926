from django.urls import path

from memberships.handlers import MembershipDetailView, MembershipListView, MembershipReviewView

urlpatterns = [
    path("memberships", MembershipListView.as_view(), name="membership-list"),
    path("memberships/<str:entity_id>", MembershipDetailView.as_view(), name="membership-detail"),
    path(
        "memberships/<str:entity_id>/review",
        MembershipReviewView.as_view(),
        name="membership-review",
    ),
]
