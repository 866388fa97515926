"""HTTP handlers for membership applications."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.container import get_services
from core.handlers.views import EntityDetailView, EntityListView
from memberships.handlers.serializers import MembershipReviewSerializer, MembershipSerializer


class MembershipListView(EntityListView):
    """Handler for GET/POST /api/memberships

    New applications always start out pending.
    """

    service_name = "memberships"
    serializer_class = MembershipSerializer

    def get(self, request: Request) -> Response:
        if request.query_params.get("status") == "pending":
            return Response(self.serializer_class(self.service.pending(), many=True).data)
        return super().get(request)

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        membership_id = self.service.apply(serializer.validated_data)
        created = self.service.get(membership_id)
        return Response(self.serializer_class(created).data, status=status.HTTP_201_CREATED)


class MembershipDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/memberships/{entity_id}"""

    service_name = "memberships"
    serializer_class = MembershipSerializer


class MembershipReviewView(APIView):
    """Handler for POST /api/memberships/{entity_id}/review"""

    def post(self, request: Request, entity_id: str) -> Response:
        serializer = MembershipReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        membership = get_services().memberships.review(entity_id, **serializer.validated_data)
        return Response(MembershipSerializer(membership).data)
