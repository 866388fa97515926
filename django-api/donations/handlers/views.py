"""HTTP handlers for donations, campaigns and M-Pesa payments."""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.container import get_services
from core.handlers.views import EntityDetailView, EntityListView
from donations.handlers.serializers import (
    DonationCampaignSerializer,
    DonationSerializer,
    DonationSubmissionSerializer,
    PaymentRequestSerializer,
)
from donations.payments import PaymentStatus

logger = logging.getLogger(__name__)


class DonationListView(EntityListView):
    """Handler for GET/POST /api/donations"""

    service_name = "donations"
    serializer_class = DonationSerializer


class DonationDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/donations/{entity_id}"""

    service_name = "donations"
    serializer_class = DonationSerializer


class CampaignListView(EntityListView):
    """Handler for GET/POST /api/campaigns

    ``?featured=true`` or ``?active=true`` narrows the list.
    """

    service_name = "campaigns"
    serializer_class = DonationCampaignSerializer

    def get(self, request: Request) -> Response:
        params = request.query_params
        if params.get("featured") == "true":
            return Response(self.serializer_class(self.service.featured(), many=True).data)
        if params.get("active") == "true":
            return Response(self.serializer_class(self.service.active(), many=True).data)
        return super().get(request)


class CampaignDetailView(EntityDetailView):
    """Handler for GET/PUT/PATCH/DELETE /api/campaigns/{entity_id}"""

    service_name = "campaigns"
    serializer_class = DonationCampaignSerializer


class CampaignDonateView(APIView):
    """Handler for POST /api/campaigns/{entity_id}/donate"""

    def post(self, request: Request, entity_id: str) -> Response:
        serializer = DonationSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        donation = get_services().donations.submit_donation(entity_id, **serializer.validated_data)
        return Response(DonationSerializer(donation).data, status=status.HTTP_201_CREATED)


class MpesaPaymentView(APIView):
    """Handler for POST /api/payments/mpesa

    Pushes a payment prompt to the payer's phone. The response carries the
    checkout request id to poll.
    """

    def post(self, request: Request) -> Response:
        serializer = PaymentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        flow = get_services().payments.start(**serializer.validated_data)
        if flow.status is PaymentStatus.INITIATED:
            return Response(flow.as_dict(), status=status.HTTP_202_ACCEPTED)
        if flow.status is PaymentStatus.IDLE:
            return Response(flow.as_dict(), status=status.HTTP_400_BAD_REQUEST)
        logger.warning("STK push failed: %s", flow.error)
        return Response(flow.as_dict(), status=status.HTTP_502_BAD_GATEWAY)


class MpesaPaymentStatusView(APIView):
    """Handler for GET/DELETE /api/payments/mpesa/{checkout_request_id}

    DELETE dismisses the flow once the payer has seen the outcome.
    """

    def get(self, request: Request, checkout_request_id: str) -> Response:
        flow = get_services().payments.poll(checkout_request_id)
        return Response(flow.as_dict())

    def delete(self, request: Request, checkout_request_id: str) -> Response:
        get_services().payments.dismiss(checkout_request_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MpesaPaymentRetryView(APIView):
    """Handler for POST /api/payments/mpesa/{checkout_request_id}/retry"""

    def post(self, request: Request, checkout_request_id: str) -> Response:
        payments = get_services().payments
        flow = payments.poll(checkout_request_id)
        if flow.status is not PaymentStatus.FAILED:
            return Response(
                {"success": False, "message": "Only failed payments can be retried"},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(payments.retry(checkout_request_id).as_dict())
