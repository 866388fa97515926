from django.urls import path

from donations.handlers import (
    CampaignDetailView,
    CampaignDonateView,
    CampaignListView,
    DonationDetailView,
    DonationListView,
    MpesaPaymentRetryView,
    MpesaPaymentStatusView,
    MpesaPaymentView,
)

urlpatterns = [
    path("donations", DonationListView.as_view(), name="donation-list"),
    path("donations/<str:entity_id>", DonationDetailView.as_view(), name="donation-detail"),
    path("campaigns", CampaignListView.as_view(), name="campaign-list"),
    path("campaigns/<str:entity_id>", CampaignDetailView.as_view(), name="campaign-detail"),
    path("campaigns/<str:entity_id>/donate", CampaignDonateView.as_view(), name="campaign-donate"),
    path("payments/mpesa", MpesaPaymentView.as_view(), name="mpesa-payment"),
    path(
        "payments/mpesa/<str:checkout_request_id>",
        MpesaPaymentStatusView.as_view(),
        name="mpesa-payment-status",
    ),
    path(
        "payments/mpesa/<str:checkout_request_id>/retry",
        MpesaPaymentRetryView.as_view(),
        name="mpesa-payment-retry",
    ),
]
