from donations.handlers.views import (
    CampaignDetailView,
    CampaignDonateView,
    CampaignListView,
    DonationDetailView,
    DonationListView,
    MpesaPaymentRetryView,
    MpesaPaymentStatusView,
    MpesaPaymentView,
)

__all__ = [
    "DonationListView",
    "DonationDetailView",
    "CampaignListView",
    "CampaignDetailView",
    "CampaignDonateView",
    "MpesaPaymentView",
    "MpesaPaymentStatusView",
    "MpesaPaymentRetryView",
]
