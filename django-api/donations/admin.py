from django.contrib import admin

from donations.models import Donation, DonationCampaign


@admin.register(Donation)
class DonationAdmin(admin.ModelAdmin):
    list_display = ["donor_name", "amount", "currency", "campaign", "payment_method", "status", "created_at"]
    list_filter = ["status", "payment_method", "campaign"]
    search_fields = ["donor_name", "donor_email", "transaction_id"]


@admin.register(DonationCampaign)
class DonationCampaignAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "target_amount", "current_amount", "is_active", "featured"]
    list_filter = ["category", "is_active", "featured"]
    search_fields = ["title"]
