from django.contrib import admin

from memberships.models import Membership


@admin.register(Membership)
class MembershipAdmin(admin.ModelAdmin):
    list_display = ["first_name", "last_name", "county", "status", "is_volunteer", "submitted_at"]
    list_filter = ["status", "county", "is_volunteer"]
    search_fields = ["first_name", "last_name", "email", "phone"]
    readonly_fields = ["submitted_at", "reviewed_at", "reviewed_by", "created_at", "updated_at"]
    fieldsets = (
        ("Applicant", {"fields": ("first_name", "last_name", "email", "phone", "date_of_birth", "gender")}),
        ("Location", {"fields": ("county", "constituency", "ward")}),
        (
            "Background",
            {"fields": ("occupation", "organization", "interests", "motivation", "how_did_you_hear")},
        ),
        ("Volunteering", {"fields": ("is_volunteer", "volunteer_areas")}),
        ("Review", {"fields": ("status", "submitted_at", "reviewed_at", "reviewed_by", "notes")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )
