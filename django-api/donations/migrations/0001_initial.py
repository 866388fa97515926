import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Donation",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("currency", models.CharField(default="KES", max_length=3)),
                ("donor_name", models.CharField(max_length=255)),
                ("donor_email", models.EmailField(max_length=254)),
                ("donor_phone", models.CharField(blank=True, max_length=20, null=True)),
                ("is_anonymous", models.BooleanField(default=False)),
                ("campaign", models.CharField(blank=True, max_length=255, null=True)),
                ("message", models.TextField(blank=True, null=True)),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("card", "Card"),
                            ("mobile_money", "Mobile money"),
                            ("bank_transfer", "Bank transfer"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("completed", "Completed"),
                            ("failed", "Failed"),
                            ("refunded", "Refunded"),
                        ],
                        max_length=20,
                    ),
                ),
                ("transaction_id", models.CharField(blank=True, max_length=64, null=True)),
                ("created_at", models.DateTimeField()),
                ("processed_at", models.DateTimeField(blank=True, null=True)),
                ("stored_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-stored_at"],
                "indexes": [
                    models.Index(fields=["campaign"], name="donation_campaign_idx"),
                    models.Index(fields=["status"], name="donation_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="DonationCampaign",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("target_amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("current_amount", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("featured", models.BooleanField(default=False)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("education", "Education"),
                            ("healthcare", "Healthcare"),
                            ("infrastructure", "Infrastructure"),
                            ("emergency", "Emergency"),
                            ("general", "General"),
                        ],
                        max_length=20,
                    ),
                ),
                ("image", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["-created_at"]},
        ),
    ]
