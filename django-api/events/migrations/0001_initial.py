import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("date", models.DateTimeField()),
                ("location", models.CharField(max_length=255)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("rally", "Rally"),
                            ("meeting", "Meeting"),
                            ("webinar", "Webinar"),
                            ("fundraiser", "Fundraiser"),
                        ],
                        max_length=20,
                    ),
                ),
                ("image", models.URLField(blank=True, max_length=500, null=True)),
                ("registration_required", models.BooleanField(default=False)),
                ("duration", models.FloatField(blank=True, help_text="Hours", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [models.Index(fields=["date"], name="event_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="EventRegistration",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("event_id", models.CharField(max_length=64)),
                ("event_title", models.CharField(max_length=255)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(max_length=20)),
                ("id_number", models.CharField(blank=True, default="", max_length=20)),
                ("county", models.CharField(blank=True, default="", max_length=100)),
                ("constituency", models.CharField(blank=True, default="", max_length=100)),
                ("interests", models.JSONField(blank=True, default=list)),
                ("additional_info", models.TextField(blank=True, default="")),
                ("registration_date", models.DateTimeField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("confirmation_code", models.CharField(max_length=12)),
                ("checked_in", models.BooleanField(default=False)),
                ("checked_in_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-registration_date"],
                "indexes": [
                    models.Index(fields=["event_id"], name="registration_event_idx"),
                    models.Index(fields=["email"], name="registration_email_idx"),
                    models.Index(fields=["status"], name="registration_status_idx"),
                    models.Index(fields=["registration_date"], name="registration_date_idx"),
                ],
            },
        ),
    ]
