import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("base_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("total_seats", models.PositiveIntegerField()),
                ("available_seats", models.PositiveIntegerField()),
                (
                    "pricing_mode",
                    models.CharField(
                        choices=[("MANUAL", "Manual"), ("AUTOMATIC", "Automatic")],
                        default="MANUAL",
                        max_length=16,
                    ),
                ),
                ("min_price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("max_price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("last_price_update", models.DateTimeField(blank=True, null=True)),
                ("start_date", models.DateTimeField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="pricing_eve_created_6b0f2a_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("available_seats__lte", models.F("total_seats"))),
                        name="event_available_seats_lte_total",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("CONFIRMED", "Confirmed"),
                            ("CANCELLED", "Cancelled"),
                            ("FLAGGED", "Flagged"),
                            ("PENDING", "Pending"),
                        ],
                        default="PENDING",
                        max_length=16,
                    ),
                ),
                ("price_paid", models.DecimalField(decimal_places=2, max_digits=10)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="pricing.event",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["event", "status", "created_at"], name="pricing_boo_event_i_3c9d1e_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="PricingLog",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("old_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("new_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("reason", models.TextField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pricing_logs",
                        to="pricing.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["event", "-created_at"], name="pricing_pri_event_i_8a41f7_idx")
                ],
            },
        ),
    ]
