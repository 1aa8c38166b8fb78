"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.utils import timezone

from pricing.domain.value_objects import PricingMode


class Event(models.Model):
    """Persistence model for events and their pricing fields."""

    PRICING_MODE_CHOICES = [(mode.value, mode.name.title()) for mode in PricingMode]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    base_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_seats = models.PositiveIntegerField()
    available_seats = models.PositiveIntegerField()
    pricing_mode = models.CharField(
        max_length=16, choices=PRICING_MODE_CHOICES, default=PricingMode.MANUAL.value
    )
    min_price = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    max_price = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    last_price_update = models.DateTimeField(blank=True, null=True)
    start_date = models.DateTimeField()
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="pricing_eve_created_6b0f2a_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_seats__lte=models.F("total_seats")),
                name="event_available_seats_lte_total",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Booking(models.Model):
    """Persistence model for bookings, the evidence of demand."""

    class Status(models.TextChoices):
        CONFIRMED = "CONFIRMED"
        CANCELLED = "CANCELLED"
        FLAGGED = "FLAGGED"
        PENDING = "PENDING"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="bookings")
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    price_paid = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        indexes = [
            models.Index(
                fields=["event", "status", "created_at"], name="pricing_boo_event_i_3c9d1e_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.event.name} - {self.status}"


class PricingLog(models.Model):
    """Append-only audit trail of accepted price changes."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="pricing_logs")
    old_price = models.DecimalField(max_digits=10, decimal_places=2)
    new_price = models.DecimalField(max_digits=10, decimal_places=2)
    reason = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "-created_at"], name="pricing_pri_event_i_8a41f7_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.old_price} -> {self.new_price}"
