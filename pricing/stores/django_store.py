"""Django ORM implementation of the PricingStore."""

import logging
from datetime import datetime

from django.db import DatabaseError, transaction

from pricing import models
from pricing.domain import (
    Event,
    EventId,
    Money,
    PricingLogEntry,
    PricingMode,
    PricingUpdate,
)
from pricing.domain.errors import PersistenceFailureError
from pricing.stores.interfaces import PricingStore

logger = logging.getLogger(__name__)


def _money_or_none(value) -> Money | None:
    return None if value is None else Money.of(value)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        base_price=Money.of(row.base_price),
        total_seats=row.total_seats,
        available_seats=row.available_seats,
        pricing_mode=PricingMode(row.pricing_mode),
        min_price=_money_or_none(row.min_price),
        max_price=_money_or_none(row.max_price),
        last_price_update=row.last_price_update,
        start_date=row.start_date,
        created_at=row.created_at,
    )


def _to_log_entry(row: models.PricingLog) -> PricingLogEntry:
    return PricingLogEntry(
        event_id=EventId(row.event_id),
        old_price=Money.of(row.old_price),
        new_price=Money.of(row.new_price),
        reason=row.reason,
        created_at=row.created_at,
    )


class DjangoPricingStore(PricingStore):
    """PostgreSQL-backed pricing store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.using(self._using).filter(pk=event_id.value).first()
        return None if row is None else _to_event(row)

    def get_confirmed_booking_times(self, event_id: EventId) -> list[datetime]:
        return list(
            models.Booking.objects.using(self._using)
            .filter(event_id=event_id.value, status=models.Booking.Status.CONFIRMED)
            .order_by("-created_at")
            .values_list("created_at", flat=True)
        )

    def get_pricing_history(self, event_id: EventId, limit: int) -> list[PricingLogEntry]:
        rows = (
            models.PricingLog.objects.using(self._using)
            .filter(event_id=event_id.value)
            .order_by("-created_at")[:limit]
        )
        return [_to_log_entry(row) for row in rows]

    def apply_update(self, event_id: EventId, update: PricingUpdate) -> Event | None:
        try:
            with transaction.atomic(using=self._using):
                row = (
                    models.Event.objects.using(self._using)
                    .select_for_update()
                    .filter(pk=event_id.value)
                    .first()
                )
                if row is None:
                    return None

                fields = ["last_price_update", "updated_at"]
                row.last_price_update = update.changed_at

                if update.price_change is not None:
                    models.PricingLog.objects.using(self._using).create(
                        event=row,
                        old_price=row.base_price,
                        new_price=update.price_change.new_price.amount,
                        reason=update.price_change.reason,
                        created_at=update.changed_at,
                    )
                    row.base_price = update.price_change.new_price.amount
                    fields.append("base_price")

                if update.pricing_mode is not None:
                    row.pricing_mode = update.pricing_mode.value
                    fields.append("pricing_mode")

                if update.price_band is not None:
                    row.min_price = update.price_band.min_price.amount
                    row.max_price = update.price_band.max_price.amount
                    fields.extend(["min_price", "max_price"])

                row.save(using=self._using, update_fields=fields)
        except DatabaseError as exc:
            logger.exception("Pricing update for event %s rolled back", event_id)
            raise PersistenceFailureError(str(event_id)) from exc

        return _to_event(row)
