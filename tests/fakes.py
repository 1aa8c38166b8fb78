"""In-memory collaborators for service tests."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from pricing.domain import (
    Confidence,
    DemandSnapshot,
    Event,
    EventId,
    Money,
    OracleScore,
    PricingLogEntry,
    PricingMode,
    PricingUpdate,
)
from pricing.domain.errors import OracleUnavailableError, PersistenceFailureError
from pricing.oracles.interfaces import PriceOracle
from pricing.stores.interfaces import PricingStore

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_event(**overrides) -> Event:
    fields = {
        "id": EventId(uuid4()),
        "name": "Summer Jazz Night",
        "base_price": Money(Decimal("100.00")),
        "total_seats": 200,
        "available_seats": 150,
        "pricing_mode": PricingMode.MANUAL,
        "min_price": None,
        "max_price": None,
        "last_price_update": None,
        "start_date": NOW + timedelta(days=10),
        "created_at": NOW - timedelta(days=5),
    }
    fields.update(overrides)
    return Event(**fields)


class InMemoryPricingStore(PricingStore):
    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.bookings: list[tuple[EventId, str, datetime]] = []
        self.logs: list[PricingLogEntry] = []
        self.fail_writes = False

    def add_event(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def add_booking(self, event: Event, created_at: datetime, status: str = "CONFIRMED") -> None:
        self.bookings.append((event.id, status, created_at))

    def get_event(self, event_id):
        return self.events.get(event_id)

    def get_confirmed_booking_times(self, event_id):
        return sorted(
            (created for eid, status, created in self.bookings if eid == event_id and status == "CONFIRMED"),
            reverse=True,
        )

    def get_pricing_history(self, event_id, limit):
        entries = [entry for entry in self.logs if entry.event_id == event_id]
        return sorted(entries, key=lambda entry: entry.created_at, reverse=True)[:limit]

    def logs_for(self, event: Event) -> list[PricingLogEntry]:
        return [entry for entry in self.logs if entry.event_id == event.id]

    def apply_update(self, event_id, update: PricingUpdate):
        event = self.events.get(event_id)
        if event is None:
            return None
        if self.fail_writes:
            raise PersistenceFailureError(str(event_id))

        changes = {"last_price_update": update.changed_at}
        if update.price_change is not None:
            self.logs.append(
                PricingLogEntry(
                    event_id=event_id,
                    old_price=event.base_price,
                    new_price=update.price_change.new_price,
                    reason=update.price_change.reason,
                    created_at=update.changed_at,
                )
            )
            changes["base_price"] = update.price_change.new_price
        if update.pricing_mode is not None:
            changes["pricing_mode"] = update.pricing_mode
        if update.price_band is not None:
            changes["min_price"] = update.price_band.min_price
            changes["max_price"] = update.price_band.max_price

        self.events[event_id] = replace(event, **changes)
        return self.events[event_id]


class StubOracle(PriceOracle):
    """Returns a fixed score, or raises when built with an error."""

    def __init__(
        self,
        price: str = "130.00",
        confidence: float = 0.85,
        reasoning: str = "Strong demand",
        error: Exception | None = None,
    ) -> None:
        self.error = error
        self.result = OracleScore(
            suggested_price=Money.of(price),
            confidence=Confidence(confidence),
            reasoning=reasoning,
        )
        self.snapshots: list[DemandSnapshot] = []

    def score(self, snapshot: DemandSnapshot) -> OracleScore:
        self.snapshots.append(snapshot)
        if self.error is not None:
            raise self.error
        return self.result


def unavailable_oracle(reason: str = "ReadTimeout: timed out") -> StubOracle:
    return StubOracle(error=OracleUnavailableError(reason))
