"""Domain models representing persisted and computed pricing state.

These are pure domain objects with no persistence rules.
Django ORM models are in pricing/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from pricing.domain.value_objects import Confidence, EventId, Money, PriceBand, PricingMode


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event's pricing state."""

    id: EventId
    name: str
    base_price: Money
    total_seats: int
    available_seats: int
    pricing_mode: PricingMode
    min_price: Money | None
    max_price: Money | None
    last_price_update: datetime | None
    start_date: datetime
    created_at: datetime

    @property
    def booked_seats(self) -> int:
        return self.total_seats - self.available_seats

    @property
    def price_band(self) -> PriceBand | None:
        """The band enforced in automatic mode, if both bounds are set."""
        if self.min_price is None or self.max_price is None:
            return None
        return PriceBand(min_price=self.min_price, max_price=self.max_price)


@dataclass(frozen=True)
class PricingLogEntry:
    """Immutable audit record of one accepted price change."""

    event_id: EventId
    old_price: Money
    new_price: Money
    reason: str
    created_at: datetime


@dataclass(frozen=True)
class DemandSnapshot:
    """Demand signals for one event at one point in time."""

    event_id: EventId
    current_price: Money
    total_seats: int
    available_seats: int
    booked_seats: int
    occupancy_rate: float
    booking_velocity: float
    recent_bookings: int
    days_remaining: float
    time_remaining: timedelta
    pricing_history: tuple[PricingLogEntry, ...] = ()


@dataclass(frozen=True)
class DemandSignals:
    """Subset of the snapshot carried along with a suggestion."""

    booking_velocity: float
    available_seats: int
    total_seats: int
    occupancy_rate: float
    time_remaining: timedelta
    recent_bookings: int

    @classmethod
    def from_snapshot(cls, snapshot: DemandSnapshot) -> "DemandSignals":
        return cls(
            booking_velocity=snapshot.booking_velocity,
            available_seats=snapshot.available_seats,
            total_seats=snapshot.total_seats,
            occupancy_rate=snapshot.occupancy_rate,
            time_remaining=snapshot.time_remaining,
            recent_bookings=snapshot.recent_bookings,
        )


@dataclass(frozen=True)
class OracleScore:
    """What an oracle returns: a price, how sure it is, and why."""

    suggested_price: Money
    confidence: Confidence
    reasoning: str

    def __post_init__(self) -> None:
        if not self.suggested_price.is_positive:
            raise ValueError("Suggested price must be greater than zero")


@dataclass(frozen=True)
class PricingSuggestion:
    """Ephemeral price recommendation. Never stored as-is."""

    event_id: EventId
    current_price: Money
    suggested_price: Money
    confidence: Confidence
    reasoning: str
    demand_signals: DemandSignals


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of evaluating a suggestion."""

    applied: bool
    suggestion: PricingSuggestion
    old_price: Money | None = None
    new_price: Money | None = None


@dataclass(frozen=True)
class PriceChange:
    """A price write request. The store fills in the old price under lock."""

    new_price: Money
    reason: str


@dataclass(frozen=True)
class PricingUpdate:
    """Everything one atomic pricing write may touch."""

    changed_at: datetime
    price_change: PriceChange | None = None
    pricing_mode: PricingMode | None = None
    price_band: PriceBand | None = None
