"""Demand signal aggregation.

Turns the stored state of one event (seats, confirmed bookings, recent price
changes) into a DemandSnapshot. The computation is pure for a given clock
reading and store state.
"""

from collections.abc import Callable
from datetime import datetime, timedelta

from django.utils import timezone

from pricing.domain import DemandSnapshot, EventId
from pricing.domain.errors import EventNotFoundError
from pricing.services.common import parse_event_id
from pricing.stores.interfaces import PricingStore

SECONDS_PER_DAY = 24 * 60 * 60
RECENT_WINDOW = timedelta(hours=24)
DEFAULT_HISTORY_LIMIT = 5


def occupancy_rate(total_seats: int, booked_seats: int) -> float:
    """Percentage of seats sold; 0 for events without seats."""
    if total_seats <= 0:
        return 0.0
    return booked_seats / total_seats * 100


def booking_velocity(confirmed_bookings: int, event_age: timedelta) -> float:
    """Confirmed bookings per day since the event was created.

    Age is floored at one day so new events do not blow up.
    """
    age_days = event_age.total_seconds() / SECONDS_PER_DAY
    return confirmed_bookings / max(age_days, 1.0)


class DemandService:
    """Service computing demand snapshots."""

    def __init__(
        self,
        store: PricingStore,
        clock: Callable[[], datetime] = timezone.now,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._store = store
        self._clock = clock
        self._history_limit = history_limit

    def analyze(self, event_id: EventId | str) -> DemandSnapshot:
        """Return the demand snapshot for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = parse_event_id(event_id)
        event = self._store.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid))

        now = self._clock()
        booking_times = self._store.get_confirmed_booking_times(eid)
        history = self._store.get_pricing_history(eid, self._history_limit)

        booked = event.booked_seats
        time_remaining = event.start_date - now
        recent_cutoff = now - RECENT_WINDOW

        return DemandSnapshot(
            event_id=eid,
            current_price=event.base_price,
            total_seats=event.total_seats,
            available_seats=event.available_seats,
            booked_seats=booked,
            occupancy_rate=occupancy_rate(event.total_seats, booked),
            booking_velocity=booking_velocity(len(booking_times), now - event.created_at),
            recent_bookings=sum(1 for created_at in booking_times if created_at >= recent_cutoff),
            days_remaining=time_remaining.total_seconds() / SECONDS_PER_DAY,
            time_remaining=time_remaining,
            pricing_history=tuple(history[: self._history_limit]),
        )
