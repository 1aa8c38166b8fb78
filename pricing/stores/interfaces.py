"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from pricing.domain import Event, EventId, PricingLogEntry, PricingUpdate


class PricingStore(ABC):
    """Interface for event pricing persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_confirmed_booking_times(self, event_id: EventId) -> list[datetime]:
        """Return created_at of every CONFIRMED booking, newest first."""
        ...

    @abstractmethod
    def get_pricing_history(self, event_id: EventId, limit: int) -> list[PricingLogEntry]:
        """Return up to `limit` pricing log entries ordered by created_at descending."""
        ...

    @abstractmethod
    def apply_update(self, event_id: EventId, update: PricingUpdate) -> Event | None:
        """Apply a pricing update as one atomic unit.

        Writes the log entry (old price read under lock) and the event's
        pricing fields together. Returns None if the event does not exist.

        Raises:
            PersistenceFailureError: If the write did not complete. No part
                of the update is kept.
        """
        ...
