"""MANUAL/AUTOMATIC pricing mode transitions.

Entering AUTOMATIC mode clamps the event price into the operator band. The
mode, the band and any clamp adjustment are written as one atomic update.
Concurrent transitions on the same event are last-writer-wins.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from pricing.domain import Event, EventId, Money, PriceBand, PriceChange, PricingMode, PricingUpdate
from pricing.domain.errors import EventNotFoundError, InvalidPriceBandError
from pricing.services.common import parse_event_id
from pricing.stores.interfaces import PricingStore

logger = logging.getLogger(__name__)

CLAMP_REASON = "Automatic adjustment to stay within range"


def build_price_band(min_price, max_price) -> PriceBand:
    """Validate operator bounds.

    Raises:
        InvalidPriceBandError: If a bound is missing, not a positive number, or
            min_price is not lower than max_price.
    """
    if min_price is None or max_price is None:
        raise InvalidPriceBandError("Both minimum and maximum price are required")
    try:
        return PriceBand(min_price=_to_money(min_price), max_price=_to_money(max_price))
    except ValueError as exc:
        raise InvalidPriceBandError() from exc


def _to_money(value) -> Money:
    return value if isinstance(value, Money) else Money.of(value)


class PricingModeController:
    """Applies pricing mode transitions for events."""

    def __init__(
        self, store: PricingStore, clock: Callable[[], datetime] = timezone.now
    ) -> None:
        self._store = store
        self._clock = clock

    def transition(
        self,
        event_id: EventId | str,
        mode: PricingMode,
        min_price=None,
        max_price=None,
        candidate_price: Money | None = None,
    ) -> Event:
        """Move an event to `mode`.

        For AUTOMATIC, `candidate_price` (usually the latest suggestion) is
        clamped into the band; the current price is used when it is None. The
        price only changes if the clamped value differs from the current one.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidPriceBandError: If the bounds are invalid.
            EventNotFoundError: If the event does not exist.
            PersistenceFailureError: If the update could not be saved.
        """
        eid = parse_event_id(event_id)
        mode = PricingMode(mode)

        if mode is PricingMode.AUTOMATIC:
            band = build_price_band(min_price, max_price)
        elif min_price is None and max_price is None:
            band = None
        else:
            band = build_price_band(min_price, max_price)

        event = self._store.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid))

        price_change = None
        if mode is PricingMode.AUTOMATIC:
            candidate = candidate_price if candidate_price is not None else event.base_price
            clamped = band.clamp(_to_money(candidate))
            if clamped != event.base_price:
                price_change = PriceChange(new_price=clamped, reason=CLAMP_REASON)

        updated = self._store.apply_update(
            eid,
            PricingUpdate(
                changed_at=self._clock(),
                price_change=price_change,
                pricing_mode=mode,
                price_band=band,
            ),
        )
        if updated is None:
            raise EventNotFoundError(str(eid))

        logger.info(
            "Event %s pricing mode %s -> %s (band=%s, price %s -> %s)",
            eid,
            event.pricing_mode.value,
            mode.value,
            f"{band.min_price}-{band.max_price}" if band else "unchanged",
            event.base_price,
            updated.base_price,
        )
        return updated
