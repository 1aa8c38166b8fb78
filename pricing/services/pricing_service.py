"""Pricing service - suggestion, application and audit of event prices.

Services:
- Depend only on interfaces (stores, oracles)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from pricing.domain import (
    ApplyResult,
    Confidence,
    DemandSignals,
    DemandSnapshot,
    Event,
    EventId,
    PriceChange,
    PricingLogEntry,
    PricingMode,
    PricingSuggestion,
    PricingUpdate,
)
from pricing.domain.errors import (
    EventNotFoundError,
    InvalidPriceError,
    InvalidPricingModeError,
    OracleUnavailableError,
    SuggestionEventMismatchError,
)
from pricing.oracles.interfaces import PriceOracle
from pricing.services.common import parse_event_id, parse_price
from pricing.services.demand_service import DEFAULT_HISTORY_LIMIT, DemandService
from pricing.services.mode_controller import PricingModeController
from pricing.stores.interfaces import PricingStore

logger = logging.getLogger(__name__)

FALLBACK_CONFIDENCE = 0.1
FALLBACK_REASONING = "unable to analyze; price unchanged"
MANUAL_UPDATE_REASON = "Manual price update"


def fallback_suggestion(snapshot: DemandSnapshot) -> PricingSuggestion:
    """Conservative no-change suggestion used when the oracle fails."""
    return PricingSuggestion(
        event_id=snapshot.event_id,
        current_price=snapshot.current_price,
        suggested_price=snapshot.current_price,
        confidence=Confidence(FALLBACK_CONFIDENCE),
        reasoning=FALLBACK_REASONING,
        demand_signals=DemandSignals.from_snapshot(snapshot),
    )


class PricingService:
    """Service for dynamic pricing operations on events."""

    def __init__(
        self,
        store: PricingStore,
        oracle: PriceOracle,
        clock: Callable[[], datetime] = timezone.now,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._store = store
        self._oracle = oracle
        self._clock = clock
        self._history_limit = history_limit
        self._demand = DemandService(store, clock=clock, history_limit=history_limit)
        self._modes = PricingModeController(store, clock=clock)

    def get_suggestion(self, event_id: EventId | str) -> PricingSuggestion:
        """Return a price suggestion for an event. Never mutates state.

        Oracle failures degrade to a low-confidence no-change suggestion.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        snapshot = self._demand.analyze(event_id)
        try:
            score = self._oracle.score(snapshot)
        except OracleUnavailableError as exc:
            logger.warning(
                "Oracle unavailable for event %s, keeping price %s: %s",
                snapshot.event_id,
                snapshot.current_price,
                exc.reason,
            )
            return fallback_suggestion(snapshot)

        return PricingSuggestion(
            event_id=snapshot.event_id,
            current_price=snapshot.current_price,
            suggested_price=score.suggested_price,
            confidence=score.confidence,
            reasoning=score.reasoning,
            demand_signals=DemandSignals.from_snapshot(snapshot),
        )

    def apply_suggestion(
        self,
        event_id: EventId | str,
        suggestion: PricingSuggestion,
        auto_apply: bool = False,
    ) -> ApplyResult:
        """Apply a suggestion, or hand it back untouched when auto_apply is False.

        In AUTOMATIC mode the applied price is clamped into the event's band.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidPriceError: If the suggested price is not positive.
            SuggestionEventMismatchError: If the suggestion belongs to another event.
            EventNotFoundError: If the event does not exist.
            PersistenceFailureError: If the update could not be saved.
        """
        if not auto_apply:
            return ApplyResult(applied=False, suggestion=suggestion)

        eid = parse_event_id(event_id)
        if suggestion.event_id != eid:
            raise SuggestionEventMismatchError(str(eid), str(suggestion.event_id))
        new_price = parse_price(suggestion.suggested_price, "Suggested price must be greater than zero")

        event = self._store.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid))

        band = event.price_band
        if event.pricing_mode is PricingMode.AUTOMATIC and band is not None:
            new_price = band.clamp(new_price)

        updated = self._store.apply_update(
            eid,
            PricingUpdate(
                changed_at=self._clock(),
                price_change=PriceChange(new_price=new_price, reason=suggestion.reasoning),
            ),
        )
        if updated is None:
            raise EventNotFoundError(str(eid))

        logger.info(
            "Applied price suggestion for event %s: %s -> %s (confidence %.2f)",
            eid,
            event.base_price,
            new_price,
            suggestion.confidence.value,
        )
        return ApplyResult(
            applied=True,
            suggestion=suggestion,
            old_price=event.base_price,
            new_price=updated.base_price,
        )

    def optimize(self, event_id: EventId | str, auto_apply: bool = False) -> ApplyResult:
        """Fetch a fresh suggestion and apply it if requested."""
        suggestion = self.get_suggestion(event_id)
        return self.apply_suggestion(event_id, suggestion, auto_apply=auto_apply)

    def manual_set_price(
        self, event_id: EventId | str, new_price, reason: str | None = None
    ) -> Event:
        """Set an event's price by hand and record it in the pricing log.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidPriceError: If new_price is not positive, or lies outside the
                band of an event in AUTOMATIC mode.
            EventNotFoundError: If the event does not exist.
            PersistenceFailureError: If the update could not be saved.
        """
        eid = parse_event_id(event_id)
        price = parse_price(new_price)

        event = self._store.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid))

        band = event.price_band
        if event.pricing_mode is PricingMode.AUTOMATIC and band is not None and not band.contains(price):
            raise InvalidPriceError(
                f"Price must be between {band.min_price} and {band.max_price} in automatic mode"
            )

        updated = self._store.apply_update(
            eid,
            PricingUpdate(
                changed_at=self._clock(),
                price_change=PriceChange(new_price=price, reason=reason or MANUAL_UPDATE_REASON),
            ),
        )
        if updated is None:
            raise EventNotFoundError(str(eid))

        logger.info("Manual price update for event %s: %s -> %s", eid, event.base_price, price)
        return updated

    def set_pricing_mode(
        self,
        event_id: EventId | str,
        mode: PricingMode | str,
        min_price=None,
        max_price=None,
        candidate_price=None,
    ) -> Event:
        """Switch pricing mode; see PricingModeController.transition."""
        if candidate_price is not None:
            candidate_price = parse_price(candidate_price)
        try:
            mode = PricingMode(mode)
        except ValueError as exc:
            raise InvalidPricingModeError(str(mode)) from exc
        return self._modes.transition(
            event_id,
            mode,
            min_price=min_price,
            max_price=max_price,
            candidate_price=candidate_price,
        )

    def get_pricing_history(
        self, event_id: EventId | str, limit: int | None = None
    ) -> list[PricingLogEntry]:
        """Return recent price changes, newest first.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = parse_event_id(event_id)
        if self._store.get_event(eid) is None:
            raise EventNotFoundError(str(eid))
        return self._store.get_pricing_history(
            eid, self._history_limit if limit is None else limit
        )
