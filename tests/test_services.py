"""Unit tests for PricingService.

These test suggestion fallback, the audit trail and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from pricing.domain import Money, PricingMode
from pricing.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidPriceError,
    InvalidPricingModeError,
    PersistenceFailureError,
    SuggestionEventMismatchError,
)
from pricing.services import PricingService
from pricing.services.pricing_service import FALLBACK_REASONING, MANUAL_UPDATE_REASON
from tests.fakes import NOW, StubOracle, make_event, unavailable_oracle

MISSING_ID = "6f1c2d7e-8a9b-4c3d-9e0f-1a2b3c4d5e6f"


class TestGetSuggestion:
    """Tests for PricingService.get_suggestion."""

    def test_returns_oracle_score(self, service, event):
        suggestion = service.get_suggestion(event.id)
        assert suggestion.current_price == Money.of(100)
        assert suggestion.suggested_price == Money.of(130)
        assert suggestion.confidence.value == 0.85
        assert suggestion.reasoning == "Strong demand"
        assert suggestion.demand_signals.total_seats == 200

    def test_oracle_receives_snapshot(self, service, oracle, event):
        service.get_suggestion(str(event.id))
        assert len(oracle.snapshots) == 1
        assert oracle.snapshots[0].event_id == event.id

    def test_oracle_timeout_falls_back_to_current_price(self, store, event):
        """A timed-out oracle yields a low-confidence no-change suggestion."""
        service = PricingService(store, unavailable_oracle(), clock=lambda: NOW)
        suggestion = service.get_suggestion(event.id)
        assert suggestion.suggested_price == suggestion.current_price == Money.of(100)
        assert suggestion.confidence.value == 0.1
        assert suggestion.reasoning == FALLBACK_REASONING

    def test_suggestion_never_mutates(self, service, store, event):
        service.get_suggestion(event.id)
        assert store.events[event.id] == event
        assert store.logs == []

    def test_unknown_event_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_suggestion(MISSING_ID)

    def test_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.get_suggestion("42")

    def test_repeated_suggestions_share_signals(self, service, event):
        first = service.get_suggestion(event.id)
        second = service.get_suggestion(event.id)
        assert first == second


class TestApplySuggestion:
    """Tests for PricingService.apply_suggestion."""

    def test_without_auto_apply_nothing_changes(self, service, store, event):
        suggestion = service.get_suggestion(event.id)
        result = service.apply_suggestion(event.id, suggestion, auto_apply=False)
        assert result.applied is False
        assert result.suggestion == suggestion
        assert result.old_price is None
        assert store.logs == []
        assert store.events[event.id].base_price == Money.of(100)

    def test_auto_apply_logs_and_updates_price(self, service, store, event):
        """$100 event with a $130 suggestion: one log entry, price now $130."""
        suggestion = service.get_suggestion(event.id)
        result = service.apply_suggestion(event.id, suggestion, auto_apply=True)

        assert result.applied is True
        assert (result.old_price, result.new_price) == (Money.of(100), Money.of(130))
        logs = store.logs_for(event)
        assert len(logs) == 1
        assert (logs[0].old_price, logs[0].new_price) == (Money.of(100), Money.of(130))
        assert logs[0].reason == "Strong demand"
        updated = store.events[event.id]
        assert updated.base_price == Money.of(130)
        assert updated.last_price_update == NOW

    def test_auto_apply_never_touches_seats(self, service, store, event):
        service.optimize(event.id, auto_apply=True)
        updated = store.events[event.id]
        assert updated.booked_seats + updated.available_seats == updated.total_seats
        assert updated.available_seats == event.available_seats

    def test_auto_apply_clamps_into_band_in_automatic_mode(self, service, store):
        event = store.add_event(
            make_event(
                pricing_mode=PricingMode.AUTOMATIC,
                min_price=Money.of(90),
                max_price=Money.of(120),
            )
        )
        result = service.optimize(event.id, auto_apply=True)
        assert result.new_price == Money.of(120)
        assert store.events[event.id].base_price == Money.of(120)

    def test_auto_apply_on_deleted_event_raises_not_found(self, service, store, event):
        suggestion = service.get_suggestion(event.id)
        del store.events[event.id]
        with pytest.raises(EventNotFoundError):
            service.apply_suggestion(event.id, suggestion, auto_apply=True)

    def test_auto_apply_rejects_suggestion_for_another_event(self, service, store, event):
        """A suggestion computed for one event cannot land in another's audit trail."""
        other = store.add_event(make_event(name="Winter Gala"))
        suggestion = service.get_suggestion(other.id)
        with pytest.raises(SuggestionEventMismatchError):
            service.apply_suggestion(event.id, suggestion, auto_apply=True)
        assert store.logs == []
        assert store.events[event.id] == event

    def test_auto_apply_rejects_zero_price(self, service, event):
        suggestion = replace(service.get_suggestion(event.id), suggested_price=Money.of(0))
        with pytest.raises(InvalidPriceError):
            service.apply_suggestion(event.id, suggestion, auto_apply=True)

    def test_persistence_failure_propagates_with_state_intact(self, service, store, event):
        suggestion = service.get_suggestion(event.id)
        store.fail_writes = True
        with pytest.raises(PersistenceFailureError):
            service.apply_suggestion(event.id, suggestion, auto_apply=True)
        assert store.events[event.id] == event
        assert store.logs == []

    def test_fallback_suggestion_applies_as_no_change(self, store, event):
        service = PricingService(store, unavailable_oracle(), clock=lambda: NOW)
        result = service.optimize(event.id, auto_apply=True)
        assert result.new_price == result.old_price == Money.of(100)


class TestManualSetPrice:
    """Tests for PricingService.manual_set_price."""

    def test_updates_price_with_default_reason(self, service, store, event):
        updated = service.manual_set_price(event.id, Decimal("115.50"))
        assert updated.base_price == Money.of("115.50")
        assert updated.last_price_update == NOW
        [entry] = store.logs_for(event)
        assert entry.reason == MANUAL_UPDATE_REASON
        assert entry.old_price == Money.of(100)

    def test_uses_supplied_reason(self, service, store, event):
        service.manual_set_price(event.id, 80, reason="Early bird")
        assert store.logs_for(event)[0].reason == "Early bird"

    @pytest.mark.parametrize("price", [0, -5, "0.00", "abc", "1e30", "1e9"])
    def test_rejects_non_positive_or_oversized_price(self, service, store, event, price):
        with pytest.raises(InvalidPriceError):
            service.manual_set_price(event.id, price)
        assert store.events[event.id].base_price == Money.of(100)
        assert store.logs == []

    def test_rejects_price_outside_band_in_automatic_mode(self, service, store):
        event = store.add_event(
            make_event(
                pricing_mode=PricingMode.AUTOMATIC,
                min_price=Money.of(90),
                max_price=Money.of(110),
            )
        )
        with pytest.raises(InvalidPriceError):
            service.manual_set_price(event.id, 150)
        assert store.logs == []

    def test_unknown_event_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.manual_set_price(MISSING_ID, 50)


class TestSetPricingMode:
    def test_unknown_mode_rejected(self, service, event):
        with pytest.raises(InvalidPricingModeError):
            service.set_pricing_mode(event.id, "DYNAMIC", 90, 110)

    def test_accepts_mode_name_as_string(self, service, event):
        updated = service.set_pricing_mode(event.id, "AUTOMATIC", 90, 110)
        assert updated.pricing_mode is PricingMode.AUTOMATIC


class TestPricingHistory:
    def test_history_newest_first(self, store, event):
        ticks = iter([NOW, NOW.replace(hour=13)])
        service = PricingService(store, StubOracle(), clock=lambda: next(ticks))
        service.manual_set_price(event.id, 110)
        service.manual_set_price(event.id, 120)
        history = service.get_pricing_history(event.id)
        assert [entry.new_price for entry in history] == [Money.of(120), Money.of(110)]

    def test_zero_limit_returns_no_entries(self, service, event):
        service.manual_set_price(event.id, 110)
        assert service.get_pricing_history(event.id, limit=0) == []
        assert len(service.get_pricing_history(event.id)) == 1

    def test_history_for_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_pricing_history(MISSING_ID)
