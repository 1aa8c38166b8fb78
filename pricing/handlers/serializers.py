"""Serializers for request validation and domain model responses."""

from rest_framework import serializers

from pricing.domain import PricingMode

PRICE_FIELD = {"max_digits": 10, "decimal_places": 2}


def _money(value) -> str | None:
    return None if value is None else str(value)


class PricingLogEntrySerializer(serializers.Serializer):
    """Serializer for PricingLogEntry domain model."""

    old_price = serializers.SerializerMethodField()
    new_price = serializers.SerializerMethodField()
    reason = serializers.CharField()
    created_at = serializers.DateTimeField()

    def get_old_price(self, entry) -> str:
        return _money(entry.old_price)

    def get_new_price(self, entry) -> str:
        return _money(entry.new_price)


class PricingSuggestionSerializer(serializers.Serializer):
    """Serializer for PricingSuggestion domain model."""

    event_id = serializers.SerializerMethodField()
    current_price = serializers.SerializerMethodField()
    suggested_price = serializers.SerializerMethodField()
    confidence = serializers.SerializerMethodField()
    reasoning = serializers.CharField()
    demand_signals = serializers.SerializerMethodField()

    def get_event_id(self, suggestion) -> str:
        return str(suggestion.event_id)

    def get_current_price(self, suggestion) -> str:
        return _money(suggestion.current_price)

    def get_suggested_price(self, suggestion) -> str:
        return _money(suggestion.suggested_price)

    def get_confidence(self, suggestion) -> float:
        return suggestion.confidence.value

    def get_demand_signals(self, suggestion) -> dict:
        signals = suggestion.demand_signals
        return {
            "booking_velocity": signals.booking_velocity,
            "available_seats": signals.available_seats,
            "total_seats": signals.total_seats,
            "occupancy_rate": signals.occupancy_rate,
            "time_remaining_seconds": signals.time_remaining.total_seconds(),
            "recent_bookings": signals.recent_bookings,
        }


class ApplyResultSerializer(serializers.Serializer):
    """Serializer for ApplyResult domain model."""

    applied = serializers.BooleanField()
    suggestion = PricingSuggestionSerializer()
    old_price = serializers.SerializerMethodField()
    new_price = serializers.SerializerMethodField()

    def get_old_price(self, result) -> str | None:
        return _money(result.old_price)

    def get_new_price(self, result) -> str | None:
        return _money(result.new_price)


class EventPricingSerializer(serializers.Serializer):
    """Serializer for the pricing fields of an Event domain model."""

    id = serializers.SerializerMethodField()
    base_price = serializers.SerializerMethodField()
    pricing_mode = serializers.SerializerMethodField()
    min_price = serializers.SerializerMethodField()
    max_price = serializers.SerializerMethodField()
    last_price_update = serializers.DateTimeField()

    def get_id(self, event) -> str:
        return str(event.id)

    def get_base_price(self, event) -> str:
        return _money(event.base_price)

    def get_pricing_mode(self, event) -> str:
        return event.pricing_mode.value

    def get_min_price(self, event) -> str | None:
        return _money(event.min_price)

    def get_max_price(self, event) -> str | None:
        return _money(event.max_price)


class OptimizeRequestSerializer(serializers.Serializer):
    auto_apply = serializers.BooleanField(default=False)


class PriceUpdateRequestSerializer(serializers.Serializer):
    new_price = serializers.DecimalField(**PRICE_FIELD)
    reason = serializers.CharField(required=False, allow_blank=True, max_length=1000)


class PricingModeRequestSerializer(serializers.Serializer):
    pricing_mode = serializers.ChoiceField(choices=[mode.value for mode in PricingMode])
    min_price = serializers.DecimalField(required=False, allow_null=True, **PRICE_FIELD)
    max_price = serializers.DecimalField(required=False, allow_null=True, **PRICE_FIELD)
    suggested_price = serializers.DecimalField(required=False, allow_null=True, **PRICE_FIELD)
