"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from pricing.domain import Confidence, EventId, Money, OracleScore, PriceBand


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("10.50")).amount == Decimal("10.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert not Money(Decimal("0")).is_positive

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-1"))

    def test_money_of_rounds_to_cents(self):
        """Money.of accepts floats and rounds half up to cents."""
        assert Money.of(129.995).amount == Decimal("130.00")
        assert Money.of("99.5").amount == Decimal("99.50")

    @pytest.mark.parametrize("value", ["abc", float("nan"), float("inf")])
    def test_money_of_rejects_non_numbers(self, value):
        """Money.of raises ValueError for values that are not finite numbers."""
        with pytest.raises(ValueError):
            Money.of(value)

    def test_money_rejects_amount_beyond_column_precision(self):
        """Amounts above 99,999,999.99 do not fit the price columns."""
        assert Money(Decimal("99999999.99")).amount == Decimal("99999999.99")
        with pytest.raises(ValueError):
            Money(Decimal("100000000.00"))

    @pytest.mark.parametrize("value", ["1e30", 1e30, "5000000000"])
    def test_money_of_rejects_oversized_amounts(self, value):
        """Money.of raises ValueError, not a decimal signal, for huge values."""
        with pytest.raises(ValueError):
            Money.of(value)

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("7"))) == "7.00"

    def test_money_ordering(self):
        """Money compares by amount."""
        assert Money.of(90) < Money.of(110)
        assert max(Money.of(90), Money.of(110)) == Money.of(110)


class TestPriceBand:
    """Tests for PriceBand value object."""

    def test_band_clamps_above_max(self):
        band = PriceBand(Money.of(90), Money.of(110))
        assert band.clamp(Money.of(130)) == Money.of(110)

    def test_band_clamps_below_min(self):
        band = PriceBand(Money.of(90), Money.of(110))
        assert band.clamp(Money.of(50)) == Money.of(90)

    def test_band_keeps_price_inside(self):
        band = PriceBand(Money.of(90), Money.of(110))
        assert band.clamp(Money.of(100)) == Money.of(100)
        assert band.contains(Money.of(110))

    def test_band_rejects_inverted_bounds(self):
        """min_price must be lower than max_price."""
        with pytest.raises(ValueError):
            PriceBand(Money.of(100), Money.of(90))

    def test_band_rejects_equal_bounds(self):
        with pytest.raises(ValueError):
            PriceBand(Money.of(100), Money.of(100))

    def test_band_rejects_zero_minimum(self):
        with pytest.raises(ValueError):
            PriceBand(Money.of(0), Money.of(90))


class TestConfidence:
    def test_confidence_bounds(self):
        assert Confidence(0.0).value == 0.0
        assert Confidence(1.0).value == 1.0
        with pytest.raises(ValueError):
            Confidence(1.2)
        with pytest.raises(ValueError):
            Confidence(-0.1)


class TestOracleScore:
    def test_score_rejects_zero_price(self):
        """Suggested prices must be greater than zero."""
        with pytest.raises(ValueError):
            OracleScore(Money.of(0), Confidence(0.5), "free")


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "6f1c2d7e-8a9b-4c3d-9e0f-1a2b3c4d5e6f"
        event_id = EventId.from_string(raw)
        assert event_id.value == UUID(raw)
        assert str(event_id) == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")
