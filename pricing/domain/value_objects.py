"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Self
from uuid import UUID

CENTS = Decimal("0.01")
# largest value a DecimalField(max_digits=10, decimal_places=2) column holds
MAX_AMOUNT = Decimal("99999999.99")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        if self.amount > MAX_AMOUNT:
            raise ValueError(f"Money amount cannot exceed {MAX_AMOUNT}")

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Self:
        """Build Money from any numeric input, rounded to cents."""
        try:
            amount = Decimal(str(value))
            if not amount.is_finite():
                raise ValueError(f"Not a valid amount: {value!r}")
            amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ValueError(f"Not a valid amount: {value!r}") from exc
        return cls(amount=amount)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


class PricingMode(Enum):
    """Whether price changes need an operator (MANUAL) or are clamped automatically."""

    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"


@dataclass(frozen=True)
class PriceBand:
    """Operator-defined [min_price, max_price] range for automatic pricing."""

    min_price: Money
    max_price: Money

    def __post_init__(self) -> None:
        if not self.min_price.is_positive:
            raise ValueError("Minimum price must be greater than zero")
        if not self.min_price < self.max_price:
            raise ValueError("Minimum price must be lower than maximum price")

    def contains(self, price: Money) -> bool:
        return self.min_price <= price <= self.max_price

    def clamp(self, price: Money) -> Money:
        return max(self.min_price, min(self.max_price, price))


@dataclass(frozen=True)
class Confidence:
    """Oracle confidence in [0, 1]."""

    value: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 1.0:
            raise ValueError("Confidence must be between 0 and 1")
