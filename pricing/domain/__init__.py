from pricing.domain.models import (
    ApplyResult,
    DemandSignals,
    DemandSnapshot,
    Event,
    OracleScore,
    PriceChange,
    PricingLogEntry,
    PricingSuggestion,
    PricingUpdate,
)
from pricing.domain.value_objects import Confidence, EventId, Money, PriceBand, PricingMode

__all__ = [
    "ApplyResult",
    "DemandSignals",
    "DemandSnapshot",
    "Event",
    "OracleScore",
    "PriceChange",
    "PricingLogEntry",
    "PricingSuggestion",
    "PricingUpdate",
    "Confidence",
    "EventId",
    "Money",
    "PriceBand",
    "PricingMode",
]
