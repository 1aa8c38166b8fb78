from pricing.handlers.views import (
    PriceUpdateView,
    PricingHistoryView,
    PricingModeView,
    PricingOptimizeView,
    PricingSuggestionView,
)

__all__ = [
    "PriceUpdateView",
    "PricingHistoryView",
    "PricingModeView",
    "PricingOptimizeView",
    "PricingSuggestionView",
]
