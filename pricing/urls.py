from django.urls import path

from pricing.handlers import (
    PriceUpdateView,
    PricingHistoryView,
    PricingModeView,
    PricingOptimizeView,
    PricingSuggestionView,
)

urlpatterns = [
    path(
        "events/<str:event_id>/pricing/suggestion",
        PricingSuggestionView.as_view(),
        name="pricing-suggestion",
    ),
    path(
        "events/<str:event_id>/pricing/optimize",
        PricingOptimizeView.as_view(),
        name="pricing-optimize",
    ),
    path("events/<str:event_id>/pricing/price", PriceUpdateView.as_view(), name="pricing-price"),
    path("events/<str:event_id>/pricing/mode", PricingModeView.as_view(), name="pricing-mode"),
    path(
        "events/<str:event_id>/pricing/history",
        PricingHistoryView.as_view(),
        name="pricing-history",
    ),
]
