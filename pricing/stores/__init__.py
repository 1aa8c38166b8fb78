from pricing.stores.django_store import DjangoPricingStore
from pricing.stores.interfaces import PricingStore

__all__ = ["DjangoPricingStore", "PricingStore"]
