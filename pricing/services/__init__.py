from pricing.services.demand_service import DemandService
from pricing.services.mode_controller import PricingModeController
from pricing.services.pricing_service import PricingService

__all__ = ["DemandService", "PricingModeController", "PricingService"]
