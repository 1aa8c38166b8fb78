"""Builds PricingService instances from Django settings."""

from functools import lru_cache

from django.conf import settings

from pricing.oracles import DecisionLog, LlmPriceOracle, PriceOracle, StaticPriceOracle
from pricing.services.pricing_service import PricingService
from pricing.stores.django_store import DjangoPricingStore


@lru_cache(maxsize=1)
def get_decision_log() -> DecisionLog:
    return DecisionLog(max_entries=settings.PRICING_DECISION_LOG_SIZE)


def build_oracle() -> PriceOracle:
    config = settings.PRICING_ORACLE
    if not config.get("API_KEY"):
        return StaticPriceOracle()
    return LlmPriceOracle(
        api_key=config["API_KEY"],
        base_url=config["BASE_URL"],
        model=config["MODEL"],
        timeout=config["TIMEOUT"],
        temperature=config["TEMPERATURE"],
        max_tokens=config["MAX_TOKENS"],
        retries=config["RETRIES"],
        decision_log=get_decision_log(),
    )


def get_pricing_service() -> PricingService:
    return PricingService(
        store=DjangoPricingStore(),
        oracle=build_oracle(),
        history_limit=settings.PRICING_HISTORY_LIMIT,
    )
