"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from pricing.services import PricingService
from pricing.services.factory import get_decision_log
from tests.fakes import NOW, InMemoryPricingStore, StubOracle, make_event


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_decision_log():
    get_decision_log.cache_clear()
    yield
    get_decision_log.cache_clear()


@pytest.fixture
def store() -> InMemoryPricingStore:
    return InMemoryPricingStore()


@pytest.fixture
def oracle() -> StubOracle:
    return StubOracle()


@pytest.fixture
def service(store, oracle) -> PricingService:
    return PricingService(store, oracle, clock=lambda: NOW)


@pytest.fixture
def event(store):
    return store.add_event(make_event())
