from pricing.oracles.decision_log import DecisionLog, OracleDecision
from pricing.oracles.interfaces import PriceOracle
from pricing.oracles.llm_oracle import LlmPriceOracle
from pricing.oracles.static_oracle import StaticPriceOracle

__all__ = [
    "DecisionLog",
    "OracleDecision",
    "PriceOracle",
    "LlmPriceOracle",
    "StaticPriceOracle",
]
