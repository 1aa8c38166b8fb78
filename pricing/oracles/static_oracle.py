from pricing.domain import Confidence, DemandSnapshot, OracleScore
from pricing.domain.errors import OracleUnavailableError
from pricing.oracles.interfaces import PriceOracle


class StaticPriceOracle(PriceOracle):
    """Oracle that always recommends keeping the current price.

    Used when no language-model credentials are configured.
    """

    def __init__(self, confidence: float = 0.5) -> None:
        self._confidence = Confidence(confidence)

    def score(self, snapshot: DemandSnapshot) -> OracleScore:
        try:
            return OracleScore(
                suggested_price=snapshot.current_price,
                confidence=self._confidence,
                reasoning="No pricing model configured; keeping the current price.",
            )
        except ValueError as exc:
            raise OracleUnavailableError(str(exc)) from exc
