"""Oracle interfaces.

An oracle maps a demand snapshot to a price suggestion. Implementations may be
a rules engine, a mock or a remote language model; the pricing services only
see this capability.
"""

from abc import ABC, abstractmethod

from pricing.domain import DemandSnapshot, OracleScore


class PriceOracle(ABC):
    """Interface for price recommendation oracles."""

    @abstractmethod
    def score(self, snapshot: DemandSnapshot) -> OracleScore:
        """Return a suggested price for the snapshot.

        Results are not deterministic; callers must not assume two calls with
        the same snapshot agree.

        Raises:
            OracleUnavailableError: On any transport, timeout or parse failure.
        """
        ...
