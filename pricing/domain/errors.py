"""Domain error codes for the pricing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_PRICE = "INVALID_PRICE"
    INVALID_PRICE_BAND = "INVALID_PRICE_BAND"
    INVALID_PRICING_MODE = "INVALID_PRICING_MODE"
    SUGGESTION_EVENT_MISMATCH = "SUGGESTION_EVENT_MISMATCH"
    ORACLE_UNAVAILABLE = "ORACLE_UNAVAILABLE"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidPriceError(DomainError):
    """Raised when a price is not positive or falls outside the pricing band."""

    def __init__(self, message: str = "Price must be greater than zero") -> None:
        super().__init__(code=ErrorCode.INVALID_PRICE, message=message)


class InvalidPriceBandError(DomainError):
    """Raised when automatic pricing bounds are missing or inverted."""

    def __init__(
        self, message: str = "Minimum price must be greater than zero and lower than maximum price"
    ) -> None:
        super().__init__(code=ErrorCode.INVALID_PRICE_BAND, message=message)


class InvalidPricingModeError(DomainError):
    """Raised when a pricing mode is not MANUAL or AUTOMATIC."""

    def __init__(self, mode: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PRICING_MODE,
            message="Pricing mode must be MANUAL or AUTOMATIC",
        )
        self.mode = mode


class SuggestionEventMismatchError(DomainError):
    """Raised when a suggestion is applied to an event it was not computed for."""

    def __init__(self, event_id: str, suggestion_event_id: str) -> None:
        super().__init__(
            code=ErrorCode.SUGGESTION_EVENT_MISMATCH,
            message="Suggestion was computed for a different event",
        )
        self.event_id = event_id
        self.suggestion_event_id = suggestion_event_id


class OracleUnavailableError(DomainError):
    """Raised by oracles on transport, timeout or parse failure.

    Services absorb this error into a conservative suggestion.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.ORACLE_UNAVAILABLE,
            message="Price oracle unavailable",
        )
        self.reason = reason


class PersistenceFailureError(DomainError):
    """Raised when an atomic pricing write did not complete."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILURE,
            message="Pricing update could not be saved",
        )
        self.event_id = event_id
