from pricing.domain import EventId, Money
from pricing.domain.errors import InvalidEventIdError, InvalidPriceError


def parse_event_id(event_id: EventId | str) -> EventId:
    """Accept a domain id or its string form.

    Raises:
        InvalidEventIdError: If the string is not a valid UUID.
    """
    if isinstance(event_id, EventId):
        return event_id
    try:
        return EventId.from_string(str(event_id))
    except ValueError as exc:
        raise InvalidEventIdError() from exc


def parse_price(value, message: str = "Price must be greater than zero") -> Money:
    """Parse a strictly positive price.

    Raises:
        InvalidPriceError: If the value is not a number greater than zero.
    """
    if isinstance(value, Money):
        price = value
    else:
        try:
            price = Money.of(value)
        except ValueError as exc:
            raise InvalidPriceError(message) from exc
    if not price.is_positive:
        raise InvalidPriceError(message)
    return price
