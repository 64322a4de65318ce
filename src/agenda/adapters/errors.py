"""Errors raised by event source adapters."""


class EventSourceError(Exception):
    """Raised when the event collection cannot be loaded."""

    pass


def ensure_record_list(data: object, origin: str) -> list:
    """The document must be a JSON array of event objects."""
    if not isinstance(data, list):
        raise EventSourceError(f"{origin}: expected a JSON array of events, got {type(data).__name__}")
    return data
