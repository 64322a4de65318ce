"""Event source interface."""

from typing import Protocol


class EventSource(Protocol):
    """Interface for loading the raw event collection from any backend."""

    def load(self) -> list[dict]:
        """Load the event records as an ordered list of objects."""
        ...
