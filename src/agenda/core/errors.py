"""Error types raised by the calendar core."""


class FormatError(ValueError):
    """Raised when a date or time field is not in its fixed serialized form."""

    pass


class ValidationError(ValueError):
    """Raised when event fields supplied for authoring are invalid."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))


class EventNotFoundError(KeyError):
    """Raised when an update or delete names an id not in the collection."""

    pass
