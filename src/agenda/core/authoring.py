"""
Create, update and delete events on an in-memory collection.

Every operation returns a new list and leaves its input untouched.
"""

import time
from typing import Callable

from .errors import EventNotFoundError, ValidationError
from .events import Category, Event

DEFAULT_TIME = "09:00"
DEFAULT_DURATION = 60
DEFAULT_CATEGORY = Category.WORK


def _timestamp_id() -> str:
    return str(time.time_ns() // 1_000_000)


def validate_event_fields(data: dict) -> dict:
    """
    Check authoring input and fill form defaults.

    Returns the serialized record (without id). Raises ValidationError
    listing every problem found.
    """
    fields = {
        "time": DEFAULT_TIME,
        "duration": DEFAULT_DURATION,
        "category": DEFAULT_CATEGORY.value,
        "description": "",
    }
    fields.update({k: v for k, v in data.items() if v is not None and k != "id"})
    if isinstance(fields["category"], Category):
        fields["category"] = fields["category"].value

    errors = {}
    if not str(fields.get("title", "")).strip():
        errors["title"] = "Title is required"
    if not fields.get("date"):
        errors["date"] = "Date is required"
    if not fields.get("time"):
        errors["time"] = "Time is required"
    duration = fields.get("duration")
    if not isinstance(duration, int) or isinstance(duration, bool) or duration <= 0:
        errors["duration"] = "Duration must be positive"

    if errors:
        raise ValidationError(errors)
    return fields


def create_event(
    events: list[Event],
    data: dict,
    id_factory: Callable[[], str] | None = None,
) -> tuple[list[Event], Event]:
    """Validate data, assign a fresh id, and append the new event."""
    fields = validate_event_fields(data)
    new_id = (id_factory or _timestamp_id)()
    if any(e.id == new_id for e in events):
        raise ValidationError({"id": f"Id {new_id!r} is already in use"})
    event = Event.from_dict({**fields, "id": new_id})
    return [*events, event], event


def find_event(events: list[Event], event_id: str) -> Event:
    for event in events:
        if event.id == event_id:
            return event
    raise EventNotFoundError(event_id)


def update_event(events: list[Event], event_id: str, data: dict) -> tuple[list[Event], Event]:
    """Replace the event with this id, keeping the id and its position."""
    find_event(events, event_id)
    fields = validate_event_fields(data)
    updated = Event.from_dict({**fields, "id": event_id})
    return [updated if e.id == event_id else e for e in events], updated


def delete_event(events: list[Event], event_id: str) -> list[Event]:
    """Drop the event with this id."""
    find_event(events, event_id)
    return [e for e in events if e.id != event_id]
