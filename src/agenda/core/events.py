"""Pure event domain logic - no I/O dependencies."""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from .errors import FormatError, ValidationError
from .timeofday import end_time, parse_time

logger = logging.getLogger(__name__)


class Category(Enum):
    """Closed set of event categories."""

    WORK = "work"
    PERSONAL = "personal"
    MEETING = "meeting"
    DEADLINE = "deadline"
    REMINDER = "reminder"


# Display order for filters, legends and histograms
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.WORK,
    Category.PERSONAL,
    Category.MEETING,
    Category.DEADLINE,
    Category.REMINDER,
)


def parse_category(value: "str | Category") -> Category:
    """Resolve a category name. Raises FormatError for unknown names."""
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        raise FormatError(f"Unknown category {value!r}") from None


def date_key(d: date) -> str:
    """Format a date as its YYYY-MM-DD grouping key."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(value: str) -> date:
    """Parse a YYYY-MM-DD key. Raises FormatError on anything else."""
    if not isinstance(value, str) or len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise FormatError(f"Invalid date {value!r}: expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise FormatError(f"Invalid date {value!r}: not a calendar date") from None


def _first_present(data: dict, *keys: str):
    """Value of the first key that is present and not null."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _optional_str(data: dict, *keys: str) -> str | None:
    value = _first_present(data, *keys)
    if value is not None and not isinstance(value, str):
        raise FormatError(f"Invalid {keys[0]}: expected a string, got {type(value).__name__}")
    return value


def _attendees(data: dict) -> list[str]:
    value = data.get("attendees")
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(name, str) for name in value):
        raise FormatError("Invalid attendees: expected a list of names")
    return list(value)


@dataclass
class Event:
    """A scheduled calendar event."""

    id: str
    title: str
    date: str
    time: str
    duration_minutes: int
    category: Category
    description: str = ""
    color_override: str | None = None
    location: str | None = None
    attendees: list[str] = field(default_factory=list)

    @property
    def end_time(self) -> str:
        """End of the event as HH:MM (may exceed 24:00)."""
        return end_time(self.time, self.duration_minutes)

    @property
    def hour(self) -> int:
        return parse_time(self.time)[0]

    def as_date(self) -> date:
        return parse_date_key(self.date)

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        """
        Create an Event from its serialized form.

        Accepts both the bootstrap document keys (duration, color) and the
        long forms (durationMinutes, colorOverride).
        Raises FormatError for malformed date/time/category or wrongly typed
        text fields, and ValidationError for a missing title or non-positive
        duration.
        """
        errors = {}
        title = _optional_str(data, "title") or ""
        if not title.strip():
            errors["title"] = "Title is required"

        duration = _first_present(data, "duration", "durationMinutes")
        if not isinstance(duration, int) or isinstance(duration, bool) or duration <= 0:
            errors["duration"] = "Duration must be positive"

        if "date" not in data:
            errors["date"] = "Date is required"
        if "time" not in data:
            errors["time"] = "Time is required"
        if errors:
            raise ValidationError(errors)

        parse_date_key(data["date"])
        parse_time(data["time"])

        return cls(
            id=str(data["id"]),
            title=title,
            date=data["date"],
            time=data["time"],
            duration_minutes=duration,
            category=parse_category(data.get("category", "")),
            description=_optional_str(data, "description") or "",
            color_override=_optional_str(data, "color", "colorOverride"),
            location=_optional_str(data, "location"),
            attendees=_attendees(data),
        )

    def to_dict(self) -> dict:
        """Serialize using the bootstrap document keys."""
        data = {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "time": self.time,
            "duration": self.duration_minutes,
            "category": self.category.value,
        }
        if self.description:
            data["description"] = self.description
        if self.color_override:
            data["color"] = self.color_override
        if self.location:
            data["location"] = self.location
        if self.attendees:
            data["attendees"] = list(self.attendees)
        return data


@dataclass
class RecordFailure:
    """A record that could not be loaded into the collection."""

    index: int
    record_id: str | None
    reason: str


def parse_events(records: list) -> tuple[list[Event], list[RecordFailure]]:
    """
    Parse raw records into Events, skipping the ones that fail.

    A bad record never aborts the batch. Each skipped record is logged and
    reported with its position and id. Later records reusing an id already
    loaded are skipped as duplicates.
    """
    events: list[Event] = []
    failures: list[RecordFailure] = []
    seen_ids: set[str] = set()

    for index, record in enumerate(records):
        record_id = None
        try:
            if not isinstance(record, dict):
                raise FormatError(f"Expected an object, got {type(record).__name__}")
            if record.get("id") in (None, ""):
                raise FormatError("Missing id")
            record_id = str(record["id"])
            if record_id in seen_ids:
                raise FormatError(f"Duplicate id {record_id!r}")
            event = Event.from_dict(record)
        except (FormatError, ValidationError) as e:
            logger.warning(f"Skipping event record {index} (id={record_id}): {e}")
            failures.append(RecordFailure(index=index, record_id=record_id, reason=str(e)))
            continue

        seen_ids.add(event.id)
        events.append(event)

    return events, failures


def filter_by_category(events: list[Event], enabled: "set[Category] | frozenset[Category]") -> list[Event]:
    """
    Keep events whose category is enabled, preserving order.

    Pure function - no I/O.
    """
    if not enabled:
        return []
    return [e for e in events if e.category in enabled]


def events_on_date(events: list[Event], d: date) -> list[Event]:
    """Events whose stored date string equals the YYYY-MM-DD key of d."""
    key = date_key(d)
    return [e for e in events if e.date == key]


def events_by_hour(day_events: list[Event], hour: int) -> list[Event]:
    """Events on a day that start within the given hour (day view rows)."""
    return [e for e in day_events if e.hour == hour]


def group_by_date(events: list[Event], dates: list[date]) -> dict[str, list[Event]]:
    """Map each date key in the window to its events, in input order."""
    grouped: dict[str, list[Event]] = {date_key(d): [] for d in dates}
    for event in events:
        if event.date in grouped:
            grouped[event.date].append(event)
    return grouped
