"""Pure event statistics - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from .events import CATEGORY_ORDER, Category, Event, parse_date_key
from .timeofday import parse_time
from .window import end_of_week, start_of_week

UPCOMING_LIMIT = 3


@dataclass
class EventStatistics:
    """Summary numbers for the sidebar."""

    this_week_count: int
    next_week_count: int
    category_histogram: dict[Category, int] = field(default_factory=dict)
    upcoming: list[Event] = field(default_factory=list)


def starts_at(event: Event) -> datetime:
    """The event's date and start time combined."""
    hour, minute = parse_time(event.time)
    return datetime.combine(parse_date_key(event.date), time(hour, minute))


def events_between(events: list[Event], start: date, end: date) -> list[Event]:
    """Events dated within [start, end], inclusive, in input order."""
    return [e for e in events if start <= parse_date_key(e.date) <= end]


def category_histogram(events: list[Event]) -> dict[Category, int]:
    """Count events per category, keyed in first-seen order."""
    counts: dict[Category, int] = {}
    for event in events:
        counts[event.category] = counts.get(event.category, 0) + 1
    return counts


def top_categories(histogram: dict[Category, int], limit: int = 3) -> list[tuple[Category, int]]:
    """Histogram entries in display order, at most limit of them."""
    ordered = [(c, histogram[c]) for c in CATEGORY_ORDER if c in histogram]
    return ordered[:limit]


def compute_statistics(
    events: list[Event],
    now: datetime | None = None,
    upcoming_limit: int = UPCOMING_LIMIT,
) -> EventStatistics:
    """
    Aggregate weekly counts, the category histogram and upcoming events.

    Weeks run Sunday to Saturday. "Upcoming" draws from this week and next
    week: events starting after now, plus anything dated today even if it
    already started. Sorted by start with equal starts in input order.

    Pure function - no I/O.
    """
    now = now or datetime.now()
    today = now.date()

    week_start = start_of_week(today)
    week_end = end_of_week(today)
    next_start = week_end + timedelta(days=1)
    next_end = next_start + timedelta(days=6)

    this_week = events_between(events, week_start, week_end)
    next_week = events_between(events, next_start, next_end)

    candidates = [
        e for e in this_week + next_week if starts_at(e) > now or parse_date_key(e.date) == today
    ]
    upcoming = sorted(candidates, key=starts_at)[: max(upcoming_limit, 0)]

    return EventStatistics(
        this_week_count=len(this_week),
        next_week_count=len(next_week),
        category_histogram=category_histogram(events),
        upcoming=upcoming,
    )
