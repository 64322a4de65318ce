"""Pure calendar view assembly and formatting - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .conflicts import conflict_map
from .events import (
    CATEGORY_ORDER,
    Category,
    Event,
    date_key,
    events_by_hour,
    filter_by_category,
    group_by_date,
    parse_date_key,
)
from .navigation import ViewState
from .statistics import EventStatistics, compute_statistics, top_categories
from .window import ViewMode, in_month, view_dates

# Events shown per grid cell before collapsing into "+N more"
CELL_LIMITS = {ViewMode.MONTH: 3, ViewMode.WEEK: 4}


@dataclass
class CalendarView:
    """Everything a renderer needs for one state of the calendar."""

    state: ViewState
    title: str
    dates: list[date]
    events_by_date: dict[str, list[Event]]
    conflicts: dict[str, bool]
    statistics: EventStatistics

    def is_padding(self, d: date) -> bool:
        """Month-grid cells outside the anchor's month."""
        return self.state.view_mode == ViewMode.MONTH and not in_month(d, self.state.anchor_date)


def assemble_view(
    state: ViewState,
    events: list[Event],
    enabled: "set[Category] | frozenset[Category] | None" = None,
    now: datetime | None = None,
    upcoming_limit: int = 3,
) -> CalendarView:
    """
    Assemble a render-ready view from the raw collection.

    The window and the category filter are computed independently, then
    conflicts per date and statistics over the filtered set.
    Pure function - no I/O.
    """
    enabled = set(CATEGORY_ORDER) if enabled is None else enabled
    dates = view_dates(state.anchor_date, state.view_mode)
    visible = filter_by_category(events, enabled)

    return CalendarView(
        state=state,
        title=view_title(state),
        dates=dates,
        events_by_date=group_by_date(visible, dates),
        conflicts=conflict_map(visible, dates),
        statistics=compute_statistics(visible, now=now, upcoming_limit=upcoming_limit),
    )


def ordinal(n: int) -> str:
    """1 -> 1st, 2 -> 2nd, 11 -> 11th, 23 -> 23rd."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def view_title(state: ViewState) -> str:
    """Header text for the current view."""
    d = state.anchor_date
    match state.view_mode:
        case ViewMode.WEEK:
            return f"Week of {d.strftime('%b')} {ordinal(d.day)}, {d.year}"
        case ViewMode.DAY:
            return f"{d.strftime('%A, %B')} {ordinal(d.day)}, {d.year}"
        case _:
            return d.strftime("%B %Y")


def split_cell(day_events: list[Event], mode: ViewMode) -> tuple[list[Event], int]:
    """Events shown in a grid cell, and how many are collapsed."""
    limit = CELL_LIMITS.get(mode)
    if limit is None:
        return day_events, 0
    return day_events[:limit], max(len(day_events) - limit, 0)


def format_event_line(event: Event) -> str:
    """
    Format a single event for display.

    Pure function - no I/O.
    """
    location = f" @ {event.location}" if event.location else ""
    return f"{event.time}-{event.end_time} {event.title} [{event.category.value}]{location}"


def format_view(view: CalendarView) -> str:
    """Plain-text rendering of a view, one block per date with events."""
    lines = [f"# {view.title}"]
    mode = view.state.view_mode

    for d in view.dates:
        key = date_key(d)
        day_events = view.events_by_date[key]
        if not day_events and mode != ViewMode.DAY:
            continue

        marker = " !" if view.conflicts[key] else ""
        lines.append("")
        lines.append(f"### {d.strftime('%A, %B')} {ordinal(d.day)}{marker}")

        if not day_events:
            lines.append("  No events.")
            continue

        if mode == ViewMode.DAY:
            for hour in range(24):
                hour_events = events_by_hour(day_events, hour)
                if hour_events:
                    lines.append(f"  {hour:02d}:00")
                    lines.extend(f"    {format_event_line(e)}" for e in hour_events)
            continue

        shown, hidden = split_cell(day_events, mode)
        lines.extend(f"  {format_event_line(e)}" for e in shown)
        if hidden:
            lines.append(f"  +{hidden} more")

    if len(lines) == 1:
        lines.append("")
        lines.append("No events.")
    return "\n".join(lines)


def format_statistics(stats: EventStatistics) -> str:
    """Plain-text rendering of the statistics panel."""
    lines = [
        f"This week: {stats.this_week_count}",
        f"Next week: {stats.next_week_count}",
        "",
        "Categories:",
    ]
    histogram = top_categories(stats.category_histogram, limit=len(CATEGORY_ORDER))
    lines.extend(f"  {category.value:10} {count}" for category, count in histogram)
    if not histogram:
        lines.append("  None")

    lines.append("")
    lines.append("Upcoming:")
    for event in stats.upcoming:
        when = parse_date_key(event.date).strftime("%a, %b %d")
        lines.append(f"  {when} at {event.time}  {event.title}")
    if not stats.upcoming:
        lines.append("  No upcoming events")
    return "\n".join(lines)
