"""
Time-overlap detection for the events of a single day.

Only neighbours in start-time order are compared. An event fully contained
in an earlier, longer event that is not its immediate predecessor is not
flagged; see DESIGN.md.
"""

from datetime import date

from .events import Event, date_key, group_by_date


def sort_by_time(day_events: list[Event]) -> list[Event]:
    """Sort by HH:MM start; equal starts keep their input order."""
    return sorted(day_events, key=lambda e: e.time)


def adjacent_conflicts(day_events: list[Event]) -> list[tuple[Event, Event]]:
    """
    Adjacent (earlier, later) pairs where the earlier one ends after the
    later one starts.

    Pure function - no I/O.
    """
    if len(day_events) < 2:
        return []

    ordered = sort_by_time(day_events)
    conflicts = []
    for current, following in zip(ordered, ordered[1:]):
        # Both sides are zero-padded HH:MM, so string order is time order
        if current.end_time > following.time:
            conflicts.append((current, following))
    return conflicts


def has_conflict(day_events: list[Event]) -> bool:
    """Whether any adjacent pair of the day's events overlaps."""
    return bool(adjacent_conflicts(day_events))


def conflict_map(events: list[Event], dates: list[date]) -> dict[str, bool]:
    """Conflict flag for every date key in the window."""
    grouped = group_by_date(events, dates)
    return {date_key(d): has_conflict(grouped[date_key(d)]) for d in dates}
