"""Functional core - pure calendar logic with no I/O."""

from .errors import EventNotFoundError, FormatError, ValidationError
from .timeofday import parse_time, format_time, end_time
from .events import (
    CATEGORY_ORDER,
    Category,
    Event,
    RecordFailure,
    date_key,
    parse_date_key,
    parse_events,
    filter_by_category,
    events_on_date,
    events_by_hour,
    group_by_date,
)
from .window import ViewMode, view_dates, start_of_week, end_of_week
from .conflicts import has_conflict, adjacent_conflicts, conflict_map
from .navigation import ViewState, navigate, go_to_today, change_view, jump_to
from .statistics import EventStatistics, compute_statistics
from .authoring import create_event, update_event, delete_event
from .agenda import CalendarView, assemble_view

__all__ = [
    # Errors
    "EventNotFoundError",
    "FormatError",
    "ValidationError",
    # Time arithmetic
    "parse_time",
    "format_time",
    "end_time",
    # Events
    "CATEGORY_ORDER",
    "Category",
    "Event",
    "RecordFailure",
    "date_key",
    "parse_date_key",
    "parse_events",
    "filter_by_category",
    "events_on_date",
    "events_by_hour",
    "group_by_date",
    # Window
    "ViewMode",
    "view_dates",
    "start_of_week",
    "end_of_week",
    # Conflicts
    "has_conflict",
    "adjacent_conflicts",
    "conflict_map",
    # Navigation
    "ViewState",
    "navigate",
    "go_to_today",
    "change_view",
    "jump_to",
    # Statistics
    "EventStatistics",
    "compute_statistics",
    # Authoring
    "create_event",
    "update_event",
    "delete_event",
    # Views
    "CalendarView",
    "assemble_view",
]
