"""Visible date window for month, week and day views."""

import calendar
from datetime import date, timedelta
from enum import Enum


class ViewMode(Enum):
    """Calendar view shape; also sets the navigation step unit."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"


def start_of_week(d: date) -> date:
    """The Sunday on or before d."""
    # date.weekday(): Monday=0 ... Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def end_of_week(d: date) -> date:
    """The Saturday on or after d."""
    return start_of_week(d) + timedelta(days=6)


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def last_of_month(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def in_month(d: date, anchor: date) -> bool:
    """Whether d falls in the same month as anchor (grid padding cells do not)."""
    return (d.year, d.month) == (anchor.year, anchor.month)


def date_range(start: date, end: date) -> list[date]:
    """Every date from start through end, inclusive."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def view_dates(anchor: date, mode: ViewMode) -> list[date]:
    """
    Dates to display for a view, ascending and contiguous.

    month: Sunday on/before the 1st through Saturday on/after the last day,
           so the length is always a multiple of 7.
    week:  the Sunday-Saturday week containing anchor.
    day:   just the anchor.

    Pure function - no I/O.
    """
    match mode:
        case ViewMode.MONTH:
            return date_range(
                start_of_week(first_of_month(anchor)),
                end_of_week(last_of_month(anchor)),
            )
        case ViewMode.WEEK:
            return date_range(start_of_week(anchor), end_of_week(anchor))
        case ViewMode.DAY:
            return [anchor]
    raise ValueError(f"Unknown view mode: {mode!r}")
