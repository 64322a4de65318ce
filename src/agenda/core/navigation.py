"""View state and view-aware navigation - no I/O dependencies."""

import calendar
from dataclasses import dataclass, replace
from datetime import date, timedelta

from .window import ViewMode


@dataclass(frozen=True)
class ViewState:
    """What the calendar is looking at. Owned by the caller, never stored here."""

    anchor_date: date
    view_mode: ViewMode = ViewMode.MONTH

    @classmethod
    def initial(cls, today: date | None = None) -> "ViewState":
        """Session start: today, month view."""
        return cls(anchor_date=today or date.today(), view_mode=ViewMode.MONTH)


def add_months(d: date, months: int) -> date:
    """
    Shift d by whole months, clamping the day to the target month's length.

    Jan 31 + 1 month is Feb 28 (Feb 29 in leap years).
    """
    month_index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def step(d: date, mode: ViewMode, count: int) -> date:
    """Move d by count units of the view's step (month, week or day)."""
    match mode:
        case ViewMode.MONTH:
            return add_months(d, count)
        case ViewMode.WEEK:
            return d + timedelta(weeks=count)
        case ViewMode.DAY:
            return d + timedelta(days=count)
    raise ValueError(f"Unknown view mode: {mode!r}")


def navigate(state: ViewState, direction: str) -> ViewState:
    """Apply a "next" or "prev" transition."""
    if direction == "next":
        return replace(state, anchor_date=step(state.anchor_date, state.view_mode, 1))
    if direction == "prev":
        return replace(state, anchor_date=step(state.anchor_date, state.view_mode, -1))
    raise ValueError(f"Unknown direction {direction!r}: expected 'next' or 'prev'")


def go_to_today(state: ViewState, today: date | None = None) -> ViewState:
    """Reset the anchor to today, keeping the view mode."""
    return replace(state, anchor_date=today or date.today())


def change_view(state: ViewState, mode: ViewMode) -> ViewState:
    """Switch view mode without moving the anchor."""
    return replace(state, view_mode=mode)


def jump_to(state: ViewState, target: date) -> ViewState:
    """Anchor on an arbitrary date (mini-calendar click)."""
    return replace(state, anchor_date=target)
