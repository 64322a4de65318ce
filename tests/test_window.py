"""Tests for the visible date window."""

from datetime import date, timedelta

import pytest

from agenda.core.window import (
    ViewMode,
    end_of_week,
    in_month,
    start_of_week,
    view_dates,
)

SUNDAY = 6  # date.weekday()
SATURDAY = 5


class TestWeekBounds:
    def test_start_of_week_is_sunday(self):
        assert start_of_week(date(2025, 1, 15)) == date(2025, 1, 12)

    def test_sunday_is_its_own_start(self):
        assert start_of_week(date(2025, 1, 12)) == date(2025, 1, 12)

    def test_saturday_end(self):
        assert end_of_week(date(2025, 1, 15)) == date(2025, 1, 18)
        assert end_of_week(date(2025, 1, 18)) == date(2025, 1, 18)


class TestMonthView:
    def test_pads_to_full_weeks(self):
        dates = view_dates(date(2025, 1, 15), ViewMode.MONTH)
        assert dates[0] == date(2024, 12, 29)
        assert dates[-1] == date(2025, 2, 1)
        assert len(dates) == 35

    def test_month_already_aligned(self):
        """Feb 2026 starts on a Sunday and ends on a Saturday: no padding."""
        dates = view_dates(date(2026, 2, 10), ViewMode.MONTH)
        assert dates[0] == date(2026, 2, 1)
        assert dates[-1] == date(2026, 2, 28)
        assert len(dates) == 28

    def test_six_week_month(self):
        dates = view_dates(date(2026, 8, 1), ViewMode.MONTH)
        assert len(dates) == 42

    @pytest.mark.parametrize("year", [2023, 2024, 2025, 2026])
    @pytest.mark.parametrize("month", range(1, 13))
    def test_multiple_of_seven_and_covers_month(self, year, month):
        anchor = date(year, month, 1)
        dates = view_dates(anchor, ViewMode.MONTH)

        assert len(dates) % 7 == 0
        assert 28 <= len(dates) <= 42
        assert dates[0].weekday() == SUNDAY
        assert dates[-1].weekday() == SATURDAY
        assert anchor in dates
        next_month = date(year + month // 12, month % 12 + 1, 1)
        assert next_month - timedelta(days=1) in dates

    def test_contiguous_ascending(self):
        dates = view_dates(date(2024, 2, 29), ViewMode.MONTH)
        assert all(b - a == timedelta(days=1) for a, b in zip(dates, dates[1:]))


class TestWeekView:
    @pytest.mark.parametrize("day", range(1, 15))
    def test_seven_days_from_sunday(self, day):
        anchor = date(2025, 3, day)
        dates = view_dates(anchor, ViewMode.WEEK)
        assert len(dates) == 7
        assert dates[0].weekday() == SUNDAY
        assert anchor in dates

    def test_crosses_year_boundary(self):
        dates = view_dates(date(2025, 1, 1), ViewMode.WEEK)
        assert dates[0] == date(2024, 12, 29)
        assert dates[-1] == date(2025, 1, 4)


class TestDayView:
    def test_single_anchor(self):
        assert view_dates(date(2025, 1, 15), ViewMode.DAY) == [date(2025, 1, 15)]


def test_in_month():
    anchor = date(2025, 1, 15)
    assert in_month(date(2025, 1, 1), anchor)
    assert not in_month(date(2024, 12, 31), anchor)
    assert not in_month(date(2024, 1, 15), anchor)
