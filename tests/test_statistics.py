"""Tests for statistics aggregation."""

from datetime import datetime

import pytest

from agenda.core.events import Category
from agenda.core.statistics import (
    category_histogram,
    compute_statistics,
    starts_at,
    top_categories,
)


@pytest.fixture
def now():
    # Wednesday; this week is Jan 12-18, next week Jan 19-25
    return datetime(2025, 1, 15, 10, 0)


class TestWeeklyCounts:
    def test_this_and_next_week(self, make_event, now):
        events = [
            make_event(date="2025-01-11"),  # last Saturday
            make_event(date="2025-01-12"),  # Sunday
            make_event(date="2025-01-18"),  # Saturday
            make_event(date="2025-01-19"),  # next Sunday
            make_event(date="2025-01-25"),
            make_event(date="2025-01-26"),  # week after next
        ]
        stats = compute_statistics(events, now=now)
        assert stats.this_week_count == 2
        assert stats.next_week_count == 2

    def test_empty(self, now):
        stats = compute_statistics([], now=now)
        assert stats.this_week_count == 0
        assert stats.next_week_count == 0
        assert stats.category_histogram == {}
        assert stats.upcoming == []


class TestCategoryHistogram:
    def test_counts_all_events(self, make_event, now):
        events = [
            make_event(date="2024-06-01", category=Category.DEADLINE),
            make_event(date="2025-01-15", category=Category.WORK),
            make_event(date="2030-01-01", category=Category.DEADLINE),
        ]
        stats = compute_statistics(events, now=now)
        assert stats.category_histogram == {Category.DEADLINE: 2, Category.WORK: 1}

    def test_first_seen_key_order(self, make_event):
        events = [make_event(category=Category.REMINDER), make_event(category=Category.WORK)]
        assert list(category_histogram(events)) == [Category.REMINDER, Category.WORK]

    def test_top_categories_in_display_order(self):
        histogram = {Category.REMINDER: 5, Category.PERSONAL: 1, Category.WORK: 2, Category.MEETING: 4}
        assert top_categories(histogram) == [
            (Category.WORK, 2),
            (Category.PERSONAL, 1),
            (Category.MEETING, 4),
        ]


class TestUpcoming:
    def test_excludes_past_keeps_today(self, make_event, now):
        events = [
            make_event(date="2025-01-13", time="09:00", title="Monday"),
            make_event(date="2025-01-15", time="08:00", title="Earlier today"),
            make_event(date="2025-01-16", time="09:00", title="Tomorrow"),
        ]
        stats = compute_statistics(events, now=now)
        assert [e.title for e in stats.upcoming] == ["Earlier today", "Tomorrow"]

    def test_sorted_and_limited(self, make_event, now):
        events = [
            make_event(date="2025-01-22", time="09:00", title="Next Wed"),
            make_event(date="2025-01-16", time="14:00", title="Thu pm"),
            make_event(date="2025-01-16", time="08:30", title="Thu am"),
            make_event(date="2025-01-20", time="09:00", title="Next Mon"),
        ]
        stats = compute_statistics(events, now=now)
        assert [e.title for e in stats.upcoming] == ["Thu am", "Thu pm", "Next Mon"]

    def test_never_exceeds_limit_and_non_decreasing(self, make_event, now):
        events = [
            make_event(date=f"2025-01-{day:02d}", time=f"{hour:02d}:00")
            for day in range(12, 26)
            for hour in (18, 7, 12)
        ]
        stats = compute_statistics(events, now=now)
        assert len(stats.upcoming) == 3
        starts = [starts_at(e) for e in stats.upcoming]
        assert starts == sorted(starts)

    def test_ties_keep_input_order(self, make_event, now):
        events = [
            make_event(date="2025-01-16", time="09:00", title="first"),
            make_event(date="2025-01-16", time="09:00", title="second"),
        ]
        stats = compute_statistics(events, now=now)
        assert [e.title for e in stats.upcoming] == ["first", "second"]

    def test_only_this_and_next_week(self, make_event, now):
        events = [make_event(date="2025-01-27", title="Too far")]
        assert compute_statistics(events, now=now).upcoming == []

    def test_custom_limit(self, make_event, now):
        events = [make_event(date="2025-01-16", time=f"{h:02d}:00") for h in range(9, 15)]
        assert len(compute_statistics(events, now=now, upcoming_limit=5).upcoming) == 5


def test_starts_at(make_event):
    assert starts_at(make_event(date="2025-01-16", time="14:30")) == datetime(2025, 1, 16, 14, 30)
