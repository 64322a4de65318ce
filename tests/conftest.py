"""Shared fixtures."""

from datetime import date

import pytest

from agenda.core.events import Category, Event


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def make_event():
    """Factory for creating events."""
    counter = iter(range(1, 10_000))

    def _make(
        time: str = "09:00",
        duration: int = 60,
        date: str = "2025-01-15",
        category: Category = Category.WORK,
        title: str | None = None,
        id: str | None = None,
        **extra,
    ) -> Event:
        n = next(counter)
        return Event(
            id=id or str(n),
            title=title or f"Event {n}",
            date=date,
            time=time,
            duration_minutes=duration,
            category=category,
            **extra,
        )

    return _make
