from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.domain.value_objects.reporting_window import (
    EARLIEST_SUPPORTED,
    LATEST_SUPPORTED,
    ReportingWindow,
)


def at(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def test_default_window_is_last_365_days():
    now = at(2024, 6, 1)
    window = ReportingWindow.default(now)

    assert window.to == now
    assert window.from_ == now - timedelta(days=365)


def test_expanded_window_adds_margins():
    window = ReportingWindow(from_=at(2024, 1, 1), to=at(2024, 12, 31)).expanded()

    assert window.from_ == at(2024, 1, 1) - timedelta(days=500)
    assert window.to == at(2024, 12, 31) + timedelta(days=300)


def test_windows_near_date_limits_are_not_expandable():
    assert not ReportingWindow(from_=at(9999, 12, 31), to=at(9999, 12, 31)).is_expandable()
    assert not ReportingWindow(from_=at(1, 1, 1), to=at(2024, 1, 1)).is_expandable()


def test_supported_bounds_expand_without_overflow():
    window = ReportingWindow(from_=EARLIEST_SUPPORTED, to=LATEST_SUPPORTED)

    assert window.is_expandable()
    expanded = window.expanded()
    assert expanded.from_.year == 1
    assert expanded.to.year == 9999
