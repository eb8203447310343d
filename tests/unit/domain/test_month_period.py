from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.value_objects.month_period import MonthPeriod, month_range


def test_parse_and_key():
    month = MonthPeriod.parse("2024-03")
    assert month == MonthPeriod(2024, 3)
    assert month.key == "2024-03"
    assert str(month) == "2024-03"


@pytest.mark.parametrize("raw", ["2024-3", "2024-13", "2024-00", "March 2024", ""])
def test_parse_rejects_bad_input(raw):
    with pytest.raises(ValueError):
        MonthPeriod.parse(raw)


def test_shift_crosses_year_boundaries():
    assert MonthPeriod(2024, 1).shift(-1) == MonthPeriod(2023, 12)
    assert MonthPeriod(2024, 11).shift(3) == MonthPeriod(2025, 2)
    assert MonthPeriod(2024, 6).shift(-18) == MonthPeriod(2022, 12)


def test_window_covers_whole_utc_month():
    window = MonthPeriod(2024, 2).window()

    assert window.from_ == datetime(2024, 2, 1, tzinfo=timezone.utc)
    assert window.to == datetime(2024, 3, 1, tzinfo=timezone.utc) - timedelta(microseconds=1)
    assert window.contains(datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone.utc))
    assert not window.contains(datetime(2024, 3, 1, tzinfo=timezone.utc))


def test_of_uses_utc():
    local = datetime(2024, 1, 31, 22, tzinfo=timezone(timedelta(hours=-5)))
    assert MonthPeriod.of(local) == MonthPeriod(2024, 2)


def test_month_range_is_inclusive_and_ordered():
    months = month_range(MonthPeriod(2023, 11), MonthPeriod(2024, 2))
    assert [m.key for m in months] == ["2023-11", "2023-12", "2024-01", "2024-02"]
    assert month_range(MonthPeriod(2024, 2), MonthPeriod(2024, 1)) == []
