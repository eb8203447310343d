from __future__ import annotations

from src.domain.errors import PeriodError, ValidationError
from src.domain.models.breeding_kpi import BreedingCounts, BreedingMetrics, MonthlyPoint
from src.domain.services.breeding_delta import compute_deltas
from src.domain.services.breeding_trends import (
    MAX_TREND_MONTHS,
    resolve_trend_months,
    summarize_trend,
)
from src.domain.value_objects.month_period import MonthPeriod

CURRENT = MonthPeriod(2024, 6)


def keys(result) -> list[str]:
    return [m.key for m in result.value]


def test_defaults_to_six_months_ending_current():
    result = resolve_trend_months(current=CURRENT)

    assert result.ok
    assert keys(result) == ["2024-01", "2024-02", "2024-03", "2024-04", "2024-05", "2024-06"]


def test_months_counts_back_from_to_month():
    result = resolve_trend_months("2024-02", months=3, current=CURRENT)
    assert keys(result) == ["2023-12", "2024-01", "2024-02"]


def test_from_month_wins_over_months():
    result = resolve_trend_months("2024-04", "2024-02", months=12, current=CURRENT)
    assert keys(result) == ["2024-02", "2024-03", "2024-04"]


def test_single_month():
    result = resolve_trend_months("2024-04", "2024-04", current=CURRENT)
    assert keys(result) == ["2024-04"]


def test_invalid_to_month_is_a_validation_error():
    result = resolve_trend_months("2024/04", current=CURRENT)

    assert not result.ok
    assert isinstance(result.error, ValidationError)
    assert result.error.field == "to_month"


def test_invalid_from_month_is_a_validation_error():
    result = resolve_trend_months("2024-04", "04-2024", current=CURRENT)

    assert not result.ok
    assert result.error.field == "from_month"


def test_months_out_of_range():
    for months in (0, MAX_TREND_MONTHS + 1):
        result = resolve_trend_months(months=months, current=CURRENT)
        assert not result.ok
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "months"


def test_reversed_span_is_a_period_error():
    result = resolve_trend_months("2024-01", "2024-03", current=CURRENT)

    assert not result.ok
    assert isinstance(result.error, PeriodError)
    assert result.error.message == "Start month must be before or equal to end month"
    assert result.error.invalid_period == "2024-03 to 2024-01"


def test_span_longer_than_limit_is_a_period_error():
    result = resolve_trend_months("2024-12", "2021-01", current=CURRENT)

    assert not result.ok
    assert isinstance(result.error, PeriodError)


def test_summary_follows_majority_of_changes():
    series = [
        MonthlyPoint("2024-01", BreedingMetrics(conception_rate=40.0), BreedingCounts()),
        MonthlyPoint("2024-02", BreedingMetrics(conception_rate=50.0), BreedingCounts()),
        MonthlyPoint("2024-03", BreedingMetrics(conception_rate=60.0), BreedingCounts()),
    ]

    summary = summarize_trend(series, compute_deltas(series))

    assert summary.direction == "improving"
    assert summary.confidence == "medium"


def test_summary_of_single_point_is_stable_and_low_confidence():
    series = [MonthlyPoint("2024-01", BreedingMetrics.empty(), BreedingCounts())]

    summary = summarize_trend(series, compute_deltas(series))

    assert summary.direction == "stable"
    assert summary.confidence == "low"


def test_months_beyond_representable_dates_are_period_errors():
    for to_month in ("9999-12", "9999-03", "0000-03", "0001-06"):
        result = resolve_trend_months(to_month, months=1, current=CURRENT)
        assert not result.ok
        assert isinstance(result.error, PeriodError)


def test_extreme_supported_months_resolve():
    assert keys(resolve_trend_months("9999-02", months=1, current=CURRENT)) == ["9999-02"]
    assert keys(resolve_trend_months("0002-06", months=1, current=CURRENT)) == ["0002-06"]
    for month in resolve_trend_months("9999-02", months=1, current=CURRENT).value:
        assert month.window().expanded().to.year == 9999
