from __future__ import annotations

from collections.abc import Sequence

from src.domain.errors import (
    KpiDomainError,
    create_period_error,
    create_validation_error,
)
from src.domain.models.breeding_kpi import (
    ConfidenceLevel,
    DeltaPoint,
    MonthlyPoint,
    TrendDirection,
    TrendSummary,
)
from src.domain.services.breeding_delta import compare_metrics
from src.domain.value_objects.month_period import MonthPeriod, month_range
from src.domain.value_objects.reporting_window import EARLIEST_SUPPORTED, LATEST_SUPPORTED
from src.domain.value_objects.result import Err, Ok, Result

DEFAULT_TREND_MONTHS = 6
MAX_TREND_MONTHS = 36
# Whole months whose expanded windows stay representable
EARLIEST_TREND_MONTH = MonthPeriod.of(EARLIEST_SUPPORTED).shift(1)
LATEST_TREND_MONTH = MonthPeriod.of(LATEST_SUPPORTED).shift(-1)


def resolve_trend_months(
    to_month: str | None = None,
    from_month: str | None = None,
    months: int | None = None,
    *,
    default_months: int = DEFAULT_TREND_MONTHS,
    current: MonthPeriod | None = None,
) -> Result[list[MonthPeriod], KpiDomainError]:
    """Turn the trend query into the list of months to compute, oldest first.

    `from_month` wins over `months` when both are given.
    """
    try:
        end = MonthPeriod.parse(to_month) if to_month else (current or MonthPeriod.current())
    except ValueError:
        return Err(create_validation_error("Invalid month format, expected YYYY-MM", "to_month"))

    if from_month:
        try:
            start = MonthPeriod.parse(from_month)
        except ValueError:
            return Err(
                create_validation_error("Invalid month format, expected YYYY-MM", "from_month")
            )
    else:
        count = default_months if months is None else months
        if not 1 <= count <= MAX_TREND_MONTHS:
            return Err(
                create_validation_error(
                    f"months must be between 1 and {MAX_TREND_MONTHS}", "months"
                )
            )
        start = end.shift(-(count - 1))

    if start > end:
        return Err(
            create_period_error(
                "Start month must be before or equal to end month",
                f"{start.key} to {end.key}",
            )
        )

    if start < EARLIEST_TREND_MONTH or end > LATEST_TREND_MONTH:
        return Err(
            create_period_error(
                f"Trend months must lie between {EARLIEST_TREND_MONTH.key} "
                f"and {LATEST_TREND_MONTH.key}",
                f"{start.key} to {end.key}",
            )
        )

    span_months = (end.year - start.year) * 12 + (end.month - start.month) + 1
    if span_months > MAX_TREND_MONTHS:
        return Err(
            create_period_error(
                f"Trend span cannot exceed {MAX_TREND_MONTHS} months",
                f"{start.key} to {end.key}",
            )
        )
    return Ok(month_range(start, end))


def summarize_trend(series: Sequence[MonthlyPoint], deltas: Sequence[DeltaPoint]) -> TrendSummary:
    improving = 0
    declining = 0
    for previous, current in zip(series, series[1:]):
        for direction in compare_metrics(current.metrics, previous.metrics).values():
            if direction == "improving":
                improving += 1
            elif direction == "declining":
                declining += 1

    direction: TrendDirection = "stable"
    if improving > declining:
        direction = "improving"
    elif declining > improving:
        direction = "declining"

    return TrendSummary(direction=direction, confidence=_confidence(len(series) + len(deltas)))


def _confidence(data_points: int) -> ConfidenceLevel:
    if data_points >= 12:
        return "high"
    if data_points >= 6:
        return "medium"
    return "low"
