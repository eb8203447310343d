from __future__ import annotations

from collections.abc import Sequence

from src.domain.models.breeding_kpi import (
    METRIC_FIELDS,
    BreedingMetrics,
    DeltaPoint,
    DeltaSummary,
    Improvement,
    MonthlyPoint,
    TrendDirection,
)
from src.domain.services.breeding_metrics import round1

# Relative change (in % of the previous value) below which a metric is "stable"
STABLE_CHANGE_PERCENT = 5.0
# Metrics where a higher value is better; the rest improve downward
HIGHER_IS_BETTER = frozenset({"conception_rate"})


def metric_difference(current: float | None, previous: float | None) -> float | None:
    if current is None or previous is None:
        return None
    return round1(current - previous)


def diff_metrics(current: BreedingMetrics, previous: BreedingMetrics) -> BreedingMetrics:
    return BreedingMetrics(
        **{name: metric_difference(current.get(name), previous.get(name)) for name in METRIC_FIELDS}
    )


def compute_deltas(series: Sequence[MonthlyPoint]) -> list[DeltaPoint]:
    """Month-over-month change; the first point has no predecessor and is all None."""
    deltas: list[DeltaPoint] = []
    for index, point in enumerate(series):
        if index == 0:
            deltas.append(DeltaPoint(month=point.month, metrics=BreedingMetrics.empty()))
            continue
        previous = series[index - 1]
        deltas.append(
            DeltaPoint(month=point.month, metrics=diff_metrics(point.metrics, previous.metrics))
        )
    return deltas


def classify_change(
    current: float | None, previous: float | None, *, higher_is_better: bool
) -> TrendDirection:
    if current is None or previous is None:
        return "stable"
    change = current - previous
    if change == 0:
        return "stable"
    if previous != 0 and abs(change / previous) * 100 < STABLE_CHANGE_PERCENT:
        return "stable"
    if higher_is_better:
        return "improving" if change > 0 else "declining"
    return "improving" if change < 0 else "declining"


def compare_metrics(
    current: BreedingMetrics, previous: BreedingMetrics
) -> dict[str, TrendDirection]:
    return {
        name: classify_change(
            current.get(name), previous.get(name), higher_is_better=name in HIGHER_IS_BETTER
        )
        for name in METRIC_FIELDS
    }


def summarize_delta(delta: BreedingMetrics) -> DeltaSummary:
    positive = 0
    negative = 0

    if delta.conception_rate is not None:
        if delta.conception_rate > 0:
            positive += 1
        elif delta.conception_rate < 0:
            negative += 1

    for value in (delta.avg_days_open, delta.ai_per_conception):
        if value is None:
            continue
        if value < 0:
            positive += 1
        elif value > 0:
            negative += 1

    # Calving interval: small swings are fine, large ones are not
    if delta.avg_calving_interval is not None:
        swing = abs(delta.avg_calving_interval)
        if swing < 30:
            positive += 1
        elif swing > 60:
            negative += 1

    improvement: Improvement = "neutral"
    if positive > negative:
        improvement = "positive"
    elif negative > positive:
        improvement = "negative"

    return DeltaSummary(improvement=improvement, key_changes=_key_changes(delta))


def _key_changes(delta: BreedingMetrics) -> list[str]:
    changes: list[str] = []
    if delta.conception_rate is not None and abs(delta.conception_rate) > 5:
        verb = "mejoró" if delta.conception_rate > 0 else "bajó"
        changes.append(f"La tasa de concepción {verb} ({abs(delta.conception_rate):.1f}%)")
    if delta.avg_days_open is not None and abs(delta.avg_days_open) > 10:
        verb = "se acortaron" if delta.avg_days_open < 0 else "se alargaron"
        changes.append(f"Los días abiertos {verb} ({abs(delta.avg_days_open):.1f} días)")
    if delta.ai_per_conception is not None and abs(delta.ai_per_conception) > 0.5:
        verb = "disminuyeron" if delta.ai_per_conception < 0 else "aumentaron"
        changes.append(
            f"Las inseminaciones por concepción {verb} ({abs(delta.ai_per_conception):.1f})"
        )
    return changes
