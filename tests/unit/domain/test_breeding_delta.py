from __future__ import annotations

from src.domain.models.breeding_kpi import BreedingCounts, BreedingMetrics, MonthlyPoint
from src.domain.services.breeding_delta import (
    classify_change,
    compare_metrics,
    compute_deltas,
    metric_difference,
    summarize_delta,
)


def point(month: str, **metrics) -> MonthlyPoint:
    return MonthlyPoint(month=month, metrics=BreedingMetrics(**metrics), counts=BreedingCounts())


def test_first_delta_is_all_null():
    deltas = compute_deltas([point("2024-01", conception_rate=40.0)])

    assert len(deltas) == 1
    assert deltas[0].month == "2024-01"
    assert deltas[0].metrics == BreedingMetrics.empty()


def test_deltas_are_differences_with_previous_month():
    series = [
        point("2024-01", conception_rate=40.0, avg_days_open=100.0),
        point("2024-02", conception_rate=55.5, avg_days_open=None),
        point("2024-03", conception_rate=50.0, avg_days_open=80.2),
    ]

    deltas = compute_deltas(series)

    assert [d.month for d in deltas] == ["2024-01", "2024-02", "2024-03"]
    assert deltas[1].metrics.conception_rate == 15.5
    assert deltas[1].metrics.avg_days_open is None
    assert deltas[2].metrics.conception_rate == -5.5
    assert deltas[2].metrics.avg_days_open is None
    assert deltas[2].metrics.ai_per_conception is None


def test_metric_difference_rounds_to_one_decimal():
    assert metric_difference(0.3, 0.1) == 0.2
    assert metric_difference(None, 1.0) is None
    assert metric_difference(1.0, None) is None


def test_classify_change_respects_metric_direction():
    assert classify_change(60.0, 40.0, higher_is_better=True) == "improving"
    assert classify_change(80.0, 100.0, higher_is_better=False) == "improving"
    assert classify_change(120.0, 100.0, higher_is_better=False) == "declining"
    assert classify_change(101.0, 100.0, higher_is_better=False) == "stable"
    assert classify_change(None, 100.0, higher_is_better=False) == "stable"


def test_compare_metrics_covers_every_metric():
    result = compare_metrics(
        BreedingMetrics(conception_rate=30.0, avg_days_open=90.0),
        BreedingMetrics(conception_rate=50.0, avg_days_open=90.0),
    )
    assert result == {
        "conception_rate": "declining",
        "avg_days_open": "stable",
        "avg_calving_interval": "stable",
        "ai_per_conception": "stable",
    }


def test_summarize_delta_positive_with_key_changes():
    summary = summarize_delta(
        BreedingMetrics(conception_rate=10.0, avg_days_open=-15.0, ai_per_conception=-0.2)
    )

    assert summary.improvement == "positive"
    assert summary.key_changes == [
        "La tasa de concepción mejoró (10.0%)",
        "Los días abiertos se acortaron (15.0 días)",
    ]


def test_summarize_delta_negative():
    summary = summarize_delta(
        BreedingMetrics(conception_rate=-8.0, ai_per_conception=0.8, avg_calving_interval=75.0)
    )

    assert summary.improvement == "negative"
    assert "La tasa de concepción bajó (8.0%)" in summary.key_changes
    assert "Las inseminaciones por concepción aumentaron (0.8)" in summary.key_changes


def test_summarize_empty_delta_is_neutral():
    summary = summarize_delta(BreedingMetrics.empty())
    assert summary.improvement == "neutral"
    assert summary.key_changes == []
