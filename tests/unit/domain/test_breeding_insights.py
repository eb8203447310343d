from __future__ import annotations

from src.domain.models.breeding_kpi import BreedingCounts, BreedingMetrics
from src.domain.services.breeding_insights import evaluate_data_quality, generate_insights


def test_data_quality_levels():
    assert evaluate_data_quality(BreedingCounts(inseminations=40, calvings=10)) == "high"
    assert evaluate_data_quality(BreedingCounts(inseminations=15, calvings=5)) == "medium"
    assert evaluate_data_quality(BreedingCounts(inseminations=2, calvings=4)) == "low"


def test_no_events_insight():
    assert generate_insights(BreedingMetrics.empty(), BreedingCounts()) == [
        "No hay eventos reproductivos en el período"
    ]


def test_insights_per_metric():
    insights = generate_insights(
        BreedingMetrics(conception_rate=65.0, avg_days_open=130.0, ai_per_conception=1.8),
        BreedingCounts(inseminations=20, conceptions=13, calvings=10),
    )
    assert insights == [
        "La tasa de concepción es buena (60% o más)",
        "Es necesario reducir los días abiertos (más de 120 días)",
        "La eficiencia de inseminación está en un nivel estándar",
    ]


def test_events_without_metrics_fall_back_to_generic_insight():
    insights = generate_insights(BreedingMetrics.empty(), BreedingCounts(calvings=1))
    assert insights == ["No hay suficientes datos para un análisis detallado"]
