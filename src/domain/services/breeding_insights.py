from __future__ import annotations

from src.domain.models.breeding_kpi import BreedingCounts, BreedingMetrics, DataQuality


def total_events(counts: BreedingCounts) -> int:
    return counts.inseminations + counts.calvings


def evaluate_data_quality(counts: BreedingCounts) -> DataQuality:
    events = total_events(counts)
    if events >= 50 and counts.inseminations >= 10 and counts.calvings >= 5:
        return "high"
    if events >= 20 and counts.inseminations >= 5:
        return "medium"
    return "low"


def generate_insights(metrics: BreedingMetrics, counts: BreedingCounts) -> list[str]:
    if total_events(counts) == 0:
        return ["No hay eventos reproductivos en el período"]

    insights: list[str] = []

    if metrics.conception_rate is not None:
        if metrics.conception_rate >= 60:
            insights.append("La tasa de concepción es buena (60% o más)")
        elif metrics.conception_rate >= 40:
            insights.append("La tasa de concepción está en un nivel estándar")
        else:
            insights.append("La tasa de concepción necesita mejorar (menos de 40%)")

    if metrics.avg_days_open is not None:
        if metrics.avg_days_open <= 90:
            insights.append("Los días abiertos están bien controlados (90 días o menos)")
        elif metrics.avg_days_open <= 120:
            insights.append("Los días abiertos están dentro del rango aceptable")
        else:
            insights.append("Es necesario reducir los días abiertos (más de 120 días)")

    if metrics.ai_per_conception is not None:
        if metrics.ai_per_conception <= 1.5:
            insights.append("La eficiencia de inseminación es buena (1.5 o menos)")
        elif metrics.ai_per_conception <= 2.0:
            insights.append("La eficiencia de inseminación está en un nivel estándar")
        else:
            insights.append("Es necesario mejorar la eficiencia de inseminación (más de 2.0)")

    if not insights:
        insights.append("No hay suficientes datos para un análisis detallado")
    return insights
