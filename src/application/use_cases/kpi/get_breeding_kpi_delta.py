from __future__ import annotations

import dataclasses

from src.application.use_cases.kpi import get_breeding_trends
from src.domain.errors import KpiDomainError, ValidationError
from src.domain.models.breeding_kpi import BreedingKpiDelta, BreedingMetrics
from src.domain.ports.breeding_events_repo import BreedingEventsRepo
from src.domain.services.breeding_delta import summarize_delta
from src.domain.value_objects.month_period import MonthPeriod
from src.domain.value_objects.result import Err, Ok, Result


async def execute(
    repo: BreedingEventsRepo,
    owner_id: int,
    month: str | None = None,
    *,
    current: MonthPeriod | None = None,
) -> Result[BreedingKpiDelta, KpiDomainError]:
    """Change of every breeding KPI between `month` and the month before it."""
    trends = await get_breeding_trends.execute(
        repo, owner_id, to_month=month, months=2, current=current
    )
    if not trends.ok:
        error = trends.error
        # Callers of the delta know the month as `month`
        if isinstance(error, ValidationError) and error.field == "to_month":
            return Err(dataclasses.replace(error, field="month"))
        return trends

    if not trends.value.deltas:
        empty = BreedingMetrics.empty()
        return Ok(BreedingKpiDelta(month=None, delta=empty, summary=summarize_delta(empty)))

    last = trends.value.deltas[-1]
    return Ok(
        BreedingKpiDelta(
            month=last.month,
            delta=last.metrics,
            summary=summarize_delta(last.metrics),
        )
    )
