from __future__ import annotations

import logging

from src.application.use_cases.kpi.get_breeding_kpi import load_snapshot
from src.domain.errors import KpiDomainError, get_error_details
from src.domain.models.breeding_kpi import BreedingTrends, MonthlyPoint
from src.domain.ports.breeding_events_repo import BreedingEventsRepo
from src.domain.services.breeding_delta import compute_deltas
from src.domain.services.breeding_trends import (
    DEFAULT_TREND_MONTHS,
    resolve_trend_months,
    summarize_trend,
)
from src.domain.value_objects.month_period import MonthPeriod
from src.domain.value_objects.result import Err, Ok, Result

logger = logging.getLogger(__name__)


async def execute(
    repo: BreedingEventsRepo,
    owner_id: int,
    to_month: str | None = None,
    from_month: str | None = None,
    months: int | None = None,
    *,
    default_months: int = DEFAULT_TREND_MONTHS,
    current: MonthPeriod | None = None,
) -> Result[BreedingTrends, KpiDomainError]:
    """Monthly breeding KPIs over a span of calendar months, oldest first.

    Each month is computed on its own window, loading events through the
    repository with that month's expanded window.
    """
    span = resolve_trend_months(
        to_month,
        from_month,
        months,
        default_months=default_months,
        current=current,
    )
    if not span.ok:
        logger.info(
            "Rejected breeding trends query",
            extra={"kpi_error": get_error_details(span.error)},
        )
        return span

    series: list[MonthlyPoint] = []
    # One session per request: months are loaded one after another
    for month in span.value:
        snapshot = await load_snapshot(repo, owner_id, month.window())
        if not snapshot.ok:
            logger.warning(
                "Breeding trends failed at %s",
                month.key,
                extra={"kpi_error": get_error_details(snapshot.error)},
            )
            return Err(snapshot.error)
        series.append(
            MonthlyPoint(
                month=month.key,
                metrics=snapshot.value.metrics,
                counts=snapshot.value.counts,
            )
        )

    deltas = compute_deltas(series)
    summary = summarize_trend(series, deltas)
    return Ok(BreedingTrends(series=series, deltas=deltas, summary=summary))
