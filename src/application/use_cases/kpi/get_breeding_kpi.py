from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.domain.errors import (
    KpiDomainError,
    create_calculation_error,
    create_infra_error,
    create_period_error,
    create_validation_error,
    get_error_details,
)
from src.domain.models.breeding_kpi import (
    BreedingCounts,
    BreedingKpiSnapshot,
    BreedingMetrics,
    DataQuality,
)
from src.domain.ports.breeding_events_repo import BreedingEventsRepo
from src.domain.services.breeding_insights import (
    evaluate_data_quality,
    generate_insights,
    total_events,
)
from src.domain.services.breeding_metrics import (
    compute_breeding_metrics,
    validate_breeding_metrics,
)
from src.domain.value_objects.reporting_window import DEFAULT_WINDOW_DAYS, ReportingWindow
from src.domain.value_objects.result import Err, Ok, Result
from src.utils.datetime_tz import parse_iso_datetime

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BreedingKpiSummary:
    total_events: int
    data_quality: DataQuality
    insights: list[str]
    calculated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class BreedingKpiResult:
    metrics: BreedingMetrics
    counts: BreedingCounts
    period: ReportingWindow
    summary: BreedingKpiSummary


def parse_window(
    from_iso: str | None,
    to_iso: str | None,
    *,
    now: datetime | None = None,
    default_days: int = DEFAULT_WINDOW_DAYS,
) -> Result[ReportingWindow, KpiDomainError]:
    parsed: dict[str, datetime | None] = {"from": None, "to": None}
    for name, raw in (("from", from_iso), ("to", to_iso)):
        if not raw:
            continue
        try:
            parsed[name] = parse_iso_datetime(raw)
        except (ValueError, OverflowError):
            return Err(create_validation_error(f"Invalid ISO-8601 datetime: {raw!r}", name))

    window = ReportingWindow.resolve(parsed["from"], parsed["to"], now=now, days=default_days)
    if window.from_ > window.to:
        return Err(
            create_period_error(
                "'from' must be before or equal to 'to'",
                f"{window.from_.isoformat()} to {window.to.isoformat()}",
            )
        )
    if not window.is_expandable():
        return Err(
            create_period_error(
                "Reporting window is outside the supported date range",
                f"{window.from_.isoformat()} to {window.to.isoformat()}",
            )
        )
    return Ok(window)


async def load_snapshot(
    repo: BreedingEventsRepo,
    owner_id: int,
    window: ReportingWindow,
) -> Result[BreedingKpiSnapshot, KpiDomainError]:
    """Fetch events for `window` and run the calculator on them."""
    try:
        events = await repo.find_events_for_breeding_kpi(owner_id, window.from_, window.to)
    except Exception as exc:
        logger.exception("Failed to load breeding events for owner %s", owner_id)
        return Err(create_infra_error("Failed to load breeding events", exc))

    try:
        snapshot = compute_breeding_metrics(owner_id, window, events)
    except Exception as exc:
        logger.exception("Breeding metrics calculation failed for owner %s", owner_id)
        return Err(create_calculation_error("Failed to calculate breeding metrics", str(exc)))

    validated = validate_breeding_metrics(snapshot.metrics)
    if not validated.ok:
        return validated
    return Ok(snapshot)


async def execute(
    repo: BreedingEventsRepo,
    owner_id: int,
    from_iso: str | None = None,
    to_iso: str | None = None,
    *,
    default_days: int = DEFAULT_WINDOW_DAYS,
) -> Result[BreedingKpiResult, KpiDomainError]:
    window_result = parse_window(from_iso, to_iso, default_days=default_days)
    if not window_result.ok:
        logger.info(
            "Rejected breeding KPI query",
            extra={"kpi_error": get_error_details(window_result.error)},
        )
        return window_result
    window = window_result.value

    snapshot_result = await load_snapshot(repo, owner_id, window)
    if not snapshot_result.ok:
        logger.warning(
            "Breeding KPI failed",
            extra={"kpi_error": get_error_details(snapshot_result.error)},
        )
        return snapshot_result
    snapshot = snapshot_result.value

    summary = BreedingKpiSummary(
        total_events=total_events(snapshot.counts),
        data_quality=evaluate_data_quality(snapshot.counts),
        insights=generate_insights(snapshot.metrics, snapshot.counts),
    )
    return Ok(
        BreedingKpiResult(
            metrics=snapshot.metrics,
            counts=snapshot.counts,
            period=window,
            summary=summary,
        )
    )
