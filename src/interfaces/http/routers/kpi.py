from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.application.errors import app_error_from_kpi
from src.application.use_cases.kpi import (
    get_breeding_kpi,
    get_breeding_kpi_delta,
    get_breeding_trends,
)
from src.config.settings import Settings
from src.domain.ports.breeding_events_repo import BreedingEventsRepo
from src.interfaces.http.deps import get_app_settings, get_breeding_events_repo, get_owner_id
from src.interfaces.http.schemas.kpi import (
    BreedingKpiDeltaResponse,
    BreedingKpiResponse,
    BreedingTrendsResponse,
)

router = APIRouter(prefix="/kpi", tags=["kpi"])


@router.get("/breeding", response_model=BreedingKpiResponse)
async def get_breeding(
    from_iso: str | None = Query(default=None, alias="from"),
    to_iso: str | None = Query(default=None, alias="to"),
    owner_id: int = Depends(get_owner_id),
    settings: Settings = Depends(get_app_settings),
    repo: BreedingEventsRepo = Depends(get_breeding_events_repo),
) -> BreedingKpiResponse:
    """Breeding KPIs for the reporting window (default: last 365 days)."""
    result = await get_breeding_kpi.execute(
        repo,
        owner_id,
        from_iso,
        to_iso,
        default_days=settings.kpi_default_window_days,
    )
    if not result.ok:
        raise app_error_from_kpi(result.error)
    return BreedingKpiResponse.model_validate(result.value)


@router.get("/breeding/trends", response_model=BreedingTrendsResponse)
async def get_breeding_trends_endpoint(
    from_month: str | None = Query(default=None, alias="from"),
    to_month: str | None = Query(default=None, alias="to"),
    months: int | None = Query(default=None),
    owner_id: int = Depends(get_owner_id),
    settings: Settings = Depends(get_app_settings),
    repo: BreedingEventsRepo = Depends(get_breeding_events_repo),
) -> BreedingTrendsResponse:
    """Monthly breeding KPIs (YYYY-MM bounds) with month-over-month deltas."""
    result = await get_breeding_trends.execute(
        repo,
        owner_id,
        to_month=to_month,
        from_month=from_month,
        months=months,
        default_months=settings.kpi_default_trend_months,
    )
    if not result.ok:
        raise app_error_from_kpi(result.error)
    return BreedingTrendsResponse.model_validate(result.value)


@router.get("/breeding/delta", response_model=BreedingKpiDeltaResponse)
async def get_breeding_delta(
    month: str | None = Query(default=None),
    owner_id: int = Depends(get_owner_id),
    repo: BreedingEventsRepo = Depends(get_breeding_events_repo),
) -> BreedingKpiDeltaResponse:
    result = await get_breeding_kpi_delta.execute(repo, owner_id, month)
    if not result.ok:
        raise app_error_from_kpi(result.error)
    return BreedingKpiDeltaResponse.model_validate(result.value)
