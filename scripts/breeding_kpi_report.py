#!/usr/bin/env python3
"""
Print the breeding KPIs of one herd owner as JSON.

This script:
1. Computes the KPI snapshot for the reporting window (default: last 365 days)
2. Computes the monthly trend series ending at the current month

Usage:
  python scripts/breeding_kpi_report.py --owner-id 42 [--from 2024-01-01T00:00:00Z]
      [--to 2024-12-31T23:59:59Z] [--trend-months 6]
"""

import argparse
import asyncio
import dataclasses
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.use_cases.kpi import get_breeding_kpi, get_breeding_trends
from src.config.settings import get_settings
from src.domain.errors import get_error_message
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


def _to_jsonable(value):
    if dataclasses.is_dataclass(value):
        return {
            f.name.rstrip("_"): _to_jsonable(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


async def build_report(
    owner_id: int, from_iso: str | None, to_iso: str | None, trend_months: int
) -> dict:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            kpi = await get_breeding_kpi.execute(
                uow.breeding_events,
                owner_id,
                from_iso,
                to_iso,
                default_days=settings.kpi_default_window_days,
            )
            if not kpi.ok:
                raise SystemExit(f"❌ {get_error_message(kpi.error)}")

            trends = await get_breeding_trends.execute(
                uow.breeding_events, owner_id, months=trend_months
            )
            if not trends.ok:
                raise SystemExit(f"❌ {get_error_message(trends.error)}")
    finally:
        await engine.dispose()

    return {"kpi": _to_jsonable(kpi.value), "trends": _to_jsonable(trends.value)}


def main() -> None:
    parser = argparse.ArgumentParser(description="Breeding KPI report for a herd owner")
    parser.add_argument("--owner-id", type=int, required=True, help="Owner user id")
    parser.add_argument("--from", dest="from_iso", help="Window start (ISO-8601)")
    parser.add_argument("--to", dest="to_iso", help="Window end (ISO-8601)")
    parser.add_argument("--trend-months", type=int, default=6, help="Months in the trend series")
    args = parser.parse_args()

    report = asyncio.run(
        build_report(args.owner_id, args.from_iso, args.to_iso, args.trend_months)
    )
    print(json.dumps(report, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
