"""Breeding KPI calculator.

Pure computation over already-loaded events: no I/O and no state kept between
calls. The caller supplies every INSEMINATION/CALVING event of the owner's
animals inside the expanded window; ``window`` then decides what counts.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from statistics import fmean

from src.domain.errors import MetricError, create_metric_error
from src.domain.models.breeding_event import (
    GESTATION_MAX_DAYS,
    GESTATION_MIN_DAYS,
    RawEvent,
)
from src.domain.models.breeding_kpi import BreedingCounts, BreedingKpiSnapshot, BreedingMetrics
from src.domain.value_objects.reporting_window import ReportingWindow
from src.domain.value_objects.result import Err, Ok, Result

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def round1(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def days_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / SECONDS_PER_DAY


@dataclass(slots=True)
class _AnimalHistory:
    inseminations: list[RawEvent] = field(default_factory=list)
    calvings: list[RawEvent] = field(default_factory=list)


@dataclass(slots=True)
class _Accumulator:
    inseminations: int = 0
    conceptions: int = 0
    days_open: list[float] = field(default_factory=list)
    calving_intervals: list[float] = field(default_factory=list)
    ai_trials: list[int] = field(default_factory=list)


def group_by_animal(events: Iterable[RawEvent]) -> dict[int, _AnimalHistory]:
    """Split events per animal, each list sorted by event time."""
    histories: dict[int, _AnimalHistory] = defaultdict(_AnimalHistory)
    for event in sorted(events, key=lambda e: e.event_datetime):
        if event.is_insemination:
            histories[event.cattle_id].inseminations.append(event)
        elif event.is_calving:
            histories[event.cattle_id].calvings.append(event)
    return dict(histories)


def find_conception_insemination(
    inseminations: list[RawEvent], calving: RawEvent
) -> RawEvent | None:
    """Insemination credited with the pregnancy that ended in `calving`.

    Walks back from the latest insemination at or before the calving and keeps
    the first one whose gap falls in the gestation range. Earlier candidates
    in range are never preferred over it.
    """
    for insemination in reversed(inseminations):
        if insemination.event_datetime > calving.event_datetime:
            continue
        gap = days_between(insemination.event_datetime, calving.event_datetime)
        if GESTATION_MIN_DAYS <= gap <= GESTATION_MAX_DAYS:
            return insemination
    return None


def count_ai_trials(
    inseminations: list[RawEvent],
    chosen: RawEvent,
    previous_calving: RawEvent | None,
) -> int:
    """Inseminations after the previous calving up to and including `chosen`."""
    return sum(
        1
        for insemination in inseminations
        if (
            previous_calving is None
            or insemination.event_datetime > previous_calving.event_datetime
        )
        and insemination.event_datetime <= chosen.event_datetime
    )


def _accumulate_animal(
    history: _AnimalHistory, window: ReportingWindow, acc: _Accumulator
) -> None:
    calvings = history.calvings
    inseminations = history.inseminations

    for previous, later in zip(calvings, calvings[1:]):
        if window.contains(later.event_datetime):
            acc.calving_intervals.append(
                days_between(previous.event_datetime, later.event_datetime)
            )

    acc.inseminations += sum(1 for e in inseminations if window.contains(e.event_datetime))

    for index, calving in enumerate(calvings):
        chosen = find_conception_insemination(inseminations, calving)
        if chosen is None:
            continue
        previous_calving = calvings[index - 1] if index > 0 else None

        if window.contains(calving.event_datetime):
            acc.conceptions += 1
            trials = count_ai_trials(inseminations, chosen, previous_calving)
            if trials > 0:
                acc.ai_trials.append(trials)

        if previous_calving is not None and window.contains(chosen.event_datetime):
            acc.days_open.append(
                days_between(previous_calving.event_datetime, chosen.event_datetime)
            )


def _mean_or_none(values: list[float] | list[int]) -> float | None:
    return round1(fmean(values)) if values else None


def compute_breeding_metrics(
    owner_id: int,
    window: ReportingWindow,
    events: Iterable[RawEvent],
) -> BreedingKpiSnapshot:
    events = list(events)
    histories = group_by_animal(events)

    acc = _Accumulator()
    for history in histories.values():
        _accumulate_animal(history, window, acc)

    calvings_in_window = sum(
        1 for e in events if e.is_calving and window.contains(e.event_datetime)
    )

    metrics = BreedingMetrics(
        conception_rate=(
            round1(acc.conceptions / acc.inseminations * 100) if acc.inseminations > 0 else None
        ),
        avg_days_open=_mean_or_none(acc.days_open),
        avg_calving_interval=_mean_or_none(acc.calving_intervals),
        ai_per_conception=_mean_or_none(acc.ai_trials),
    )
    counts = BreedingCounts(
        inseminations=acc.inseminations,
        conceptions=acc.conceptions,
        calvings=calvings_in_window,
        pairs_for_days_open=len(acc.days_open),
    )
    logger.debug(
        "Breeding metrics computed for owner %s: %d events, %d animals",
        owner_id,
        len(events),
        len(histories),
    )
    return BreedingKpiSnapshot(metrics=metrics, counts=counts)


def validate_breeding_metrics(metrics: BreedingMetrics) -> Result[BreedingMetrics, MetricError]:
    rate = metrics.conception_rate
    if rate is not None and not 0 <= rate <= 100:
        return Err(
            create_metric_error(
                "Conception rate must be between 0 and 100", "conception_rate", rate
            )
        )
    for name in ("avg_days_open", "avg_calving_interval", "ai_per_conception"):
        value = metrics.get(name)
        if value is not None and value < 0:
            return Err(create_metric_error(f"{name} must not be negative", name, value))
    return Ok(metrics)
