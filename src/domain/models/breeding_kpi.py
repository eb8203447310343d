from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Literal

METRIC_FIELDS: tuple[str, ...] = (
    "conception_rate",
    "avg_days_open",
    "avg_calving_interval",
    "ai_per_conception",
)

TrendDirection = Literal["improving", "declining", "stable"]
ConfidenceLevel = Literal["high", "medium", "low"]
DataQuality = Literal["high", "medium", "low"]
Improvement = Literal["positive", "negative", "neutral"]


@dataclass(frozen=True, slots=True)
class BreedingMetrics:
    """Breeding KPIs for one period. ``None`` means not enough data."""

    conception_rate: float | None = None  # % (0-100)
    avg_days_open: float | None = None  # days
    avg_calving_interval: float | None = None  # days
    ai_per_conception: float | None = None  # inseminations per conception

    @classmethod
    def empty(cls) -> BreedingMetrics:
        return cls()

    def get(self, name: str) -> float | None:
        return getattr(self, name)

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BreedingCounts:
    inseminations: int = 0
    conceptions: int = 0
    calvings: int = 0
    pairs_for_days_open: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BreedingKpiSnapshot:
    metrics: BreedingMetrics
    counts: BreedingCounts


@dataclass(frozen=True, slots=True)
class MonthlyPoint:
    month: str  # YYYY-MM
    metrics: BreedingMetrics
    counts: BreedingCounts


@dataclass(frozen=True, slots=True)
class DeltaPoint:
    month: str | None  # YYYY-MM
    metrics: BreedingMetrics = field(default_factory=BreedingMetrics.empty)


@dataclass(frozen=True, slots=True)
class TrendSummary:
    direction: TrendDirection
    confidence: ConfidenceLevel


@dataclass(frozen=True, slots=True)
class BreedingTrends:
    series: list[MonthlyPoint]
    deltas: list[DeltaPoint]
    summary: TrendSummary


@dataclass(frozen=True, slots=True)
class DeltaSummary:
    improvement: Improvement
    key_changes: list[str]


@dataclass(frozen=True, slots=True)
class BreedingKpiDelta:
    month: str | None
    delta: BreedingMetrics
    summary: DeltaSummary
