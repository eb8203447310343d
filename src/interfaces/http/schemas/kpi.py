from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BreedingMetricsSchema(BaseModel):
    conception_rate: float | None
    avg_days_open: float | None
    avg_calving_interval: float | None
    ai_per_conception: float | None

    model_config = ConfigDict(from_attributes=True)


class BreedingCountsSchema(BaseModel):
    inseminations: int
    conceptions: int
    calvings: int
    pairs_for_days_open: int

    model_config = ConfigDict(from_attributes=True)


class PeriodSchema(BaseModel):
    from_: datetime = Field(
        validation_alias=AliasChoices("from_", "from"), serialization_alias="from"
    )
    to: datetime

    model_config = ConfigDict(from_attributes=True)


class BreedingKpiSummarySchema(BaseModel):
    total_events: int
    data_quality: Literal["high", "medium", "low"]
    insights: list[str]
    calculated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BreedingKpiResponse(BaseModel):
    metrics: BreedingMetricsSchema
    counts: BreedingCountsSchema
    period: PeriodSchema
    summary: BreedingKpiSummarySchema

    model_config = ConfigDict(from_attributes=True)


class MonthlyPointSchema(BaseModel):
    month: str
    metrics: BreedingMetricsSchema
    counts: BreedingCountsSchema

    model_config = ConfigDict(from_attributes=True)


class DeltaPointSchema(BaseModel):
    month: str
    metrics: BreedingMetricsSchema

    model_config = ConfigDict(from_attributes=True)


class TrendSummarySchema(BaseModel):
    direction: Literal["improving", "declining", "stable"]
    confidence: Literal["high", "medium", "low"]

    model_config = ConfigDict(from_attributes=True)


class BreedingTrendsResponse(BaseModel):
    series: list[MonthlyPointSchema]
    deltas: list[DeltaPointSchema]
    summary: TrendSummarySchema

    model_config = ConfigDict(from_attributes=True)


class DeltaSummarySchema(BaseModel):
    improvement: Literal["positive", "negative", "neutral"]
    key_changes: list[str]

    model_config = ConfigDict(from_attributes=True)


class BreedingKpiDeltaResponse(BaseModel):
    month: str | None
    delta: BreedingMetricsSchema
    summary: DeltaSummarySchema

    model_config = ConfigDict(from_attributes=True)
