from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BreedingEventType(str, Enum):
    INSEMINATION = "INSEMINATION"
    CALVING = "CALVING"


# Accepted insemination-to-calving gap, in days, for inferring a conception
GESTATION_MIN_DAYS = 260
GESTATION_MAX_DAYS = 300


@dataclass(frozen=True, slots=True)
class RawEvent:
    cattle_id: int
    event_type: BreedingEventType
    event_datetime: datetime

    @classmethod
    def create(
        cls,
        cattle_id: int,
        event_type: str | BreedingEventType,
        event_datetime: datetime,
    ) -> RawEvent:
        return cls(
            cattle_id=cattle_id,
            event_type=BreedingEventType(event_type),
            event_datetime=event_datetime,
        )

    @property
    def is_insemination(self) -> bool:
        return self.event_type is BreedingEventType.INSEMINATION

    @property
    def is_calving(self) -> bool:
        return self.event_type is BreedingEventType.CALVING
