from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from src.domain.models.breeding_event import RawEvent


class BreedingEventsRepo(ABC):
    @abstractmethod
    async def find_events_for_breeding_kpi(
        self,
        owner_id: int,
        from_dt: datetime | None = None,
        to_dt: datetime | None = None,
    ) -> list[RawEvent]:
        """Return INSEMINATION/CALVING events of the owner's animals.

        The reporting window ``[from_dt, to_dt]`` (default: last 365 days) is
        widened to its expanded window before querying, and rows come back
        ordered by ``(cattle_id, event_datetime)``.
        """
