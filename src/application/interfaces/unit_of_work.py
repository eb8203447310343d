from __future__ import annotations

from typing import Protocol

from src.domain.ports.breeding_events_repo import BreedingEventsRepo


class ReadOnlyUnitOfWork(Protocol):
    """Session scope for KPI queries. Nothing is ever committed."""

    breeding_events: BreedingEventsRepo

    async def __aenter__(self) -> ReadOnlyUnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...
