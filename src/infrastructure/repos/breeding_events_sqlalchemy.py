from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.breeding_event import BreedingEventType, RawEvent
from src.domain.ports.breeding_events_repo import BreedingEventsRepo
from src.domain.value_objects.reporting_window import ReportingWindow
from src.infrastructure.db.orm.cattle import CattleORM
from src.infrastructure.db.orm.event import EventORM
from src.utils.datetime_tz import as_utc

BREEDING_EVENT_TYPES = tuple(t.value for t in BreedingEventType)


class BreedingEventsSQLAlchemyRepository(BreedingEventsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, cattle_id: int, event_type: str, event_datetime: datetime) -> RawEvent:
        return RawEvent.create(
            cattle_id=cattle_id,
            event_type=event_type,
            event_datetime=as_utc(event_datetime),
        )

    async def find_events_for_breeding_kpi(
        self,
        owner_id: int,
        from_dt: datetime | None = None,
        to_dt: datetime | None = None,
    ) -> list[RawEvent]:
        window = ReportingWindow.resolve(from_dt, to_dt).expanded()
        stmt = (
            select(EventORM.cattle_id, EventORM.event_type, EventORM.event_datetime)
            .join(CattleORM, CattleORM.cattle_id == EventORM.cattle_id)
            .where(CattleORM.owner_user_id == owner_id)
            .where(EventORM.event_type.in_(BREEDING_EVENT_TYPES))
            .where(EventORM.event_datetime >= window.from_)
            .where(EventORM.event_datetime <= window.to)
            .order_by(EventORM.cattle_id.asc(), EventORM.event_datetime.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(*row) for row in result.all()]
