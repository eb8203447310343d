from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class EventORM(Base):
    __tablename__ = "events"
    __table_args__ = (
        Index("ix_events_cattle_datetime", "cattle_id", "event_datetime"),
        Index("ix_events_type", "event_type"),
    )

    event_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cattle_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cattle.cattle_id", ondelete="CASCADE"), nullable=False
    )
    # Types read by the KPI loader: INSEMINATION, CALVING. Other types may exist.
    event_type: Mapped[str] = mapped_column(String(32), nullable=False)
    event_datetime: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
