from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

DEFAULT_WINDOW_DAYS = 365
# Retrieval margins so insemination/calving pairs straddling the window edges
# are still loaded: up to ~300 days of gestation after `to`, and the previous
# calving (for intervals and days open) can sit well before `from`.
EXPANSION_BEFORE_DAYS = 500
EXPANSION_AFTER_DAYS = 300

# Bounds a window must stay inside so its expanded window is representable
EARLIEST_SUPPORTED = datetime.min.replace(tzinfo=timezone.utc) + timedelta(
    days=EXPANSION_BEFORE_DAYS
)
LATEST_SUPPORTED = datetime.max.replace(tzinfo=timezone.utc) - timedelta(
    days=EXPANSION_AFTER_DAYS
)


@dataclass(frozen=True, slots=True)
class ReportingWindow:
    from_: datetime
    to: datetime

    @classmethod
    def default(
        cls, now: datetime | None = None, *, days: int = DEFAULT_WINDOW_DAYS
    ) -> ReportingWindow:
        now = now or datetime.now(timezone.utc)
        return cls(from_=now - timedelta(days=days), to=now)

    @classmethod
    def resolve(
        cls,
        from_dt: datetime | None,
        to_dt: datetime | None,
        *,
        now: datetime | None = None,
        days: int = DEFAULT_WINDOW_DAYS,
    ) -> ReportingWindow:
        """Fill missing bounds: `to` defaults to now, `from` to `days` before now."""
        now = now or datetime.now(timezone.utc)
        return cls(
            from_=from_dt or now - timedelta(days=days),
            to=to_dt or now,
        )

    def contains(self, moment: datetime) -> bool:
        return self.from_ <= moment <= self.to

    def expanded(self) -> ReportingWindow:
        return ReportingWindow(
            from_=self.from_ - timedelta(days=EXPANSION_BEFORE_DAYS),
            to=self.to + timedelta(days=EXPANSION_AFTER_DAYS),
        )

    def is_expandable(self) -> bool:
        return EARLIEST_SUPPORTED <= self.from_ and self.to <= LATEST_SUPPORTED
