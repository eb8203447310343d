from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from src.domain.value_objects.reporting_window import ReportingWindow

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class MonthPeriod:
    """A calendar month in UTC, ordered chronologically."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")

    @classmethod
    def parse(cls, value: str) -> MonthPeriod:
        """Parse a ``YYYY-MM`` string; raises ``ValueError`` on bad input."""
        match = _MONTH_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid month format: {value!r} (expected YYYY-MM)")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    @classmethod
    def of(cls, moment: datetime) -> MonthPeriod:
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return cls(year=moment.year, month=moment.month)

    @classmethod
    def current(cls) -> MonthPeriod:
        return cls.of(datetime.now(timezone.utc))

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def shift(self, months: int) -> MonthPeriod:
        index = self.year * 12 + (self.month - 1) + months
        return MonthPeriod(year=index // 12, month=index % 12 + 1)

    def first_instant(self) -> datetime:
        return datetime(self.year, self.month, 1, tzinfo=timezone.utc)

    def last_instant(self) -> datetime:
        return self.shift(1).first_instant() - timedelta(microseconds=1)

    def window(self) -> ReportingWindow:
        return ReportingWindow(from_=self.first_instant(), to=self.last_instant())

    def __str__(self) -> str:
        return self.key


def month_range(start: MonthPeriod, end: MonthPeriod) -> list[MonthPeriod]:
    """Months from `start` to `end` inclusive, oldest first."""
    months: list[MonthPeriod] = []
    current = start
    while current <= end:
        months.append(current)
        current = current.shift(1)
    return months
