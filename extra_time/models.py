from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class TimeEntry:
    day: date
    duration_seconds: int


class MissingDayTotal(LookupError):
    """Raised when a day is looked up that the aggregation never saw."""


@dataclass(slots=True)
class DayAggregation:
    baseline_seconds: int
    buckets: dict[date, list[int]] = field(default_factory=dict)
    days: list[date] = field(default_factory=list)
    totals: dict[date, int] = field(default_factory=dict)
    extra_time: dict[date, int] = field(default_factory=dict)
    cumulative_extra_time: dict[date, int] = field(default_factory=dict)
    total_extra_time: int = 0

    def total_for(self, day: date) -> int:
        return _lookup(self.totals, day)

    def extra_time_for(self, day: date) -> int:
        return _lookup(self.extra_time, day)

    def cumulative_for(self, day: date) -> int:
        return _lookup(self.cumulative_extra_time, day)


def _lookup(values: dict[date, int], day: date) -> int:
    try:
        return values[day]
    except KeyError as exc:
        raise MissingDayTotal(f"No aggregated value for day {day.isoformat()}") from exc
