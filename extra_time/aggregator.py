from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from .models import DayAggregation, TimeEntry

BASELINE_SECONDS = 7 * 60 * 60

logger = logging.getLogger(__name__)


def group_by_day(entries: Iterable[TimeEntry]) -> tuple[dict[date, list[int]], list[date]]:
    """Bucket durations per day, returning the buckets and the days in first-seen order."""
    buckets: dict[date, list[int]] = {}
    discovered: list[date] = []

    for entry in entries:
        bucket = buckets.get(entry.day)
        if bucket is None:
            bucket = buckets[entry.day] = []
            discovered.append(entry.day)
        bucket.append(entry.duration_seconds)

    return buckets, discovered


def aggregate_entries(
    entries: Iterable[TimeEntry],
    baseline_seconds: int = BASELINE_SECONDS,
) -> DayAggregation:
    buckets, discovered = group_by_day(entries)

    # Discovery order follows the input; every later pass uses calendar order.
    days = sorted(discovered)
    aggregation = DayAggregation(baseline_seconds=baseline_seconds, buckets=buckets, days=days)

    for day in days:
        total = sum(buckets[day])
        aggregation.totals[day] = total
        aggregation.extra_time[day] = total - baseline_seconds

    running = 0
    for day in days:
        running += aggregation.extra_time_for(day)
        aggregation.cumulative_extra_time[day] = running
        logger.debug("Extra time worked at day %s: %s", day.isoformat(), aggregation.extra_time[day])

    aggregation.total_extra_time = running
    return aggregation
