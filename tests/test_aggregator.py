from datetime import date

import pytest

from extra_time.aggregator import BASELINE_SECONDS, aggregate_entries, group_by_day
from extra_time.models import MissingDayTotal, TimeEntry

JAN_1 = date(2024, 1, 1)
JAN_2 = date(2024, 1, 2)
JAN_3 = date(2024, 1, 3)


def test_two_day_scenario() -> None:
    entries = [TimeEntry(JAN_1, 3600), TimeEntry(JAN_1, 21600), TimeEntry(JAN_2, 28800)]

    aggregation = aggregate_entries(entries, baseline_seconds=BASELINE_SECONDS)

    assert aggregation.days == [JAN_1, JAN_2]
    assert aggregation.totals == {JAN_1: 25200, JAN_2: 28800}
    assert aggregation.extra_time == {JAN_1: 0, JAN_2: 3600}
    assert aggregation.cumulative_extra_time == {JAN_1: 0, JAN_2: 3600}
    assert aggregation.total_extra_time == 3600


def test_empty_input() -> None:
    aggregation = aggregate_entries([])

    assert aggregation.days == []
    assert aggregation.buckets == {}
    assert aggregation.totals == {}
    assert aggregation.extra_time == {}
    assert aggregation.cumulative_extra_time == {}
    assert aggregation.total_extra_time == 0


def test_short_day_is_negative_extra_time() -> None:
    aggregation = aggregate_entries([TimeEntry(JAN_1, 18000)])

    assert aggregation.extra_time[JAN_1] == -7200
    assert aggregation.total_extra_time == -7200


def test_days_sorted_regardless_of_discovery_order() -> None:
    entries = [
        TimeEntry(JAN_3, 30000),
        TimeEntry(JAN_1, 20000),
        TimeEntry(JAN_2, 25200),
        TimeEntry(JAN_1, 1000),
    ]

    buckets, discovered = group_by_day(entries)
    aggregation = aggregate_entries(entries)

    assert discovered == [JAN_3, JAN_1, JAN_2]
    assert buckets[JAN_1] == [20000, 1000]
    assert aggregation.days == [JAN_1, JAN_2, JAN_3]
    assert aggregation.cumulative_extra_time == {JAN_1: -4200, JAN_2: -4200, JAN_3: 600}


def test_cumulative_matches_sum_of_extra_time() -> None:
    entries = [TimeEntry(date(2024, 2, day), day * 1700) for day in range(1, 20)]

    aggregation = aggregate_entries(entries)
    last_day = aggregation.days[-1]

    assert aggregation.cumulative_extra_time[last_day] == sum(aggregation.extra_time.values())
    assert aggregation.total_extra_time == aggregation.cumulative_extra_time[last_day]
    for day in aggregation.days:
        assert aggregation.extra_time[day] == aggregation.totals[day] - BASELINE_SECONDS
        assert aggregation.totals[day] == sum(aggregation.buckets[day])
    assert set(aggregation.totals) == set(aggregation.extra_time) == set(aggregation.cumulative_extra_time)


def test_custom_baseline() -> None:
    aggregation = aggregate_entries([TimeEntry(JAN_1, 3600)], baseline_seconds=1800)

    assert aggregation.baseline_seconds == 1800
    assert aggregation.extra_time_for(JAN_1) == 1800


def test_missing_day_lookup_raises() -> None:
    aggregation = aggregate_entries([TimeEntry(JAN_1, 3600)])

    with pytest.raises(MissingDayTotal):
        aggregation.total_for(JAN_2)
    with pytest.raises(MissingDayTotal):
        aggregation.cumulative_for(JAN_2)
