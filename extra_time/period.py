from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

QUERY_MONTHS = 3


def local_now(tz: ZoneInfo | None = None) -> datetime:
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def subtract_months(day: date, months: int) -> date:
    # Clamp to the last day of the target month (May 31 - 3 months = Feb 28/29).
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def query_window(
    now: datetime,
    *,
    include_today: bool = False,
    months: int = QUERY_MONTHS,
) -> tuple[date, date]:
    """Return the (start, end) days of the trailing period to fetch entries for."""
    today = now.date()
    start = subtract_months(today, months)
    end = today if include_today else today - timedelta(days=1)
    return start, end
