from __future__ import annotations

import logging
from pathlib import Path

from .models import DayAggregation
from .sheet import ReportSheet

DEFAULT_CSV_PATH = Path("results.csv")

logger = logging.getLogger(__name__)


def split_seconds(total_seconds: int) -> tuple[int, int, int]:
    """Split seconds into hours, minutes and seconds that all share the sign of the total."""
    sign = -1 if total_seconds < 0 else 1
    hours, remainder = divmod(abs(int(total_seconds)), 3600)
    minutes, seconds = divmod(remainder, 60)
    return sign * hours, sign * minutes, sign * seconds


def format_extra_time(total_seconds: int) -> str:
    hours, minutes, seconds = split_seconds(total_seconds)
    sign = "-" if total_seconds < 0 else ""
    return f"{sign}{abs(hours)}h{abs(minutes)}min{abs(seconds)}sec"


def format_seconds(total_seconds: int) -> str:
    """Render a signed duration as HH:MM:SS for log output."""
    hours, minutes, seconds = split_seconds(total_seconds)
    sign = "-" if total_seconds < 0 else ""
    return f"{sign}{abs(hours):02}:{abs(minutes):02}:{abs(seconds):02}"


def build_summary_line(aggregation: DayAggregation) -> str:
    return f"Total extra time worked: {format_extra_time(aggregation.total_extra_time)}"


def write_csv_file(sheet: ReportSheet, path: str | Path = DEFAULT_CSV_PATH) -> Path:
    target = Path(path)
    target.write_text(sheet.to_csv_text(), encoding="utf-8")
    logger.info("Wrote %d rows x %d columns to %s", sheet.max_column_length, len(sheet.columns), target)
    return target
