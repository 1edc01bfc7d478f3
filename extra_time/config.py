from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .aggregator import BASELINE_SECONDS
from .reporter import DEFAULT_CSV_PATH


@dataclass(frozen=True, slots=True)
class Config:
    toggl_api_token: str | None
    baseline_seconds: int
    csv_path: Path
    timezone: ZoneInfo | None


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _positive_int_env(name: str, default: int) -> int:
    value = _optional_env(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer") from exc

    if parsed <= 0:
        raise ValueError(f"Environment variable {name} must be positive")
    return parsed


def _timezone_from_env(name: str) -> ZoneInfo | None:
    tz_name = _optional_env(name)
    if tz_name is None:
        return None
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError as exc:
        raise ValueError(f"Invalid timezone in {name}: {tz_name}") from exc


def load_config() -> Config:
    return Config(
        toggl_api_token=_optional_env("TOGGL_API_TOKEN"),
        baseline_seconds=_positive_int_env("BASELINE_SECONDS", BASELINE_SECONDS),
        csv_path=Path(_optional_env("CSV_PATH") or DEFAULT_CSV_PATH),
        timezone=_timezone_from_env("TIMEZONE"),
    )
