from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

import requests

from .models import TimeEntry

TOGGL_API_URL = "https://api.track.toggl.com/api/v9"

logger = logging.getLogger(__name__)


class TogglError(RuntimeError):
    """Raised when time entries cannot be fetched or decoded."""


def parse_time_entry(raw: dict[str, Any]) -> TimeEntry | None:
    """Convert a Toggl time entry payload, or return None for a running entry."""
    try:
        started = datetime.fromisoformat(raw["start"].replace("Z", "+00:00"))
        duration = int(raw["duration"])
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise TogglError(f"Malformed time entry: {raw!r}") from exc

    # Toggl reports running timers with a negative duration.
    if duration < 0:
        logger.warning("Skipping running time entry started at %s", raw["start"])
        return None

    # The day comes from the timestamp's own offset, not from a converted zone.
    return TimeEntry(day=started.date(), duration_seconds=duration)


class TogglClient:
    def __init__(
        self,
        api_token: str,
        session: requests.Session | None = None,
        base_url: str = TOGGL_API_URL,
        timeout: int = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (api_token, "api_token")

    def fetch_time_entries(self, start_date: date, end_date: date) -> list[dict[str, Any]]:
        url = f"{self.base_url}/me/time_entries"
        params = {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}
        logger.info("Querying %s with %s", url, params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as exc:
            raise TogglError(f"Could not fetch time entries: {exc}") from exc
        except ValueError as exc:
            raise TogglError("Toggl returned a non-JSON response") from exc

        if not isinstance(payload, list):
            raise TogglError(f"Expected a list of time entries, got {type(payload).__name__}")
        return payload

    def time_entries(self, start_date: date, end_date: date) -> list[TimeEntry]:
        entries = []
        for raw in self.fetch_time_entries(start_date, end_date):
            entry = parse_time_entry(raw)
            if entry is not None:
                entries.append(entry)

        logger.info("Fetched %d time entries", len(entries))
        return entries
