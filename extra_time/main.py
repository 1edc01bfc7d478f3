from __future__ import annotations

import argparse
import dataclasses
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from .aggregator import aggregate_entries
from .config import Config, load_config
from .models import DayAggregation
from .period import local_now, query_window
from .reporter import build_summary_line, format_seconds, write_csv_file
from .sheet import build_report_sheet
from .toggl import TogglClient, TogglError

logger = logging.getLogger("extra-time")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extra-time",
        description="Calculate extra time worked over the period from J-3 months to J-1 day.",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Activate debug mode")
    parser.add_argument("-c", "--csv", action="store_true", help="Generate csv file")
    parser.add_argument(
        "-i", "--include-today", action="store_true", help="Include the actual day in the calculation"
    )
    parser.add_argument("-t", "--token", help="Toggl API token to use (defaults to TOGGL_API_TOKEN)")
    parser.add_argument("-o", "--output", type=Path, help="CSV destination (defaults to CSV_PATH)")
    return parser


def run(
    config: Config,
    client: TogglClient,
    *,
    write_csv: bool = False,
    include_today: bool = False,
    now: datetime | None = None,
) -> DayAggregation:
    current = now or local_now(config.timezone)
    start, end = query_window(current, include_today=include_today)
    logger.info("Computing extra time worked between %s and %s", start.isoformat(), end.isoformat())

    entries = client.time_entries(start, end)
    aggregation = aggregate_entries(entries, baseline_seconds=config.baseline_seconds)

    if write_csv:
        sheet = build_report_sheet(aggregation)
        write_csv_file(sheet, config.csv_path)

    logger.debug(
        "Extra time worked in seconds: %s (%s)",
        aggregation.total_extra_time,
        format_seconds(aggregation.total_extra_time),
    )
    return aggregation


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv()
    configure_logging(args.debug)

    config = load_config()
    if args.output is not None:
        config = dataclasses.replace(config, csv_path=args.output)

    token = args.token or config.toggl_api_token
    if not token:
        print("You need to specify a token")
        return 2

    try:
        aggregation = run(
            config,
            TogglClient(token),
            write_csv=args.csv,
            include_today=args.include_today,
        )
    except TogglError:
        logger.exception("Failed to fetch time entries from Toggl")
        return 1

    print(build_summary_line(aggregation))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
