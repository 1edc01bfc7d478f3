from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from .models import DayAggregation, MissingDayTotal

TOTAL_LABEL = "Total time worked that day :"
EXTRA_LABEL = "Extra time worked that day :"
CUMULATED_LABEL = "Cumulated extra time worked :"


class UnknownDay(LookupError):
    """Raised when a report column is labelled with a day missing from the aggregation."""


class ReportSheet:
    """Column-oriented grid, one column per day, every column the same length once aligned."""

    def __init__(self) -> None:
        self.columns: list[list[str]] = []
        self.max_column_length = 0

    def add_column(self, column: list[str]) -> None:
        self.columns.append(column)

    def sort_columns(self) -> None:
        self.columns.sort(key=lambda column: _column_day(column))

    def update_max_column_length(self) -> None:
        for column in self.columns:
            if len(column) > self.max_column_length:
                self.max_column_length = len(column)

    def align_columns(self) -> None:
        self.update_max_column_length()
        for column in self.columns:
            column.extend([""] * (self.max_column_length - len(column)))

    def add_summary_rows(self, aggregation: DayAggregation) -> None:
        self.align_columns()
        for column in self.columns:
            day = _column_day(column)
            try:
                total = aggregation.total_for(day)
                extra = aggregation.extra_time_for(day)
                cumulated = aggregation.cumulative_for(day)
            except MissingDayTotal as exc:
                raise UnknownDay(f"Column {column[0]!r} has no aggregated totals") from exc

            column.extend(
                [
                    "",
                    TOTAL_LABEL,
                    str(total),
                    "",
                    EXTRA_LABEL,
                    str(extra),
                    "",
                    CUMULATED_LABEL,
                    str(cumulated),
                ]
            )
        self.align_columns()

    def cell(self, row: int, column: int) -> str:
        return self.columns[column][row]

    def rows(self) -> Iterator[list[str]]:
        for index in range(self.max_column_length):
            yield [column[index] for column in self.columns]

    def to_csv_text(self, separator: str = ";") -> str:
        # Every cell is followed by the separator, including the last one of a row.
        return "".join("".join(f"{cell}{separator}" for cell in row) + "\n" for row in self.rows())


def _column_day(column: list[str]) -> date:
    try:
        return date.fromisoformat(column[0])
    except (IndexError, ValueError) as exc:
        label = column[0] if column else ""
        raise UnknownDay(f"Column label {label!r} is not a day") from exc


def build_report_sheet(aggregation: DayAggregation) -> ReportSheet:
    sheet = ReportSheet()
    for day in aggregation.days:
        sheet.add_column([day.isoformat(), *(str(duration) for duration in aggregation.buckets[day])])

    sheet.sort_columns()
    sheet.add_summary_rows(aggregation)
    return sheet
