"""Chart shaping for per-day play statistics."""

from collections.abc import Sequence
from dataclasses import dataclass

from streammon_dashboard.domain.dates import CalendarDate, DateRange
from streammon_dashboard.domain.stats import (
    MEDIA_SERIES,
    DayStatRecord,
    SeriesDescriptor,
)

_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True)
class TooltipItem:
    """One line of a chart tooltip."""

    label: str
    color: str
    value: int


@dataclass(frozen=True)
class DailyChart:
    """Chart-ready rows for a date range."""

    date_range: DateRange
    series: tuple[SeriesDescriptor, ...]
    rows: list[dict[str, object]]
    has_data: bool


def has_any_data(
    records: Sequence[DayStatRecord],
    series: Sequence[SeriesDescriptor] = MEDIA_SERIES,
) -> bool:
    """Return True when any record has a positive value in any series."""
    return any(
        record.value(descriptor.key) > 0 for record in records for descriptor in series
    )


def format_tick(day: CalendarDate | str) -> str:
    """Return a short axis label such as ``"Mar 3"``.

    The label is built from the calendar fields alone, so the host timezone
    can never move it to a neighbouring day.
    """
    if isinstance(day, str):
        day = CalendarDate.from_iso(day)
    return f"{_MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def series_totals(
    records: Sequence[DayStatRecord],
    series: Sequence[SeriesDescriptor] = MEDIA_SERIES,
) -> dict[str, int]:
    """Return the sum of each series across all records."""
    return {
        descriptor.key: sum(record.value(descriptor.key) for record in records)
        for descriptor in series
    }


def tooltip_items(
    record: DayStatRecord,
    series: Sequence[SeriesDescriptor] = MEDIA_SERIES,
    filter_zero: bool = True,
) -> list[TooltipItem]:
    """Return tooltip lines for a single day."""
    items = [
        TooltipItem(
            label=descriptor.label,
            color=descriptor.color,
            value=record.value(descriptor.key),
        )
        for descriptor in series
    ]
    if filter_zero:
        return [item for item in items if item.value > 0]
    return items


def build_daily_chart(
    records: Sequence[DayStatRecord],
    date_range: DateRange,
    series: Sequence[SeriesDescriptor] = MEDIA_SERIES,
) -> DailyChart:
    """Shape day records into rows keyed by series."""
    rows: list[dict[str, object]] = []
    for record in records:
        row: dict[str, object] = {
            "date": record.day.isoformat(),
            "label": format_tick(record.day),
        }
        for descriptor in series:
            row[descriptor.key] = record.value(descriptor.key)
        rows.append(row)
    return DailyChart(
        date_range=date_range,
        series=tuple(series),
        rows=rows,
        has_data=has_any_data(records, series),
    )
