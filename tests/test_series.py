"""Tests for chart series shaping."""

from streammon_dashboard.domain.dates import CalendarDate, DateRange
from streammon_dashboard.domain.stats import MEDIA_SERIES, DayStatRecord
from streammon_dashboard.services.series import (
    build_daily_chart,
    format_tick,
    has_any_data,
    series_totals,
    tooltip_items,
)

ZEROS = {"movies": 0, "tv": 0, "livetv": 0, "music": 0, "audiobooks": 0, "books": 0}


def _record(day: str, **counts: int) -> DayStatRecord:
    return DayStatRecord(day=CalendarDate.from_iso(day), counts={**ZEROS, **counts})


def test_has_any_data_empty_and_zero() -> None:
    assert has_any_data([]) is False
    assert has_any_data([_record("2024-03-01")]) is False
    assert has_any_data([_record("2024-03-01", movies=1)]) is True


def test_has_any_data_treats_missing_keys_as_zero() -> None:
    sparse = DayStatRecord(day=CalendarDate(2024, 3, 1), counts={"books": 2})

    assert has_any_data([sparse]) is True
    assert has_any_data([DayStatRecord(day=CalendarDate(2024, 3, 1))]) is False


def test_has_any_data_only_checks_given_series() -> None:
    record = _record("2024-03-01", music=4)
    video_only = [d for d in MEDIA_SERIES if d.key in {"movies", "tv"}]

    assert has_any_data([record], video_only) is False


def test_format_tick() -> None:
    assert format_tick(CalendarDate(2024, 3, 3)) == "Mar 3"
    assert format_tick("2023-12-31") == "Dec 31"
    assert format_tick("2024-01-01") == "Jan 1"


def test_format_tick_matches_canonical_date() -> None:
    months = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()
    date_range = DateRange(
        start=CalendarDate(2023, 12, 1), end=CalendarDate(2025, 1, 31)
    )

    for day in date_range.days():
        _, month, day_of_month = day.isoformat().split("-")
        assert format_tick(day) == f"{months[int(month) - 1]} {int(day_of_month)}"
        assert format_tick(day.isoformat()) == format_tick(day)


def test_tooltip_items_filter_zero() -> None:
    record = _record("2024-03-01", movies=2, tv=0, music=1)

    items = tooltip_items(record)
    all_items = tooltip_items(record, filter_zero=False)

    assert [(item.label, item.value) for item in items] == [("Movies", 2), ("Music", 1)]
    assert len(all_items) == len(MEDIA_SERIES)


def test_series_totals() -> None:
    records = [_record("2024-03-01", movies=2), _record("2024-03-02", movies=3, tv=1)]

    totals = series_totals(records)

    assert totals["movies"] == 5
    assert totals["tv"] == 1
    assert totals["books"] == 0


def test_build_daily_chart_rows() -> None:
    date_range = DateRange(
        start=CalendarDate(2024, 2, 29), end=CalendarDate(2024, 3, 1)
    )
    records = [
        _record("2024-02-29", movies=1),
        DayStatRecord(day=CalendarDate(2024, 3, 1), counts={"tv": 4}),
    ]

    chart = build_daily_chart(records, date_range)

    assert chart.has_data is True
    assert chart.rows[0]["date"] == "2024-02-29"
    assert chart.rows[0]["label"] == "Feb 29"
    assert chart.rows[1]["movies"] == 0
    assert chart.rows[1]["tv"] == 4
    assert [descriptor.key for descriptor in chart.series][:2] == ["movies", "tv"]


def test_build_daily_chart_all_zero_is_empty() -> None:
    date_range = DateRange(start=CalendarDate(2024, 3, 1), end=CalendarDate(2024, 3, 1))

    chart = build_daily_chart([_record("2024-03-01")], date_range)

    assert chart.has_data is False
    assert len(chart.rows) == 1
