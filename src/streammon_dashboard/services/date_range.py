"""Date range resolution for dashboard windows."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from streammon_dashboard.domain.dates import CalendarDate, DateRange

ALL_TIME = 0
DEFAULT_ALL_TIME_WINDOW = 90
MAX_WINDOW_DAYS = 3660


def resolve_range(window_days: int, today: CalendarDate) -> DateRange:
    """Return the trailing ``window_days`` range ending on ``today``."""
    if window_days < 1:
        raise ValueError(f"Window must be a positive number of days: {window_days}")
    return DateRange(start=today.minus_days(window_days - 1), end=today)


def effective_window(days: int, all_time_window: int = DEFAULT_ALL_TIME_WINDOW) -> int:
    """Map the all-time selection to a fixed window."""
    if days == ALL_TIME:
        return all_time_window
    return days


def select_range(
    days: int,
    today: CalendarDate,
    start: str | None = None,
    end: str | None = None,
    all_time_window: int = DEFAULT_ALL_TIME_WINDOW,
) -> DateRange:
    """Return the range for a window selection, honoring custom bounds."""
    computed = resolve_range(effective_window(days, all_time_window), today)
    return DateRange(
        start=CalendarDate.from_iso(start) if start else computed.start,
        end=CalendarDate.from_iso(end) if end else computed.end,
    )


def range_query_params(
    date_range: DateRange, server_ids: Iterable[int] | None = None
) -> dict[str, str]:
    """Build query parameters for a daily stats request."""
    params = {"start": date_range.start.isoformat(), "end": date_range.end.isoformat()}
    ids = list(server_ids or [])
    if ids:
        params["server_ids"] = ",".join(str(server_id) for server_id in ids)
    return params


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class LocalTodayProvider:
    """Resolves the viewer's current calendar date in their timezone."""

    timezone_name: str
    clock: Callable[[], datetime] = field(default=_utc_now)

    def __post_init__(self) -> None:
        self._tz = ZoneInfo(self.timezone_name)

    def today(self) -> CalendarDate:
        """Return today's date, recomputed on every call."""
        return CalendarDate.from_date(self.clock().astimezone(self._tz).date())
