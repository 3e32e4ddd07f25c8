"""Dashboard view models built from fetched statistics."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from streammon_dashboard.adapters.streammon_client import (
    StreammonClient,
    parse_day_stat,
    parse_location,
)
from streammon_dashboard.services.date_range import (
    DEFAULT_ALL_TIME_WINDOW,
    LocalTodayProvider,
    range_query_params,
    select_range,
)
from streammon_dashboard.services.recency import (
    FALLBACK_DASH,
    classify,
    format_location,
)
from streammon_dashboard.services.series import DailyChart, build_daily_chart

COLOR_RECENT = "#f59e0b"
COLOR_OLD = "#3b82f6"


@dataclass(frozen=True)
class LocationView:
    """A location row ready for the map and table."""

    ip: str
    location: str
    lat: float | None
    lng: float | None
    recent: bool
    last_seen_text: str
    marker_color: str


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class DashboardService:
    """Service that fetches raw data and shapes it for display."""

    client: StreammonClient
    today_provider: LocalTodayProvider
    all_time_window: int = DEFAULT_ALL_TIME_WINDOW
    default_server_ids: list[int] | None = None
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def daily_chart(
        self,
        days: int,
        start: str | None = None,
        end: str | None = None,
        server_ids: list[int] | None = None,
    ) -> DailyChart:
        """Return daily plays for a window or custom range."""
        date_range = select_range(
            days,
            self.today_provider.today(),
            start=start,
            end=end,
            all_time_window=self.all_time_window,
        )
        params = range_query_params(
            date_range, server_ids if server_ids else self.default_server_ids
        )
        rows = await self.client.get_daily_stats(params)
        records = [
            record
            for row in rows
            if isinstance(row, dict) and (record := parse_day_stat(row))
        ]
        return build_daily_chart(records, date_range)

    async def user_locations(
        self, user_name: str, now: datetime | None = None
    ) -> list[LocationView]:
        """Return a user's locations with recency applied."""
        resolved_now = now or self.clock()
        rows = await self.client.get_user_locations(user_name)
        views = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            location = parse_location(row)
            recency = classify(
                location.last_seen,
                resolved_now,
                fallback=FALLBACK_DASH,
                timezone_name=self.today_provider.timezone_name,
            )
            views.append(
                LocationView(
                    ip=location.ip,
                    location=format_location(location.city, location.country),
                    lat=location.lat,
                    lng=location.lng,
                    recent=recency.recent,
                    last_seen_text=recency.text,
                    marker_color=COLOR_RECENT if recency.recent else COLOR_OLD,
                )
            )
        return views
