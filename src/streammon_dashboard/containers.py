"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from streammon_dashboard.adapters.streammon_client import HttpxStreammonClient
from streammon_dashboard.config import Settings, parse_server_ids
from streammon_dashboard.services.dashboard import DashboardService
from streammon_dashboard.services.date_range import LocalTodayProvider


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    client = HttpxStreammonClient.create(
        base_url=resolved_settings.streammon_url,
        api_key=resolved_settings.streammon_api_key,
        timeout=resolved_settings.request_timeout_seconds,
    )
    dashboard_service = DashboardService(
        client=client,
        today_provider=LocalTodayProvider(resolved_settings.display_timezone),
        all_time_window=resolved_settings.all_time_window_days,
        default_server_ids=parse_server_ids(resolved_settings.server_ids),
    )

    async def close_resources() -> None:
        await client.close()

    return AppContainer(
        settings=resolved_settings,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
