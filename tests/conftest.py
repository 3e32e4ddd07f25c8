"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from streammon_dashboard.adapters.streammon_client import StreammonClient
from streammon_dashboard.config import Settings
from streammon_dashboard.containers import AppContainer
from streammon_dashboard.services.dashboard import DashboardService
from streammon_dashboard.services.date_range import LocalTodayProvider

FIXED_NOW = datetime(2024, 3, 3, 15, 30, tzinfo=UTC)


@dataclass
class FakeStreammonClient(StreammonClient):
    """In-memory client that records requests."""

    daily: list[dict[str, object]] = field(default_factory=list)
    locations: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    daily_requests: list[dict[str, str]] = field(default_factory=list)
    error: Exception | None = None

    async def get_daily_stats(self, params: dict[str, str]) -> list[dict[str, object]]:
        self.daily_requests.append(params)
        if self.error:
            raise self.error
        return self.daily

    async def get_user_locations(self, user_name: str) -> list[dict[str, object]]:
        if self.error:
            raise self.error
        return self.locations.get(user_name, [])


@pytest.fixture
def settings() -> Settings:
    return Settings(streammon_url="https://streammon.test")


@pytest.fixture
def fake_client() -> FakeStreammonClient:
    return FakeStreammonClient()


@pytest.fixture
def dashboard_service(fake_client: FakeStreammonClient) -> DashboardService:
    return DashboardService(
        client=fake_client,
        today_provider=LocalTodayProvider("UTC", clock=lambda: FIXED_NOW),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def container(
    settings: Settings, dashboard_service: DashboardService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
