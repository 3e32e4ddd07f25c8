"""HTTP client for the media-monitor statistics API."""

import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from streammon_dashboard.domain.dates import CalendarDate
from streammon_dashboard.domain.geo import GeoLocationRecord
from streammon_dashboard.domain.stats import MEDIA_SERIES, DayStatRecord

logger = logging.getLogger(__name__)


class StreammonClient(Protocol):
    """Interface for fetching raw dashboard data."""

    async def get_daily_stats(self, params: dict[str, str]) -> list[dict[str, object]]:
        """Return per-day play counts for the query window."""

    async def get_user_locations(self, user_name: str) -> list[dict[str, object]]:
        """Return geolocated IP addresses for a user."""


@dataclass
class HttpxStreammonClient(StreammonClient):
    """HTTPX-backed media-monitor client."""

    base_url: str
    http_client: httpx.AsyncClient
    api_key: str | None = None
    timeout: float = 15

    @classmethod
    def create(
        cls, base_url: str, api_key: str | None = None, timeout: float = 15
    ) -> "HttpxStreammonClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            api_key=api_key,
            timeout=timeout,
        )

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"X-Api-Key": self.api_key}

    async def get_daily_stats(self, params: dict[str, str]) -> list[dict[str, object]]:
        """Fetch daily play counts."""
        response = await self.http_client.get(
            f"{self.base_url}/api/history/daily",
            params=params,
            headers=self._headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()
        return _json_rows(response)

    async def get_user_locations(self, user_name: str) -> list[dict[str, object]]:
        """Fetch locations for a user."""
        response = await self.http_client.get(
            f"{self.base_url}/api/users/{quote(user_name, safe='')}/locations",
            headers=self._headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()
        return _json_rows(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _json_rows(response: httpx.Response) -> list[dict[str, object]]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise httpx.DecodingError(
            "Response body is not JSON", request=response.request
        ) from exc
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise httpx.DecodingError(
            f"Expected a JSON list, got {type(payload).__name__}",
            request=response.request,
        )
    return [row for row in payload if isinstance(row, dict)]


def parse_day_stat(row: dict[str, object]) -> DayStatRecord | None:
    """Convert a raw daily row, or return None when the date is unusable."""
    raw_date = row.get("date")
    if not isinstance(raw_date, str):
        logger.warning("Skipping daily stat without a date: %s", row)
        return None
    try:
        day = CalendarDate.from_iso(raw_date)
    except ValueError:
        logger.warning("Skipping daily stat with invalid date %r", raw_date)
        return None
    counts: dict[str, int] = {}
    for descriptor in MEDIA_SERIES:
        value = row.get(descriptor.key)
        if isinstance(value, int | float) and not isinstance(value, bool):
            counts[descriptor.key] = int(value)
    return DayStatRecord(day=day, counts=counts)


def parse_location(row: dict[str, object]) -> GeoLocationRecord:
    """Convert a raw location row."""
    last_seen = row.get("last_seen")
    return GeoLocationRecord(
        ip=str(row.get("ip", "")),
        lat=_optional_float(row.get("lat")),
        lng=_optional_float(row.get("lng")),
        city=_optional_str(row.get("city")),
        country=_optional_str(row.get("country")),
        last_seen=last_seen if isinstance(last_seen, str) else None,
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    return None


def _optional_str(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None
