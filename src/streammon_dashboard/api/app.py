"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

import httpx
from fastapi import FastAPI, HTTPException, Query, Request, status

from streammon_dashboard.app_logging import configure_logging
from streammon_dashboard.config import parse_server_ids
from streammon_dashboard.containers import AppContainer
from streammon_dashboard.services.date_range import MAX_WINDOW_DAYS
from streammon_dashboard.services.series import DailyChart


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/dashboard/daily")
    async def daily_plays(
        request: Request,
        days: int = Query(default=30, ge=0, le=MAX_WINDOW_DAYS),
        start: str | None = None,
        end: str | None = None,
        server_ids: str | None = None,
    ) -> dict[str, object]:
        """Return daily play counts shaped for a line chart."""
        state_container: AppContainer = request.app.state.container
        try:
            chart = await state_container.dashboard_service.daily_chart(
                days,
                start=start,
                end=end,
                server_ids=parse_server_ids(server_ids),
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.exception("Failed to load daily stats")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to load chart data",
            ) from exc
        return _chart_payload(chart)

    @app.get("/api/users/{user_name}/locations")
    async def user_locations(user_name: str, request: Request) -> dict[str, object]:
        """Return a user's locations with last-seen recency."""
        state_container: AppContainer = request.app.state.container
        try:
            locations = await state_container.dashboard_service.user_locations(
                user_name
            )
        except httpx.HTTPError as exc:
            logger.exception("Failed to load locations for %s", user_name)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to load locations",
            ) from exc
        return {"locations": [asdict(location) for location in locations]}

    return app


def _chart_payload(chart: DailyChart) -> dict[str, object]:
    return {
        "start": chart.date_range.start.isoformat(),
        "end": chart.date_range.end.isoformat(),
        "has_data": chart.has_data,
        "series": [asdict(descriptor) for descriptor in chart.series],
        "rows": chart.rows,
    }
