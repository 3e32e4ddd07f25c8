"""ASGI entrypoint for the dashboard API."""

from streammon_dashboard.api.app import create_app
from streammon_dashboard.containers import build_container

app = create_app(build_container())
