"""Domain models for geolocated logins."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoLocationRecord:
    """A resolved IP address with optional location fields."""

    ip: str
    lat: float | None = None
    lng: float | None = None
    city: str | None = None
    country: str | None = None
    last_seen: str | None = None


@dataclass(frozen=True)
class RecencyClassification:
    """Recency flag and display text for a last-seen timestamp."""

    recent: bool
    text: str
