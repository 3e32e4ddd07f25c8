"""Recency classification for last-seen timestamps."""

import logging
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from streammon_dashboard.domain.geo import RecencyClassification

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
RELATIVE_DAYS_LIMIT = 7

FALLBACK_DASH = "—"
FALLBACK_UNKNOWN = "Unknown"

logger = logging.getLogger(__name__)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None when it is unusable."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring malformed timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        logger.debug("Ignoring out-of-range timestamp %r", value)
        return None


def _age_ms(seen: datetime, now: datetime) -> int:
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return (now - seen) // timedelta(milliseconds=1)


def _format_date(value: datetime, timezone_name: str) -> str | None:
    try:
        local = value.astimezone(ZoneInfo(timezone_name))
    except OverflowError:
        return None
    return f"{local.month}/{local.day}/{local.year}"


def classify(
    last_seen: str | None,
    now: datetime,
    fallback: str = FALLBACK_DASH,
    timezone_name: str = "UTC",
) -> RecencyClassification:
    """Classify a last-seen timestamp relative to ``now``.

    Unparseable or missing timestamps produce ``fallback`` and are never
    recent. The recent flag depends only on the 24 hour threshold.
    """
    seen = parse_timestamp(last_seen)
    if seen is None:
        return RecencyClassification(recent=False, text=fallback)

    age_ms = _age_ms(seen, now)
    minutes = age_ms // MS_PER_MINUTE
    hours = age_ms // MS_PER_HOUR
    days = age_ms // MS_PER_DAY

    if minutes < 1:
        text = "Just now"
    elif minutes < MINUTES_PER_HOUR:
        text = f"{minutes}m ago"
    elif hours < HOURS_PER_DAY:
        text = f"{hours}h ago"
    elif days < RELATIVE_DAYS_LIMIT:
        text = f"{days}d ago"
    else:
        absolute = _format_date(seen, timezone_name)
        if absolute is None:
            return RecencyClassification(recent=False, text=fallback)
        text = absolute
    return RecencyClassification(recent=age_ms < MS_PER_DAY, text=text)


def is_recent(last_seen: str | None, now: datetime) -> bool:
    """Return True when the timestamp is less than 24 hours old."""
    return classify(last_seen, now).recent


def format_last_seen(
    last_seen: str | None,
    now: datetime,
    fallback: str = FALLBACK_DASH,
    timezone_name: str = "UTC",
) -> str:
    """Return the relative age text for a timestamp."""
    return classify(last_seen, now, fallback, timezone_name).text


def format_seen_date(
    last_seen: str | None,
    fallback: str = FALLBACK_UNKNOWN,
    timezone_name: str = "UTC",
) -> str:
    """Return only the calendar date of a timestamp."""
    seen = parse_timestamp(last_seen)
    if seen is None:
        return fallback
    return _format_date(seen, timezone_name) or fallback


def format_location(city: str | None, country: str | None) -> str:
    """Join whichever of city and country are present."""
    parts = [part for part in (city, country) if part]
    if not parts:
        return FALLBACK_UNKNOWN
    return ", ".join(parts)
