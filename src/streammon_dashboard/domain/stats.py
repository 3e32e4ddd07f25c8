"""Domain models for daily play statistics."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from streammon_dashboard.domain.dates import CalendarDate

CHART_COLORS = (
    "#00e5ff",
    "#a78bfa",
    "#34d399",
    "#ffab00",
    "#f472b6",
    "#fb923c",
    "#60a5fa",
    "#f87171",
)


@dataclass(frozen=True)
class SeriesDescriptor:
    """Display metadata for one plotted series."""

    key: str
    label: str
    color: str


MEDIA_SERIES: tuple[SeriesDescriptor, ...] = (
    SeriesDescriptor(key="movies", label="Movies", color=CHART_COLORS[0]),
    SeriesDescriptor(key="tv", label="TV", color=CHART_COLORS[1]),
    SeriesDescriptor(key="livetv", label="Live TV", color=CHART_COLORS[3]),
    SeriesDescriptor(key="music", label="Music", color=CHART_COLORS[2]),
    SeriesDescriptor(key="audiobooks", label="Audiobooks", color=CHART_COLORS[4]),
    SeriesDescriptor(key="books", label="Books", color=CHART_COLORS[5]),
)


@dataclass(frozen=True)
class DayStatRecord:
    """Play counts per series for a single calendar date."""

    day: CalendarDate
    counts: Mapping[str, int] = field(default_factory=dict)

    def value(self, key: str) -> int:
        """Return the count for ``key``; missing keys count as zero."""
        return self.counts.get(key, 0)
