"""Presentation data - Pure functions.

This module turns earthquakes and feed snapshots into plain values that a
UI layer can draw: list items, detail lines, map markers, and the state of
the list and filter widgets. Nothing here renders anything.
"""

import math
from dataclasses import dataclass

from quakefeed.core.earthquake import Earthquake
from quakefeed.core.feed_state import FeedSnapshot


# List view states
LIST_LOADING = "loading"
LIST_ERROR = "error"
LIST_EMPTY = "empty"
LIST_READY = "list"

# Magnitude filter slider: 0.0 to 9.0 in 0.5 steps
MAGNITUDE_FILTER_MIN = 0.0
MAGNITUDE_FILTER_MAX = 9.0
MAGNITUDE_FILTER_STEP = 0.5

# Distance from the end of the list (pixels) at which the next page is requested
LOAD_MORE_THRESHOLD = 200.0

TIME_FORMAT = "%d/%m/%Y %H:%M"


@dataclass(frozen=True)
class ListItem:
    """One row of the earthquake list.

    Attributes:
        id: Earthquake ID
        magnitude_text: Magnitude with one decimal, shown in the badge
        color: Hex color of the badge
        title: Location
        subtitle: Event time
    """
    id: str
    magnitude_text: str
    color: str
    title: str
    subtitle: str


@dataclass(frozen=True)
class MapMarker:
    """One earthquake marker on the map.

    Attributes:
        id: Earthquake ID
        latitude: Marker latitude
        longitude: Marker longitude
        title: Info window title
        snippet: Info window body
        color: Hex color for the marker
        radius: Marker radius in pixels
    """
    id: str
    latitude: float
    longitude: float
    title: str
    snippet: str
    color: str
    radius: int


def get_severity_label(magnitude: float) -> str:
    """Get a human-readable severity label.

    Pure function. Bands are <2, <4, <6 and >=6.
    """
    if magnitude < 2.0:
        return "Minor"
    elif magnitude < 4.0:
        return "Light"
    elif magnitude < 6.0:
        return "Moderate"
    return "Strong"


def get_magnitude_color(magnitude: float) -> str:
    """Get hex color for magnitude visualization.

    Pure function. Uses the same bands as get_severity_label().

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Hex color string (e.g., "#dc2626")
    """
    if magnitude < 2.0:
        return "#22c55e"  # green-500
    elif magnitude < 4.0:
        return "#eab308"  # yellow-500
    elif magnitude < 6.0:
        return "#f97316"  # orange-500
    return "#dc2626"  # red-600


def get_marker_radius(magnitude: float) -> int:
    """Determine marker radius based on magnitude.

    Pure function. Larger earthquakes get bigger markers.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Marker radius in pixels
    """
    # Scale radius with magnitude (roughly 8-20 pixels)
    base_radius = 8
    scale_factor = 2
    return max(base_radius, min(int(base_radius + magnitude * scale_factor), 24))


def format_time(earthquake: Earthquake) -> str:
    return earthquake.time.strftime(TIME_FORMAT)


def format_earthquake_summary(earthquake: Earthquake) -> str:
    """Format a one-line summary of an earthquake.

    Pure function.

    Args:
        earthquake: Earthquake to summarize

    Returns:
        One-line summary string
    """
    return (
        f"M{earthquake.magnitude:.1f} - {earthquake.place} "
        f"at {format_time(earthquake)} UTC (depth: {earthquake.depth_km:.1f}km)"
    )


def format_list_item(earthquake: Earthquake) -> ListItem:
    """Build the list row for an earthquake.

    Pure function.
    """
    return ListItem(
        id=earthquake.id,
        magnitude_text=f"{earthquake.magnitude:.1f}",
        color=get_magnitude_color(earthquake.magnitude),
        title=earthquake.place,
        subtitle=format_time(earthquake),
    )


def format_detail(earthquake: Earthquake) -> tuple[str, list[str]]:
    """Build the title and body lines of the detail dialog.

    Pure function.

    Args:
        earthquake: Earthquake the user selected

    Returns:
        Tuple of (title, lines)
    """
    title = f"Magnitude {earthquake.magnitude}"
    lines = [
        f"Location: {earthquake.place}",
        f"Date: {format_time(earthquake)}",
        f"Latitude: {earthquake.latitude}",
        f"Longitude: {earthquake.longitude}",
        f"Depth: {earthquake.depth_km} km",
        f"Status: {earthquake.status}",
    ]
    return title, lines


def build_map_markers(snapshot: FeedSnapshot) -> list[MapMarker]:
    """Build map markers for every loaded earthquake.

    Pure function. The map shows a progress indicator instead of markers
    while a fetch is in flight, so no markers are returned then.
    """
    if snapshot.is_loading:
        return []

    return [
        MapMarker(
            id=e.id,
            latitude=e.latitude,
            longitude=e.longitude,
            title=f"Magnitude {e.magnitude}",
            snippet=e.place,
            color=get_magnitude_color(e.magnitude),
            radius=get_marker_radius(e.magnitude),
        )
        for e in snapshot.records
    ]


def get_list_view_state(snapshot: FeedSnapshot) -> str:
    """Decide what the list screen shows.

    Pure function. Once records exist they are shown, even if a later
    load-more failed or another page is loading.

    Returns:
        One of LIST_LOADING, LIST_ERROR, LIST_EMPTY, LIST_READY
    """
    if snapshot.records:
        return LIST_READY
    if snapshot.is_loading:
        return LIST_LOADING
    if snapshot.error:
        return LIST_ERROR
    return LIST_EMPTY


def shows_loading_footer(snapshot: FeedSnapshot) -> bool:
    """Return True if the list should end with a "loading more" row."""
    return snapshot.is_loading and bool(snapshot.records)


def should_load_more(
    pixels: float,
    max_extent: float,
    threshold: float = LOAD_MORE_THRESHOLD,
) -> bool:
    """Check whether the list is scrolled close enough to its end.

    Pure function.

    Args:
        pixels: Current scroll offset
        max_extent: Maximum scroll offset
        threshold: Distance from the end that triggers loading

    Returns:
        True if the next page should be requested
    """
    return pixels >= max_extent - threshold


def snap_magnitude(value: float) -> float:
    """Clamp and round a raw slider value to a valid filter threshold.

    Pure function.

    Raises:
        ValueError: If value is NaN
    """
    if math.isnan(value):
        raise ValueError("Magnitude filter value is not a number")

    clamped = min(max(value, MAGNITUDE_FILTER_MIN), MAGNITUDE_FILTER_MAX)
    steps = round((clamped - MAGNITUDE_FILTER_MIN) / MAGNITUDE_FILTER_STEP)
    return MAGNITUDE_FILTER_MIN + steps * MAGNITUDE_FILTER_STEP


def format_filter_label(min_magnitude: float) -> str:
    return f"Minimum magnitude: {min_magnitude:.1f}"
