"""Geographic calculations - Pure functions.

Bounding boxes and map viewports for a set of earthquake locations.
All functions are pure with no side effects.
"""

from dataclasses import dataclass

from quakefeed.core.earthquake import Earthquake


# Viewport used when there is nothing to show
WORLD_CENTER = (0.0, 0.0)
WORLD_ZOOM = 2

# (minimum span in degrees, zoom level), widest first
_SPAN_ZOOM_LEVELS = (
    (90.0, 2),
    (45.0, 3),
    (20.0, 4),
    (10.0, 5),
    (5.0, 6),
    (2.0, 7),
)
_CLOSEST_ZOOM = 8


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box.

    Attributes:
        min_latitude: Southern boundary
        max_latitude: Northern boundary
        min_longitude: Western boundary
        max_longitude: Eastern boundary
    """
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    def contains(self, latitude: float, longitude: float) -> bool:
        """Check if a point is within this bounding box."""
        return (
            self.min_latitude <= latitude <= self.max_latitude
            and self.min_longitude <= longitude <= self.max_longitude
        )

    @property
    def center(self) -> tuple[float, float]:
        """Return the (latitude, longitude) midpoint."""
        return (
            (self.min_latitude + self.max_latitude) / 2,
            (self.min_longitude + self.max_longitude) / 2,
        )

    @property
    def span(self) -> float:
        """Return the larger of the latitude and longitude extents, in degrees."""
        return max(
            self.max_latitude - self.min_latitude,
            self.max_longitude - self.min_longitude,
        )


@dataclass(frozen=True)
class MapViewport:
    """Initial camera position for the map view.

    Attributes:
        latitude: Center latitude
        longitude: Center longitude
        zoom: Zoom level (1-18)
    """
    latitude: float
    longitude: float
    zoom: int


def get_bounds(earthquakes: list[Earthquake]) -> BoundingBox | None:
    """Get the smallest bounding box containing every epicenter.

    Pure function.

    Args:
        earthquakes: Earthquakes to enclose

    Returns:
        BoundingBox, or None if the list is empty
    """
    if not earthquakes:
        return None

    latitudes = [e.latitude for e in earthquakes]
    longitudes = [e.longitude for e in earthquakes]

    return BoundingBox(
        min_latitude=min(latitudes),
        max_latitude=max(latitudes),
        min_longitude=min(longitudes),
        max_longitude=max(longitudes),
    )


def get_zoom_for_span(span_degrees: float) -> int:
    """Choose a zoom level that fits `span_degrees` on screen.

    Pure function.
    """
    for min_span, zoom in _SPAN_ZOOM_LEVELS:
        if span_degrees >= min_span:
            return zoom
    return _CLOSEST_ZOOM


def get_viewport(earthquakes: list[Earthquake]) -> MapViewport:
    """Center the map on the loaded earthquakes.

    Pure function. Falls back to a whole-world view when empty.

    Args:
        earthquakes: Earthquakes shown on the map

    Returns:
        MapViewport for the initial camera position
    """
    bounds = get_bounds(earthquakes)
    if bounds is None:
        return MapViewport(
            latitude=WORLD_CENTER[0],
            longitude=WORLD_CENTER[1],
            zoom=WORLD_ZOOM,
        )

    latitude, longitude = bounds.center
    return MapViewport(
        latitude=latitude,
        longitude=longitude,
        zoom=get_zoom_for_span(bounds.span),
    )
