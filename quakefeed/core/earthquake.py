"""Earthquake data models and parsing - Pure functions.

This module decodes USGS GeoJSON data into typed Earthquake objects.
Decoding is strict: a feature missing a required field fails the whole
page with ParseError, and only the fields documented as optional get a
default.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from quakefeed.core.errors import ParseError


DEFAULT_PLACE = "Unknown location"
DEFAULT_STATUS = "unknown"
DEFAULT_MAGNITUDE = 0.0


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake record.

    Attributes:
        id: Unique USGS event ID
        magnitude: Event magnitude
        place: Human-readable location description
        time: Event timestamp (UTC)
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        depth_km: Depth in kilometers
        status: Review status (e.g., 'reviewed', 'automatic')
    """
    id: str
    magnitude: float
    place: str
    time: datetime
    latitude: float
    longitude: float
    depth_km: float
    status: str = DEFAULT_STATUS

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def _require_number(value: Any, field_name: str) -> float:
    # bool is an int subclass but never a valid coordinate or timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"{field_name} must be a number, got {value!r}")
    return float(value)


def _optional_str(value: Any, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ParseError(f"expected a string, got {value!r}")
    return value


def parse_earthquake(feature: Any) -> Earthquake:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function.

    Args:
        feature: GeoJSON feature dict from USGS API

    Returns:
        Earthquake object

    Raises:
        ParseError: If a required field is missing or has the wrong type
    """
    if not isinstance(feature, dict):
        raise ParseError(f"feature must be an object, got {type(feature).__name__}")

    event_id = feature.get("id")
    if not isinstance(event_id, str) or not event_id:
        raise ParseError("feature is missing its id")

    props = feature.get("properties")
    if not isinstance(props, dict):
        raise ParseError(f"feature {event_id} has no properties")

    geometry = feature.get("geometry")
    coords = geometry.get("coordinates") if isinstance(geometry, dict) else None
    if not isinstance(coords, list) or len(coords) < 3:
        raise ParseError(f"feature {event_id} has no [lon, lat, depth] coordinates")

    # USGS uses milliseconds since epoch
    time_ms = props.get("time")
    if time_ms is None:
        raise ParseError(f"feature {event_id} is missing its time")
    try:
        event_time = datetime.fromtimestamp(
            _require_number(time_ms, "properties.time") / 1000,
            tz=timezone.utc,
        )
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(f"feature {event_id} has an invalid time {time_ms!r}") from e

    magnitude = props.get("mag")
    if magnitude is None:
        magnitude = DEFAULT_MAGNITUDE

    return Earthquake(
        id=event_id,
        magnitude=_require_number(magnitude, "properties.mag"),
        place=_optional_str(props.get("place"), DEFAULT_PLACE),
        time=event_time,
        longitude=_require_number(coords[0], "longitude"),
        latitude=_require_number(coords[1], "latitude"),
        depth_km=_require_number(coords[2], "depth"),
        status=_optional_str(props.get("status"), DEFAULT_STATUS),
    )


def parse_earthquakes(geojson: Any) -> list[Earthquake]:
    """Parse a USGS GeoJSON FeatureCollection into a list of Earthquakes.

    Pure function. Records keep the order the source returned them in,
    since pagination offsets are computed against that order.

    Args:
        geojson: Full GeoJSON FeatureCollection from USGS API

    Returns:
        List of Earthquake objects in source order

    Raises:
        ParseError: If the collection or any feature is malformed
    """
    if not isinstance(geojson, dict):
        raise ParseError("response is not a JSON object")

    features = geojson.get("features")
    if not isinstance(features, list):
        raise ParseError("response has no features array")

    return [parse_earthquake(feature) for feature in features]
