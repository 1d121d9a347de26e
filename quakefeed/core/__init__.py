"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Earthquake data parsing
- Feed state and pagination arithmetic
- Configuration validation
- Presentation data for the list and map views
- Geo/viewport calculations

All functions here are deterministic and have no I/O.
"""

from quakefeed.core.earthquake import Earthquake, parse_earthquake, parse_earthquakes
from quakefeed.core.errors import FeedError, ParseError, RequestError
from quakefeed.core.feed_state import FeedSnapshot, FeedState
from quakefeed.core.config import Config, validate_config
from quakefeed.core.geo import BoundingBox, MapViewport, get_viewport
from quakefeed.core.presentation import (
    build_map_markers,
    format_list_item,
    get_list_view_state,
    snap_magnitude,
)

__all__ = [
    # Earthquake
    "Earthquake",
    "parse_earthquake",
    "parse_earthquakes",
    # Errors
    "FeedError",
    "ParseError",
    "RequestError",
    # Feed state
    "FeedSnapshot",
    "FeedState",
    # Config
    "Config",
    "validate_config",
    # Geo
    "BoundingBox",
    "MapViewport",
    "get_viewport",
    # Presentation
    "build_map_markers",
    "format_list_item",
    "get_list_view_state",
    "snap_magnitude",
]
