"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; decoding is in the core module.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import requests

from quakefeed.core.config import USGS_API_BASE
from quakefeed.core.earthquake import Earthquake, parse_earthquakes
from quakefeed.core.errors import ParseError, RequestError


logger = logging.getLogger(__name__)


# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30

# Time bounds are sent as UTC without an offset suffix
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


@dataclass
class PageQuery:
    """Parameters for one page of a USGS query.

    Attributes:
        start_time: Fetch earthquakes after this time
        end_time: Fetch earthquakes before this time
        min_magnitude: Minimum magnitude to fetch
        limit: Maximum number of results
        offset: 1-based index of the first result
    """
    start_time: datetime
    end_time: datetime
    min_magnitude: float = 0.0
    limit: int = 20
    offset: int = 1

    def validate(self) -> None:
        """Check the query before any request is made.

        Raises:
            ValueError: If the window is empty or limit/offset are out of range
        """
        if self.start_time >= self.end_time:
            raise ValueError(
                f"start_time {self.start_time} must be before end_time {self.end_time}"
            )
        if self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")
        if self.offset < 1:
            raise ValueError(f"offset is 1-based, got {self.offset}")


def _format_time(value: datetime) -> str:
    # Naive datetimes are taken to already be UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIME_FORMAT)


class USGSClient:
    """Client for fetching earthquake pages from the USGS API.

    This is part of the imperative shell - it handles HTTP I/O. It is
    stateless per call and never retries; retry policy belongs to the caller.
    """

    def __init__(
        self,
        base_url: str = USGS_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS API query endpoint
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def _build_params(self, query: PageQuery) -> dict[str, str]:
        """Build query parameters for a USGS API request.

        Args:
            query: Query parameters

        Returns:
            Dict of URL query parameters
        """
        return {
            "format": "geojson",
            "orderby": "time",
            "starttime": _format_time(query.start_time),
            "endtime": _format_time(query.end_time),
            "minmagnitude": str(query.min_magnitude),
            "limit": str(query.limit),
            "offset": str(query.offset),
        }

    def fetch_query(self, query: PageQuery) -> list[Earthquake]:
        """Fetch and decode one page of earthquakes.

        This method performs HTTP I/O.

        Args:
            query: Page query parameters

        Returns:
            Earthquakes in the order the service returned them

        Raises:
            ValueError: If the query is invalid (no request is made)
            RequestError: If the service does not answer with HTTP 200
            ParseError: If the body is not a valid GeoJSON FeatureCollection
        """
        query.validate()
        params = self._build_params(query)

        logger.info(
            "Fetching earthquakes from USGS",
            extra={"params": params},
        )

        try:
            response = requests.get(
                self.base_url,
                params=params,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.error("USGS request timed out")
            raise RequestError(0, "request timed out") from e
        except requests.RequestException as e:
            logger.error("USGS request failed: %s", str(e))
            raise RequestError(0, str(e)) from e

        if response.status_code != 200:
            logger.warning(
                "USGS returned non-200: %d",
                response.status_code,
            )
            raise RequestError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError("response body is not JSON") from e

        earthquakes = parse_earthquakes(data)

        logger.info(
            "Fetched %d earthquakes from USGS (offset %d)",
            len(earthquakes),
            query.offset,
        )

        return earthquakes

    def fetch_page(
        self,
        start_time: datetime,
        end_time: datetime,
        min_magnitude: float,
        limit: int,
        offset: int = 1,
    ) -> list[Earthquake]:
        """Fetch one page of earthquakes in a time window.

        Convenience wrapper around fetch_query(); see it for errors.

        Args:
            start_time: Window start
            end_time: Window end
            min_magnitude: Minimum magnitude
            limit: Page size
            offset: 1-based index of the first result

        Returns:
            Earthquakes in source order
        """
        query = PageQuery(
            start_time=start_time,
            end_time=end_time,
            min_magnitude=min_magnitude,
            limit=limit,
            offset=offset,
        )
        return self.fetch_query(query)
