"""Feed Controller - Wires Functional Core and Imperative Shell.

This module owns the feed state and coordinates fetching, filtering and
incremental loading of earthquake pages. It is the only place the feed
state is mutated, and every mutation is published to subscribed observers
before control returns to the event loop.
"""

import asyncio
import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol

from quakefeed.core.config import Config
from quakefeed.core.earthquake import Earthquake
from quakefeed.core.errors import FeedError
from quakefeed.core.feed_state import (
    FIRST_PAGE,
    FeedSnapshot,
    FeedState,
    is_short_page,
    next_offset,
)
from quakefeed.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


Observer = Callable[[FeedSnapshot], None]


class EarthquakeSource(Protocol):
    """Anything that can fetch one page of earthquakes, such as USGSClient."""

    def fetch_page(
        self,
        start_time: datetime,
        end_time: datetime,
        min_magnitude: float,
        limit: int,
        offset: int = 1,
    ) -> list[Earthquake]:
        ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FeedController:
    """Coordinates the earthquake feed.

    The data source is any EarthquakeSource, USGSClient by default. Its
    blocking call runs in a worker thread; that call is the only point
    where an operation suspends.

    Overlapping refreshes are resolved by generation: every refresh()
    starts a new generation, and a fetch that completes after a newer
    refresh has started is discarded without touching the state.
    """

    def __init__(
        self,
        config: Config,
        client: EarthquakeSource | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Application configuration
            client: Data source (created from config if not provided)
            clock: Returns the current time (defaults to UTC now)
        """
        self.config = config
        self.client = client or USGSClient(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )
        self.clock = clock or _utc_now
        self._state = FeedState(min_magnitude=config.min_magnitude)
        self._observers: list[Observer] = []
        self._generation = 0

    # ----- Read-only view -----

    @property
    def records(self) -> tuple[Earthquake, ...]:
        return tuple(self._state.records)

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> str:
        return self._state.error

    @property
    def min_magnitude(self) -> float:
        return self._state.min_magnitude

    @property
    def has_more(self) -> bool:
        return self._state.has_more

    @property
    def page(self) -> int:
        return self._state.page

    @property
    def page_size(self) -> int:
        return self.config.page_size

    def snapshot(self) -> FeedSnapshot:
        """Return an immutable copy of the current feed state."""
        return self._state.snapshot()

    # ----- Change notification -----

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer for state changes.

        Observers are called synchronously, in registration order, with a
        snapshot taken after each mutation.

        Args:
            observer: Callable receiving a FeedSnapshot

        Returns:
            A callable that unsubscribes the observer
        """
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Remove an observer. Unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        snapshot = self._state.snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                logger.exception("Feed observer %r failed", observer)

    # ----- Operations -----

    def _window(self) -> tuple[datetime, datetime]:
        end_time = self.clock()
        return end_time - timedelta(hours=self.config.lookback_hours), end_time

    async def _fetch(self, offset: int) -> list[Earthquake]:
        start_time, end_time = self._window()
        return await asyncio.to_thread(
            self.client.fetch_page,
            start_time,
            end_time,
            self._state.min_magnitude,
            self.config.page_size,
            offset,
        )

    def _is_superseded(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(
                "Discarding result of superseded fetch (generation %d, current %d)",
                generation,
                self._generation,
            )
            return True
        return False

    def _fail(self, error: FeedError) -> None:
        logger.warning("Feed fetch failed: %s", error)
        self._state.is_loading = False
        self._state.error = str(error)
        self._notify()

    def _abort(self) -> None:
        logger.error("Feed fetch raised an unexpected error")
        self._state.is_loading = False
        self._notify()

    async def refresh(self) -> None:
        """Reload the first page of the recency window.

        Clears records, error and pagination before fetching, so a failed
        refresh leaves an empty feed with the error set.
        """
        self._generation += 1
        generation = self._generation

        state = self._state
        state.error = ""
        state.page = FIRST_PAGE
        state.has_more = True
        state.records = []
        state.is_loading = True
        self._notify()

        logger.info(
            "Refreshing feed",
            extra={"min_magnitude": state.min_magnitude, "generation": generation},
        )

        try:
            earthquakes = await self._fetch(offset=FIRST_PAGE)
        except FeedError as e:
            if not self._is_superseded(generation):
                self._fail(e)
            return
        except Exception:
            if not self._is_superseded(generation):
                self._abort()
            raise

        if self._is_superseded(generation):
            return

        state.records = list(earthquakes)
        state.has_more = not is_short_page(len(earthquakes), self.config.page_size)
        state.is_loading = False
        self._notify()

        logger.info(
            "Feed refreshed: %d earthquakes, has_more=%s",
            len(earthquakes),
            state.has_more,
        )

    async def load_more(self) -> None:
        """Fetch the next page and append it.

        Does nothing, and notifies no one, while a fetch is in flight or
        after pagination has ended. A page shorter than the page size ends
        pagination and is not appended.
        """
        state = self._state
        if state.is_loading or not state.has_more:
            return

        generation = self._generation
        state.is_loading = True
        self._notify()

        offset = next_offset(state.page, self.config.page_size)
        logger.info("Loading more earthquakes from offset %d", offset)

        try:
            earthquakes = await self._fetch(offset=offset)
        except FeedError as e:
            if not self._is_superseded(generation):
                self._fail(e)
            return
        except Exception:
            if not self._is_superseded(generation):
                self._abort()
            raise

        if self._is_superseded(generation):
            return

        if is_short_page(len(earthquakes), self.config.page_size):
            state.has_more = False
            logger.info("Reached end of feed after page %d", state.page)
        else:
            state.records = state.records + list(earthquakes)
            state.page += 1

        state.is_loading = False
        self._notify()

    async def set_filter(self, value: float) -> None:
        """Change the minimum magnitude and refresh.

        Setting the current value again is a no-op.

        Args:
            value: New minimum magnitude

        Raises:
            ValueError: If value is NaN
        """
        if math.isnan(value):
            raise ValueError("Minimum magnitude is not a number")

        if value == self._state.min_magnitude:
            return

        logger.info(
            "Minimum magnitude changed from %.1f to %.1f",
            self._state.min_magnitude,
            value,
        )
        self._state.min_magnitude = value
        await self.refresh()
