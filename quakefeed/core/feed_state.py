"""Feed state models - Pure data structures.

FeedState is the only mutable entity in the application; it is owned and
mutated by the feed controller. Observers and the UI only ever see
FeedSnapshot, an immutable copy taken after each mutation.
"""

from dataclasses import dataclass, field

from quakefeed.core.earthquake import Earthquake


FIRST_PAGE = 1


@dataclass
class FeedState:
    """Mutable feed state.

    Attributes:
        records: Loaded earthquakes, in source order
        is_loading: True while a fetch or load-more is in flight
        min_magnitude: Current filter threshold
        error: Last error message ("" when none)
        page: Pagination cursor, starts at 1
        has_more: False once a page comes back shorter than the page size
    """
    records: list[Earthquake] = field(default_factory=list)
    is_loading: bool = False
    min_magnitude: float = 0.0
    error: str = ""
    page: int = FIRST_PAGE
    has_more: bool = True

    def snapshot(self) -> "FeedSnapshot":
        """Return an immutable copy of the current state."""
        return FeedSnapshot(
            records=tuple(self.records),
            is_loading=self.is_loading,
            min_magnitude=self.min_magnitude,
            error=self.error,
            page=self.page,
            has_more=self.has_more,
        )


@dataclass(frozen=True)
class FeedSnapshot:
    """Read-only view of the feed state at one point in time."""
    records: tuple[Earthquake, ...] = ()
    is_loading: bool = False
    min_magnitude: float = 0.0
    error: str = ""
    page: int = FIRST_PAGE
    has_more: bool = True

    @property
    def has_error(self) -> bool:
        return bool(self.error)


def next_offset(page: int, page_size: int) -> int:
    """Compute the 1-based offset of the page after `page`.

    Pure function.

    Args:
        page: Current pagination cursor (1 for the first page)
        page_size: Records per page

    Returns:
        Offset of the first record of the next page
    """
    return page * page_size + 1


def is_short_page(count: int, page_size: int) -> bool:
    """Return True if a page with `count` records ends pagination.

    Pure function. An empty page is always short.
    """
    return count == 0 or count < page_size
