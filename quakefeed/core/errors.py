"""Feed errors - Pure data structures.

Errors raised by the data source and caught at the feed controller
boundary, where they become a display string on the feed state.
"""


class FeedError(Exception):
    """Base class for errors surfaced to the feed."""


class RequestError(FeedError):
    """The catalog returned a non-success response.

    Attributes:
        status_code: HTTP status code (0 when no response was received)
    """

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        message = f"Failed to load earthquakes: {status_code}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ParseError(FeedError):
    """The response body could not be decoded into earthquake records."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Malformed earthquake data: {detail}")
