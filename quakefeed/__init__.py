"""Recent earthquake feed backed by the USGS event catalog.

The feed controller is the application's session object; build one per
session and hand it to the UI layer.
"""

from quakefeed.feed_controller import FeedController

__all__ = [
    "FeedController",
]
