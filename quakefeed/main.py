"""Command-line Entry Point.

This module is the composition root: it configures logging, loads
configuration, builds the USGS client and feed controller, and drives a
feed session from the terminal.
"""

import argparse
import asyncio
import logging
import os
import sys

from quakefeed.core.config import Config, validate_config
from quakefeed.core.feed_state import FeedSnapshot
from quakefeed.core.geo import get_viewport
from quakefeed.core.presentation import (
    LIST_EMPTY,
    LIST_ERROR,
    LIST_LOADING,
    build_map_markers,
    format_filter_label,
    format_list_item,
    get_list_view_state,
    snap_magnitude,
)
from quakefeed.feed_controller import FeedController
from quakefeed.shell.config_loader import (
    DEFAULT_CONFIG_PATH,
    load_config,
    load_config_from_env,
)
from quakefeed.shell.usgs_client import USGSClient


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config(config_path: str | None = None) -> Config:
    """Load configuration from file or environment."""
    if config_path:
        return load_config(config_path)
    elif os.environ.get("CONFIG_PATH") or os.path.exists(DEFAULT_CONFIG_PATH):
        return load_config()
    else:
        return load_config_from_env()


def build_controller(config: Config) -> FeedController:
    """Wire a feed controller for one application session."""
    client = USGSClient(base_url=config.base_url, timeout=config.timeout_seconds)
    return FeedController(config, client=client)


def render_list(snapshot: FeedSnapshot) -> list[str]:
    """Render the list view as text lines."""
    lines = [format_filter_label(snapshot.min_magnitude)]

    view_state = get_list_view_state(snapshot)
    if view_state == LIST_LOADING:
        lines.append("Loading...")
    elif view_state == LIST_ERROR:
        lines.append(f"Error: {snapshot.error}")
    elif view_state == LIST_EMPTY:
        lines.append("No earthquakes found")
    else:
        for item in map(format_list_item, snapshot.records):
            lines.append(f"[{item.magnitude_text:>4}] {item.title} - {item.subtitle}")
        if snapshot.has_more:
            lines.append("(more available)")

    return lines


def render_map(snapshot: FeedSnapshot) -> list[str]:
    """Render the map view as text lines: viewport, then one line per marker."""
    viewport = get_viewport(list(snapshot.records))
    lines = [
        f"Map center: {viewport.latitude:.4f}, {viewport.longitude:.4f} (zoom {viewport.zoom})"
    ]
    for marker in build_map_markers(snapshot):
        lines.append(
            f"{marker.id} @ {marker.latitude:.4f}, {marker.longitude:.4f} "
            f"{marker.color} r={marker.radius} {marker.title}: {marker.snippet}"
        )
    return lines


async def run(controller: FeedController, pages: int = 1) -> FeedSnapshot:
    """Refresh the feed, then load up to `pages - 1` more pages.

    Args:
        controller: Feed controller to drive
        pages: Total number of pages to request

    Returns:
        Final feed snapshot
    """
    def log_change(snapshot: FeedSnapshot) -> None:
        logger.debug(
            "Feed changed: %d records, loading=%s, has_more=%s",
            len(snapshot.records),
            snapshot.is_loading,
            snapshot.has_more,
        )

    unsubscribe = controller.subscribe(log_change)
    try:
        await controller.refresh()
        for _ in range(pages - 1):
            if controller.error or not controller.has_more:
                break
            await controller.load_more()
    finally:
        unsubscribe()

    return controller.snapshot()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show recent earthquakes from the USGS catalog",
    )
    parser.add_argument(
        "--config",
        help=f"Path to YAML config (default: $CONFIG_PATH or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--min-magnitude",
        type=float,
        help="Minimum magnitude (0.0-9.0, rounded to 0.5 steps)",
    )
    parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Number of pages to load (default: 1)",
    )
    parser.add_argument(
        "--map",
        action="store_true",
        help="Show map markers instead of the list",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one feed session from the command line.

    Returns:
        Process exit status
    """
    args = parse_args(argv)

    config = _get_config(args.config)
    if args.min_magnitude is not None:
        config.min_magnitude = snap_magnitude(args.min_magnitude)

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config %s: %s", error.field, error.message)
        return 2

    controller = build_controller(config)
    snapshot = asyncio.run(run(controller, pages=max(args.pages, 1)))

    lines = render_map(snapshot) if args.map else render_list(snapshot)
    print("\n".join(lines))

    if snapshot.error and not snapshot.records:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
