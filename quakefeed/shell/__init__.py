"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS API client (HTTP)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from quakefeed.shell.usgs_client import USGSClient, PageQuery
from quakefeed.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "USGSClient",
    "PageQuery",
    "load_config",
    "load_config_from_env",
]
