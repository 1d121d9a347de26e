"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in quakefeed/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakefeed.core.config import Config, USGS_API_BASE


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${VAR} environment placeholder.

    Args:
        value: Value to resolve

    Returns:
        Resolved value, or the original value if it is not a placeholder
        or the variable is not set
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    resolved = {key: _resolve_value(value) for key, value in data.items()}
    defaults = Config()

    return Config(
        base_url=str(resolved.get("base_url", defaults.base_url)),
        timeout_seconds=int(resolved.get("timeout_seconds", defaults.timeout_seconds)),
        page_size=int(resolved.get("page_size", defaults.page_size)),
        lookback_hours=int(resolved.get("lookback_hours", defaults.lookback_hours)),
        min_magnitude=float(resolved.get("min_magnitude", defaults.min_magnitude)),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: page size %d, lookback %dh, min magnitude %.1f",
        config.page_size,
        config.lookback_hours,
        config.min_magnitude,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for deployments without a YAML file.

    Environment variables:
        USGS_API_BASE: Query endpoint
        USGS_TIMEOUT: Request timeout in seconds
        PAGE_SIZE: Records per page
        LOOKBACK_HOURS: Length of the recency window
        MIN_MAGNITUDE: Initial filter threshold

    Returns:
        Config object from environment
    """
    defaults = Config()

    return Config(
        base_url=os.environ.get("USGS_API_BASE", USGS_API_BASE),
        timeout_seconds=int(os.environ.get("USGS_TIMEOUT", defaults.timeout_seconds)),
        page_size=int(os.environ.get("PAGE_SIZE", defaults.page_size)),
        lookback_hours=int(os.environ.get("LOOKBACK_HOURS", defaults.lookback_hours)),
        min_magnitude=float(os.environ.get("MIN_MAGNITUDE", defaults.min_magnitude)),
    )
