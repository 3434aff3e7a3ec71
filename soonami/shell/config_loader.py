"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, AlertStrings) are defined in soonami/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from soonami.core.config import (
    AlertStrings,
    Config,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    validate_config,
)
from soonami.core.query import USGSQueryParams


logger = logging.getLogger(__name__)

# Variables read by load_config_from_env
ENV_CONFIG_VARS = (
    "START_DATE",
    "END_DATE",
    "MIN_MAGNITUDE",
    "CONNECT_TIMEOUT",
    "READ_TIMEOUT",
    "DISPLAY_TIMEZONE",
)


def _parse_query(data: dict[str, Any]) -> USGSQueryParams:
    """Parse USGS query parameters from config data."""
    # YAML loads unquoted dates as datetime.date
    defaults = USGSQueryParams()
    return USGSQueryParams(
        start_date=str(data.get("start_date", defaults.start_date)),
        end_date=str(data.get("end_date", defaults.end_date)),
        min_magnitude=float(data.get("min_magnitude", defaults.min_magnitude)),
    )


def _parse_strings(data: dict[str, Any]) -> AlertStrings:
    """Parse localized alert strings from config data."""
    defaults = AlertStrings()
    return AlertStrings(
        alert_no=data.get("alert_no", defaults.alert_no),
        alert_yes=data.get("alert_yes", defaults.alert_yes),
        alert_not_available=data.get("alert_not_available", defaults.alert_not_available),
    )


def _log_validation(config: Config) -> None:
    result = validate_config(config)
    for error in result.errors:
        if error.severity == "error":
            logger.error("Config error in %s: %s", error.field, error.message)
        else:
            logger.warning("Config warning in %s: %s", error.field, error.message)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    config = Config(
        query=_parse_query(data.get("query") or {}),
        connect_timeout=float(data.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT)),
        read_timeout=float(data.get("read_timeout", DEFAULT_READ_TIMEOUT)),
        display_timezone=str(data.get("display_timezone", "UTC")),
        strings=_parse_strings(data.get("strings") or {}),
    )

    _log_validation(config)
    return config


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
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

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
        "Loaded config: %s to %s, M%s+, timezone %s",
        config.query.start_date,
        config.query.end_date,
        config.query.min_magnitude,
        config.display_timezone,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        START_DATE: Query start date (YYYY-MM-DD)
        END_DATE: Query end date (YYYY-MM-DD)
        MIN_MAGNITUDE: Minimum magnitude to fetch
        CONNECT_TIMEOUT: Connection timeout in seconds
        READ_TIMEOUT: Read timeout in seconds
        DISPLAY_TIMEZONE: IANA timezone for the date field

    Returns:
        Config object from environment
    """
    defaults = USGSQueryParams()

    query = USGSQueryParams(
        start_date=os.environ.get("START_DATE", defaults.start_date),
        end_date=os.environ.get("END_DATE", defaults.end_date),
        min_magnitude=float(os.environ.get("MIN_MAGNITUDE", defaults.min_magnitude)),
    )

    config = Config(
        query=query,
        connect_timeout=float(os.environ.get("CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)),
        read_timeout=float(os.environ.get("READ_TIMEOUT", DEFAULT_READ_TIMEOUT)),
        display_timezone=os.environ.get("DISPLAY_TIMEZONE", "UTC"),
    )

    _log_validation(config)
    return config
