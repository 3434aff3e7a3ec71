"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration, runs one background load
and returns the earthquake screen.
"""

import logging
import os
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any

import functions_framework
from flask import Request

from soonami.core.config import Config
from soonami.core.formatter import resolve_timezone
from soonami.orchestrator import EventLoader
from soonami.shell.config_loader import ENV_CONFIG_VARS, load_config, load_config_from_env
from soonami.shell.screen import Screen
from soonami.task import EventTask


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Extra time allowed for delivery beyond the network timeouts (seconds)
DELIVERY_GRACE = 5.0


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif any(os.environ.get(name) for name in ENV_CONFIG_VARS):
        return load_config_from_env()
    else:
        return load_config()


def show_earthquake(config: Config, loader: EventLoader | None = None) -> tuple[Screen, bool]:
    """Load one earthquake in the background and show it on a new screen.

    Args:
        config: Application configuration
        loader: Event loader (created from config if not provided)

    Returns:
        Tuple of (screen, whether an earthquake was shown)
    """
    screen = Screen(
        tz=resolve_timezone(config.display_timezone),
        strings=config.strings,
    )

    task = EventTask(loader or EventLoader(config), screen.show)
    task.start()

    timeout = config.connect_timeout + config.read_timeout + DELIVERY_GRACE
    try:
        result = task.deliver(timeout=timeout)
    except FutureTimeoutError:
        logger.warning("Earthquake load did not finish within %.1fs, cancelling", timeout)
        task.cancel()
        return screen, False

    return screen, result.event is not None


@functions_framework.http
def earthquake_screen(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Loading earthquake screen")

    try:
        config = _get_config()
        screen, shown = show_earthquake(config)

        response: dict[str, Any] = {
            "status": "ok" if shown else "no_record",
            **screen.as_dict(),
        }
        return response, 200

    except Exception as e:
        logger.exception("Unexpected error loading earthquake screen")
        return {
            "status": "error",
            "message": str(e),
        }, 500


# For local testing
if __name__ == "__main__":
    screen, shown = show_earthquake(_get_config())

    if shown:
        print(screen.render())
    else:
        print("No earthquake information available")
