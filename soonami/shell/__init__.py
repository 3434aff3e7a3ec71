"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS API client (HTTP)
- Configuration loading (environment/files)
- The earthquake screen

Keep this layer thin and simple. All business logic should be in core.
"""

from soonami.shell.usgs_client import FetchResult, FetchStatus, USGSClient
from soonami.shell.config_loader import load_config, load_config_from_env
from soonami.shell.screen import Screen

__all__ = [
    "FetchResult",
    "FetchStatus",
    "USGSClient",
    "load_config",
    "load_config_from_env",
    "Screen",
]
