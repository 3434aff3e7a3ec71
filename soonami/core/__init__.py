"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Event parsing
- USGS query construction
- Display formatting
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from soonami.core.event import Event, EventParseError, TsunamiAlert, parse_first_event
from soonami.core.query import USGSQueryParams, build_request_url
from soonami.core.formatter import DisplayFields, format_display_fields, format_event_date
from soonami.core.config import AlertStrings, Config, validate_config

__all__ = [
    # Event
    "Event",
    "EventParseError",
    "TsunamiAlert",
    "parse_first_event",
    # Query
    "USGSQueryParams",
    "build_request_url",
    # Formatter
    "DisplayFields",
    "format_display_fields",
    "format_event_date",
    # Config
    "AlertStrings",
    "Config",
    "validate_config",
]
