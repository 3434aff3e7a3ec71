"""Earthquake event model and parsing - Pure functions.

This module extracts a single Event from a USGS GeoJSON response body.
All functions are pure with no side effects; callers decide how to
report parse failures.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any


class EventParseError(ValueError):
    """Raised when a response body cannot be turned into an Event."""


class TsunamiAlert(Enum):
    """Tsunami alert status reported by USGS."""
    NONE = 0
    ALERT = 1
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> "TsunamiAlert":
        """Map the raw USGS ``tsunami`` integer to an alert status.

        0 means no alert, 1 means an alert was issued, anything else
        is unknown.
        """
        if code == 0:
            return cls.NONE
        if code == 1:
            return cls.ALERT
        return cls.UNKNOWN


@dataclass(frozen=True)
class Event:
    """Immutable earthquake event.

    Attributes:
        title: Human-readable description (e.g. "M 6.1 - 89km SE of ...")
        time: Event timestamp in milliseconds since epoch (UTC)
        tsunami_alert: Tsunami alert status
    """
    title: str
    time: int
    tsunami_alert: TsunamiAlert


def _require(mapping: dict[str, Any], key: str, kind: type, label: str) -> Any:
    """Read a typed value from a JSON object.

    Booleans are rejected where integers are expected since JSON
    ``true``/``false`` load as ``bool``, a subclass of ``int``.
    """
    if not isinstance(mapping, dict):
        raise EventParseError(f"{label} is not an object")
    if key not in mapping:
        raise EventParseError(f"{label} has no '{key}'")

    value = mapping[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise EventParseError(
            f"{label}.{key} is {type(value).__name__}, expected {kind.__name__}"
        )
    return value


def parse_feature(feature: dict[str, Any]) -> Event:
    """Parse a single GeoJSON feature into an Event.

    Pure function.

    Args:
        feature: GeoJSON feature dict from the USGS API

    Returns:
        Event built from the feature's title, time and tsunami properties

    Raises:
        EventParseError: If the feature does not have the expected shape
    """
    properties = _require(feature, "properties", dict, "feature")

    title = _require(properties, "title", str, "properties")
    time_ms = _require(properties, "time", int, "properties")
    tsunami = _require(properties, "tsunami", int, "properties")

    return Event(
        title=title,
        time=time_ms,
        tsunami_alert=TsunamiAlert.from_code(tsunami),
    )


def parse_first_event(text: str | None) -> Event | None:
    """Parse the first earthquake out of a USGS GeoJSON response body.

    Pure function.

    Args:
        text: Raw response body

    Returns:
        The first Event, or None if the body is empty or has no features

    Raises:
        EventParseError: If the body is not JSON or has an unexpected shape
    """
    if not text:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise EventParseError(f"Invalid JSON: {e}") from e

    features = _require(data, "features", list, "response")
    if len(features) == 0:
        return None

    return parse_feature(features[0])
