"""Display formatting - Pure functions.

This module turns an Event into the three strings shown on screen.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from soonami.core.config import AlertStrings
from soonami.core.event import Event, TsunamiAlert


@dataclass(frozen=True)
class DisplayFields:
    """The three text fields of the earthquake screen.

    Attributes:
        title: Event title, verbatim
        date: Formatted event date and time
        tsunami_alert: Localized tsunami alert status
    """
    title: str
    date: str
    tsunami_alert: str


def resolve_timezone(name: str) -> tzinfo:
    """Look up a display timezone by IANA name.

    Pure function. "UTC" never needs the system tz database.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If the name is unknown
    """
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def format_event_date(time_ms: int, tz: tzinfo = timezone.utc) -> str:
    """Format an event time for display.

    Pure function. Uses the pattern ``Tue, 29 May 2012 at 11:06:02 UTC``.

    Args:
        time_ms: Milliseconds since epoch (UTC)
        tz: Timezone to display in

    Returns:
        Formatted date and time string, or "" if the time cannot be
        represented as a date
    """
    try:
        local = datetime.fromtimestamp(time_ms / 1000, tz=tz)
    except (ValueError, OverflowError, OSError):
        return ""
    return (
        f"{local.strftime('%a')}, {local.day} {local.strftime('%b %Y')} "
        f"at {local.strftime('%H:%M:%S %Z')}"
    )


def tsunami_alert_text(alert: TsunamiAlert, strings: AlertStrings) -> str:
    """Get the display string for a tsunami alert status.

    Pure function.
    """
    if alert is TsunamiAlert.NONE:
        return strings.alert_no
    elif alert is TsunamiAlert.ALERT:
        return strings.alert_yes
    else:
        return strings.alert_not_available


def format_display_fields(
    event: Event,
    tz: tzinfo = timezone.utc,
    strings: AlertStrings | None = None,
) -> DisplayFields:
    """Format an Event as screen fields.

    Pure function.

    Args:
        event: Event to display
        tz: Timezone for the date field
        strings: Localized alert strings (defaults to English)

    Returns:
        DisplayFields for the screen
    """
    strings = strings or AlertStrings()
    return DisplayFields(
        title=event.title,
        date=format_event_date(event.time, tz),
        tsunami_alert=tsunami_alert_text(event.tsunami_alert, strings),
    )
