"""Earthquake Screen - Imperative Shell.

Holds the three on-screen text fields and renders them. Formatting
is done by the core module; this class only stores and outputs text.
"""

import logging
from dataclasses import asdict
from datetime import timezone, tzinfo

from soonami.core.config import AlertStrings
from soonami.core.event import Event
from soonami.core.formatter import DisplayFields, format_display_fields


logger = logging.getLogger(__name__)


class Screen:
    """Single screen showing one earthquake.

    Fields start empty and stay empty until an Event is shown.
    """

    def __init__(
        self,
        tz: tzinfo = timezone.utc,
        strings: AlertStrings | None = None,
    ) -> None:
        self.tz = tz
        self.strings = strings or AlertStrings()
        self.title = ""
        self.date = ""
        self.tsunami_alert = ""

    def show(self, event: Event | None) -> None:
        """Update the screen from an Event. None leaves it untouched."""
        if event is None:
            return

        fields = format_display_fields(event, self.tz, self.strings)
        self.title = fields.title
        self.date = fields.date
        self.tsunami_alert = fields.tsunami_alert

        logger.debug("Screen updated: %s", fields.title)

    @property
    def fields(self) -> DisplayFields:
        return DisplayFields(
            title=self.title,
            date=self.date,
            tsunami_alert=self.tsunami_alert,
        )

    def as_dict(self) -> dict[str, str]:
        return asdict(self.fields)

    def render(self) -> str:
        """Render the screen as plain text."""
        return "\n".join([
            self.title,
            self.date,
            f"Tsunami alert: {self.tsunami_alert}",
        ])
