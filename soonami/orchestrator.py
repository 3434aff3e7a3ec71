"""Orchestrator - Wires Functional Core and Imperative Shell.

This module runs the fetch-and-extract pipeline: the USGS client
fetches the response body and the pure core parses the first event out
of it. Every failure is logged here and turned into "no record".
"""

import logging
import threading
from dataclasses import dataclass

from soonami.core.config import Config
from soonami.core.event import Event, EventParseError, parse_first_event
from soonami.shell.usgs_client import FetchResult, FetchStatus, USGSClient


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of one fetch-and-extract run.

    Attributes:
        event: The first earthquake, or None for "no record"
        fetch: Outcome of the HTTP fetch
        cancelled: Whether the run was cancelled
    """
    event: Event | None
    fetch: FetchResult
    cancelled: bool = False

    @property
    def summary(self) -> str:
        """Human-readable summary of the load result."""
        if self.cancelled:
            return "Cancelled"
        if self.event is None:
            return f"No earthquake ({self.fetch.status.value})"
        return f"Loaded {self.event.title}"


class EventLoader:
    """Loads a single earthquake event.

    This class wires together:
    - USGS client (fetches the response body)
    - Core functions (parsing)
    """

    def __init__(
        self,
        config: Config | None = None,
        usgs_client: USGSClient | None = None,
    ) -> None:
        """Initialize loader with configuration.

        Args:
            config: Application configuration
            usgs_client: USGS client (created from config if not provided)
        """
        self.config = config or Config()
        self.usgs_client = usgs_client or USGSClient(
            query=self.config.query,
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )

    def extract(self, body: str) -> Event | None:
        """Extract the first event from a response body.

        Parse errors are logged and reported as None. An empty
        feature list is a normal "no data" answer and is not logged.
        """
        try:
            return parse_first_event(body)
        except EventParseError as e:
            logger.error("Problem parsing the earthquake JSON results: %s", e)
            return None

    def load(self, cancel: threading.Event | None = None) -> LoadResult:
        """Run the fetch-and-extract pipeline once.

        Args:
            cancel: Optional flag to abandon the run

        Returns:
            LoadResult with the event, or None on any failure
        """
        fetch = self.usgs_client.fetch(cancel)

        if fetch.status is FetchStatus.CANCELLED or (cancel is not None and cancel.is_set()):
            return LoadResult(event=None, fetch=fetch, cancelled=True)

        # A transport error may leave a partial body; parsing decides
        event = self.extract(fetch.body)

        result = LoadResult(event=event, fetch=fetch)
        logger.info("Completed: %s", result.summary)
        return result
