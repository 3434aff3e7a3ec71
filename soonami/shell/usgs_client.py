"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; parsing is in the core module.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum

import requests

from soonami.core.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from soonami.core.query import USGS_API_BASE, USGSQueryParams, build_request_url


logger = logging.getLogger(__name__)


# Bytes read per iteration while streaming the response body
CHUNK_SIZE = 8192


class FetchStatus(Enum):
    """Outcome of a fetch."""
    OK = "ok"
    MALFORMED_URL = "malformed_url"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    CANCELLED = "cancelled"


@dataclass
class FetchResult:
    """Response from the USGS API.

    Attributes:
        status: What happened
        body: Response text (partial on transport errors, else empty on failure)
        status_code: HTTP status code, if a response was received
        error: Error message if failed
    """
    status: FetchStatus
    body: str = ""
    status_code: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Returns True if the body was read completely."""
        return self.status is FetchStatus.OK


def _strip_line_breaks(text: str) -> str:
    """Drop line terminators so the body reads as one line.

    Handles CR/LF pairs split across chunks since each character is
    removed on its own.
    """
    return text.replace("\r", "").replace("\n", "")


class USGSClient:
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = USGS_API_BASE,
        query: USGSQueryParams | None = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS API base URL
            query: Query parameters (defaults to the 2012 M6+ query)
            connect_timeout: Connection timeout in seconds
            read_timeout: Read timeout in seconds
        """
        self.base_url = base_url
        self.query = query or USGSQueryParams()
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    @property
    def url(self) -> str:
        """Full request URL."""
        return build_request_url(self.base_url, self.query)

    def fetch(self, cancel: threading.Event | None = None) -> FetchResult:
        """Fetch the raw GeoJSON response body.

        This method performs HTTP I/O. Failures are logged and reported
        through the returned FetchResult, never raised.

        Args:
            cancel: Optional flag; when set the request is abandoned

        Returns:
            FetchResult with the body on success
        """
        if cancel is not None and cancel.is_set():
            return FetchResult(status=FetchStatus.CANCELLED)

        url = self.url
        logger.info("Fetching earthquake from USGS: %s", url)

        try:
            response = requests.get(
                url,
                timeout=(self.connect_timeout, self.read_timeout),
                stream=True,
            )
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            logger.error("Error with creating URL %s: %s", url, str(e))
            return FetchResult(status=FetchStatus.MALFORMED_URL, error=str(e))
        except requests.RequestException as e:
            logger.error("Problem retrieving the earthquake JSON results: %s", str(e))
            return FetchResult(status=FetchStatus.TRANSPORT_ERROR, error=str(e))

        with response:
            if response.status_code != 200:
                logger.error("Error response code: %d", response.status_code)
                return FetchResult(
                    status=FetchStatus.HTTP_ERROR,
                    status_code=response.status_code,
                    error=f"HTTP {response.status_code}",
                )

            return self._read_body(response, cancel)

    def _read_body(
        self,
        response: requests.Response,
        cancel: threading.Event | None,
    ) -> FetchResult:
        """Read the whole body as UTF-8 text, one chunk at a time."""
        response.encoding = "utf-8"
        parts: list[str] = []

        try:
            for chunk in response.iter_content(CHUNK_SIZE, decode_unicode=True):
                if cancel is not None and cancel.is_set():
                    logger.info("Fetch cancelled")
                    return FetchResult(
                        status=FetchStatus.CANCELLED,
                        status_code=response.status_code,
                    )
                parts.append(_strip_line_breaks(chunk))
        except requests.RequestException as e:
            logger.error("Problem retrieving the earthquake JSON results: %s", str(e))
            return FetchResult(
                status=FetchStatus.TRANSPORT_ERROR,
                body="".join(parts),
                status_code=response.status_code,
                error=str(e),
            )

        body = "".join(parts)
        logger.info("Fetched %d characters from USGS", len(body))

        return FetchResult(
            status=FetchStatus.OK,
            body=body,
            status_code=response.status_code,
        )
