"""USGS query construction - Pure functions.

Builds the FDSN event query URL. The HTTP request itself is made by
the shell layer.
"""

from dataclasses import dataclass
from urllib.parse import urlencode


# USGS FDSN Event Web Service base URL
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"


@dataclass(frozen=True)
class USGSQueryParams:
    """Parameters for the USGS event query.

    Attributes:
        start_date: Fetch earthquakes on or after this date (YYYY-MM-DD)
        end_date: Fetch earthquakes before this date (YYYY-MM-DD)
        min_magnitude: Minimum magnitude to fetch
    """
    start_date: str = "2012-01-01"
    end_date: str = "2012-12-01"
    min_magnitude: float = 6


def _format_magnitude(magnitude: float) -> str:
    """Render whole magnitudes without a trailing ".0"."""
    if float(magnitude).is_integer():
        return str(int(magnitude))
    return str(magnitude)


def build_query_params(query: USGSQueryParams) -> dict[str, str]:
    """Build query parameters for the USGS API request.

    Args:
        query: Query parameters

    Returns:
        Ordered dict of URL query parameters
    """
    return {
        "format": "geojson",
        "starttime": query.start_date,
        "endtime": query.end_date,
        "minmagnitude": _format_magnitude(query.min_magnitude),
    }


def build_request_url(base_url: str, query: USGSQueryParams) -> str:
    """Build the full request URL.

    Pure function. Does not validate the URL; the shell reports
    malformed URLs when it tries to use them.

    Args:
        base_url: Endpoint without a query string
        query: Query parameters

    Returns:
        URL string, e.g. ``.../query?format=geojson&starttime=...``
    """
    return f"{base_url}?{urlencode(build_query_params(query))}"
