"""Tests for the USGS API client.

Uses the `responses` library to mock HTTP requests.
"""

import threading
from unittest.mock import MagicMock, patch

import pytest
import requests
import responses

from soonami.core.query import USGS_API_BASE, USGSQueryParams
from soonami.shell.usgs_client import FetchResult, FetchStatus, USGSClient


SAMPLE_BODY = '{"features":[{"properties":{"title":"M 6.1","time":1338289562000,"tsunami":1}}]}'


def _streaming_response(chunks, status_code=200):
    """Build a fake streaming response whose body is produced by `chunks`."""
    response = MagicMock()
    response.status_code = status_code
    response.iter_content.side_effect = lambda *args, **kwargs: chunks()
    return response


class TestUSGSClientInit:
    """Tests for USGSClient initialization."""

    def test_defaults(self):
        client = USGSClient()

        assert client.base_url == USGS_API_BASE
        assert client.connect_timeout == 15.0
        assert client.read_timeout == 10.0
        assert client.query == USGSQueryParams()

    def test_url_includes_query(self):
        client = USGSClient(query=USGSQueryParams(min_magnitude=7))

        assert client.url.startswith(USGS_API_BASE + "?format=geojson")
        assert "minmagnitude=7" in client.url


class TestUSGSClientFetch:
    """Tests for USGSClient.fetch()."""

    @responses.activate
    def test_successful_fetch_returns_body(self):
        responses.add(responses.GET, USGS_API_BASE, body=SAMPLE_BODY, status=200)

        result = USGSClient().fetch()

        assert result.success is True
        assert result.status is FetchStatus.OK
        assert result.status_code == 200
        assert result.body == SAMPLE_BODY
        assert result.error is None

    @responses.activate
    def test_sends_get_with_query_string(self):
        responses.add(responses.GET, USGS_API_BASE, body="{}", status=200)

        USGSClient().fetch()

        request = responses.calls[0].request
        assert request.method == "GET"
        assert "format=geojson" in request.url
        assert "starttime=2012-01-01" in request.url
        assert "endtime=2012-12-01" in request.url
        assert "minmagnitude=6" in request.url

    @responses.activate
    def test_line_breaks_are_dropped(self):
        responses.add(
            responses.GET,
            USGS_API_BASE,
            body='{\n  "features":\r\n  []\r}\n',
            status=200,
        )

        result = USGSClient().fetch()

        assert result.body == '{  "features":  []}'

    @responses.activate
    def test_decodes_utf8(self):
        body = '{"title": "M 5.0 - Región de Valparaíso"}'
        responses.add(
            responses.GET,
            USGS_API_BASE,
            body=body.encode("utf-8"),
            status=200,
            content_type="application/json",
        )

        result = USGSClient().fetch()

        assert result.body == body

    @responses.activate
    def test_non_200_returns_http_error(self):
        responses.add(responses.GET, USGS_API_BASE, body="Service unavailable", status=503)

        result = USGSClient().fetch()

        assert result.success is False
        assert result.status is FetchStatus.HTTP_ERROR
        assert result.status_code == 503
        assert result.body == ""

    @responses.activate
    def test_connection_error_returns_transport_error(self):
        responses.add(
            responses.GET,
            USGS_API_BASE,
            body=requests.exceptions.ConnectionError("Connection refused"),
        )

        result = USGSClient().fetch()

        assert result.status is FetchStatus.TRANSPORT_ERROR
        assert result.body == ""
        assert "Connection refused" in result.error

    @responses.activate
    def test_timeout_returns_transport_error(self):
        responses.add(
            responses.GET,
            USGS_API_BASE,
            body=requests.exceptions.ConnectTimeout("timed out"),
        )

        result = USGSClient().fetch()

        assert result.status is FetchStatus.TRANSPORT_ERROR

    @pytest.mark.parametrize("base_url", ["not a url", "htp://example.com/query", "http://"])
    def test_malformed_url(self, base_url):
        with patch("requests.adapters.HTTPAdapter.send") as mock_send:
            result = USGSClient(base_url=base_url).fetch()

        assert result.status is FetchStatus.MALFORMED_URL
        assert result.body == ""
        mock_send.assert_not_called()

    @patch("soonami.shell.usgs_client.requests.get")
    def test_passes_connect_and_read_timeouts(self, mock_get):
        mock_get.return_value = _streaming_response(lambda: iter(["{}"]))

        USGSClient(connect_timeout=3.0, read_timeout=4.0).fetch()

        assert mock_get.call_args[1]["timeout"] == (3.0, 4.0)

    @patch("soonami.shell.usgs_client.requests.get")
    def test_read_error_keeps_partial_body(self, mock_get):
        def chunks():
            yield '{"features":\n'
            raise requests.exceptions.ChunkedEncodingError("Connection reset")

        response = _streaming_response(chunks)
        mock_get.return_value = response

        result = USGSClient().fetch()

        assert result.status is FetchStatus.TRANSPORT_ERROR
        assert result.body == '{"features":'
        response.__exit__.assert_called_once()

    @patch("soonami.shell.usgs_client.requests.get")
    def test_response_closed_on_http_error(self, mock_get):
        response = _streaming_response(lambda: iter([]), status_code=500)
        mock_get.return_value = response

        USGSClient().fetch()

        response.__exit__.assert_called_once()

    @patch("soonami.shell.usgs_client.requests.get")
    def test_response_closed_on_success(self, mock_get):
        response = _streaming_response(lambda: iter([SAMPLE_BODY]))
        mock_get.return_value = response

        result = USGSClient().fetch()

        assert result.body == SAMPLE_BODY
        response.__exit__.assert_called_once()


class TestUSGSClientCancel:
    """Tests for cancelling a fetch."""

    @patch("soonami.shell.usgs_client.requests.get")
    def test_cancelled_before_start_makes_no_request(self, mock_get):
        cancel = threading.Event()
        cancel.set()

        result = USGSClient().fetch(cancel)

        assert result.status is FetchStatus.CANCELLED
        mock_get.assert_not_called()

    @patch("soonami.shell.usgs_client.requests.get")
    def test_cancelled_while_reading(self, mock_get):
        cancel = threading.Event()

        def chunks():
            yield '{"features":'
            cancel.set()
            yield "[]}"

        response = _streaming_response(chunks)
        mock_get.return_value = response

        result = USGSClient().fetch(cancel)

        assert result.status is FetchStatus.CANCELLED
        assert result.body == ""
        response.__exit__.assert_called_once()


class TestFetchResult:
    """Tests for FetchResult."""

    def test_only_ok_is_success(self):
        assert FetchResult(status=FetchStatus.OK).success is True
        for status in FetchStatus:
            if status is not FetchStatus.OK:
                assert FetchResult(status=status).success is False
