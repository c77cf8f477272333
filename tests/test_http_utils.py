"""Tests for downloading source documents."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from bookprint.exceptions import FetchError, SourceNotFoundError
from bookprint.http_utils import create_client, download_document

URL = "https://example.com/book.html"


def _client(*responses: httpx.Response | Exception) -> tuple[httpx.Client, list[httpx.Request]]:
    """Client that answers requests with the given responses in order."""
    requests: list[httpx.Request] = []
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        outcome = queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return httpx.Client(transport=httpx.MockTransport(handler)), requests


class TestCreateClient:
    """Tests for create_client."""

    def test_sends_user_agent_and_follows_redirects(self) -> None:
        with create_client() as client:
            assert client.headers["User-Agent"].startswith("bookprint/")
            assert "text/html" in client.headers["Accept"]
            assert client.follow_redirects is True


class TestDownloadDocument:
    """Tests for download_document."""

    def test_returns_decoded_body(self) -> None:
        client, requests = _client(
            httpx.Response(
                200,
                content="<html>Café</html>".encode("utf-8"),
                headers={"Content-Type": "text/html; charset=utf-8"},
            )
        )

        assert download_document(URL, client=client) == "<html>Café</html>"
        assert [str(request.url) for request in requests] == [URL]

    @pytest.mark.parametrize("status", [404, 410])
    def test_missing_document_is_not_retried(self, status: int) -> None:
        client, requests = _client(httpx.Response(status))
        delays: list[float] = []

        with pytest.raises(SourceNotFoundError, match="does not exist"):
            download_document(URL, client=client, sleep=delays.append)

        assert len(requests) == 1
        assert delays == []

    def test_client_error_is_not_retried(self) -> None:
        client, requests = _client(httpx.Response(403))

        with pytest.raises(FetchError, match="HTTP 403"):
            download_document(URL, client=client, sleep=lambda _: None)

        assert len(requests) == 1

    def test_retries_transient_status_with_doubling_delay(self) -> None:
        client, requests = _client(
            httpx.Response(503),
            httpx.Response(502),
            httpx.Response(200, text="<html>ok</html>"),
        )
        delays: list[float] = []

        with (
            patch("bookprint.http_utils.BOOKPRINT_FETCH_MAX_RETRIES", 2),
            patch("bookprint.http_utils.BOOKPRINT_FETCH_BACKOFF_S", 0.5),
        ):
            result = download_document(URL, client=client, sleep=delays.append)

        assert result == "<html>ok</html>"
        assert len(requests) == 3
        assert delays == [0.5, 1.0]

    def test_honours_numeric_retry_after(self) -> None:
        client, _ = _client(
            httpx.Response(429, headers={"Retry-After": "7"}),
            httpx.Response(200, text="ok"),
        )
        delays: list[float] = []

        with patch("bookprint.http_utils.BOOKPRINT_FETCH_MAX_RETRIES", 1):
            download_document(URL, client=client, sleep=delays.append)

        assert delays == [7.0]

    def test_retries_connection_errors(self) -> None:
        client, requests = _client(
            httpx.ConnectError("Connection refused"),
            httpx.Response(200, text="recovered"),
        )

        with patch("bookprint.http_utils.BOOKPRINT_FETCH_MAX_RETRIES", 1):
            result = download_document(URL, client=client, sleep=lambda _: None)

        assert result == "recovered"
        assert len(requests) == 2

    def test_gives_up_after_max_retries(self) -> None:
        client, requests = _client(*(httpx.Response(500) for _ in range(3)))
        delays: list[float] = []

        with (
            patch("bookprint.http_utils.BOOKPRINT_FETCH_MAX_RETRIES", 2),
            patch("bookprint.http_utils.BOOKPRINT_FETCH_BACKOFF_S", 0.1),
        ):
            with pytest.raises(FetchError, match="after 3 attempts: HTTP 500"):
                download_document(URL, client=client, sleep=delays.append)

        # No wait after the final attempt.
        assert len(requests) == 3
        assert len(delays) == 2
