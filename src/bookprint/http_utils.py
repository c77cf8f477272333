"""Download a source document over HTTP."""

from __future__ import annotations

import logging
import time
from typing import Callable, Final

import httpx

from bookprint.config import (
    BOOKPRINT_FETCH_BACKOFF_S,
    BOOKPRINT_FETCH_MAX_RETRIES,
    BOOKPRINT_FETCH_TIMEOUT_S,
    BOOKPRINT_USER_AGENT,
)
from bookprint.exceptions import FetchError, SourceNotFoundError

logger = logging.getLogger(__name__)

TRANSIENT_STATUS_CODES: Final[frozenset[int]] = frozenset({408, 425, 429, 500, 502, 503, 504})
MISSING_STATUS_CODES: Final[frozenset[int]] = frozenset({404, 410})

_ACCEPT = "text/html, application/xhtml+xml;q=0.9, */*;q=0.1"


def create_client(**kwargs) -> httpx.Client:
    """Return a client carrying the configured timeout and User-Agent."""
    return httpx.Client(
        timeout=BOOKPRINT_FETCH_TIMEOUT_S,
        headers={"User-Agent": BOOKPRINT_USER_AGENT, "Accept": _ACCEPT},
        follow_redirects=True,
        **kwargs,
    )


def download_document(
    url: str,
    *,
    client: httpx.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """Download the HTML document at url.

    Connection failures and transient statuses are retried up to
    BOOKPRINT_FETCH_MAX_RETRIES times. The wait doubles after every attempt
    unless the server sends a numeric Retry-After.

    Args:
        url: http(s) URL of the document.
        client: Client to send the requests with. A new one is created and
            closed when omitted.
        sleep: Called with the delay between attempts.

    Returns:
        The response body decoded with the charset httpx detects.

    Raises:
        SourceNotFoundError: If the server answers 404 or 410.
        FetchError: On any other error status, or once retries run out.
    """
    if client is None:
        with create_client() as owned_client:
            return download_document(url, client=owned_client, sleep=sleep)

    attempts = BOOKPRINT_FETCH_MAX_RETRIES + 1
    failure = ""
    for attempt in range(1, attempts + 1):
        try:
            response = client.get(url)
        except httpx.TransportError as exc:
            failure = f"{type(exc).__name__}: {exc}"
            delay = _backoff(attempt)
        else:
            status = response.status_code
            if status in MISSING_STATUS_CODES:
                raise SourceNotFoundError(f"URL '{url}' does not exist (HTTP {status})")
            if response.is_success:
                logger.debug("Downloaded %s (%d bytes)", url, len(response.content))
                return response.text
            if status not in TRANSIENT_STATUS_CODES:
                raise FetchError(f"Cannot download '{url}': HTTP {status}")
            failure = f"HTTP {status}"
            delay = _retry_after(response)
            if delay is None:
                delay = _backoff(attempt)

        if attempt < attempts:
            logger.warning(
                "Attempt %d/%d for %s failed (%s), retrying in %.2fs",
                attempt,
                attempts,
                url,
                failure,
                delay,
            )
            sleep(delay)

    raise FetchError(f"Cannot download '{url}' after {attempts} attempts: {failure}")


def _backoff(attempt: int) -> float:
    return BOOKPRINT_FETCH_BACKOFF_S * 2 ** (attempt - 1)


def _retry_after(response: httpx.Response) -> float | None:
    value = response.headers.get("Retry-After", "").strip()
    # The HTTP-date form falls back to the exponential delay.
    if not value.isdigit():
        return None
    return float(value)
