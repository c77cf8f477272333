"""Load the source document from a file, stdin or a URL."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from bookprint.exceptions import SourceNotFoundError
from bookprint.http_utils import download_document

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"
_URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    return source.lower().startswith(_URL_SCHEMES)


def load_source(source: str | None, *, stdin: TextIO | None = None) -> str:
    """Return the HTML text named by source.

    Args:
        source: A file path, an http(s) URL, or None / "-" for stdin.
        stdin: Stream to read instead of sys.stdin.

    Raises:
        SourceNotFoundError: If the file or URL does not exist.
        FetchError: If fetching the URL fails.
    """
    if source is None or source == STDIN_SOURCE:
        logger.debug("Reading document from stdin")
        return (stdin or sys.stdin).read()

    if is_url(source):
        logger.debug("Fetching document from %s", source)
        return download_document(source)

    path = Path(source)
    if not path.is_file():
        raise SourceNotFoundError(f"file '{source}' does not exist")
    logger.debug("Reading document from %s", path)
    return path.read_text(encoding="utf-8")
