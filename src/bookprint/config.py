"""Local configuration for bookprint."""

from __future__ import annotations

import os
from pathlib import Path


PACKAGE_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_OUTPUT_DIR = "out"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "bookprint/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

# Templates used for index.html, map.html and page.html.
BOOKPRINT_TEMPLATE_DIR = Path(os.getenv("BOOKPRINT_TEMPLATE_DIR", str(PACKAGE_TEMPLATE_DIR))).expanduser()
BOOKPRINT_OUTPUT_DIR = Path(os.getenv("BOOKPRINT_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)).expanduser()
BOOKPRINT_FETCH_TIMEOUT_S = float(os.getenv("BOOKPRINT_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
BOOKPRINT_FETCH_MAX_RETRIES = int(os.getenv("BOOKPRINT_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
BOOKPRINT_FETCH_BACKOFF_S = float(os.getenv("BOOKPRINT_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
BOOKPRINT_USER_AGENT = os.getenv("BOOKPRINT_USER_AGENT", DEFAULT_USER_AGENT)
BOOKPRINT_LOG_LEVEL = os.getenv("BOOKPRINT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
