"""Test setup for bookprint."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bookprint.schemas import Section, SectionTitle  # noqa: E402


SAMPLE_DOCUMENT = """<!DOCTYPE html>
<html>
<head>
<title>Field Guide</title>
<meta name="author" content="Ada Lovelace">
<meta name="dcterms.date" content="2023-05-01">
</head>
<body>
<p>Preface text.</p>
<h1>Getting Started</h1>
<p>Read <a href="Advanced%20Topics">the advanced part</a> first.</p>
<h2>Install</h2>
<p>Run the installer.</p>
<h2>Configure</h2>
<p>See <a href="Getting%20Started">the start</a> or <a href="https://example.com">a site</a>.</p>
<h1>Advanced Topics</h1>
<h3>Deep Dive</h3>
<p>Details.</p>
</body>
</html>
"""


def make_sections(levels: list[int]) -> list[Section]:
    """Build bare sections with the given heading levels."""
    return [
        Section(
            id=index + 1,
            level=level,
            path=f"page{index + 1}.html",
            title=SectionTitle(text=f"Section {index + 1}"),
        )
        for index, level in enumerate(levels)
    ]


def wrap_body(body: str, title: str = "Test Book") -> str:
    """Wrap body markup into a complete HTML document."""
    return f"<html><head><title>{title}</title></head><body>{body}</body></html>"


@pytest.fixture
def sample_document() -> str:
    """A small document with two chapters and cross-references."""
    return SAMPLE_DOCUMENT
