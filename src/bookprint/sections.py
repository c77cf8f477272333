"""Segment a document body into sections, one per heading."""

from __future__ import annotations

import logging
from typing import Callable

from bookprint.exceptions import StructuralError
from bookprint.html_utils import (
    child_nodes,
    heading_level,
    headings,
    is_body,
    nodes_until_heading,
    normalize_whitespace,
    serialize_nodes,
    text_content,
)
from bookprint.schemas import Section, SectionTitle

try:
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

PAGE_PATH_TEMPLATE = "page{id}.html"


def extract_sections(body: Tag) -> list[Section]:
    """Create one section per heading of the body, in document order.

    Args:
        body: The <body> element of the parsed document.

    Returns:
        The sections with ids 1..N; navigation is left unset.

    Raises:
        StructuralError: If body is not a <body> element.
        HeadingLevelError: If a heading has no valid level.
        SerializationError: If heading or content markup cannot be serialized.
    """
    if not is_body(body):
        raise StructuralError("passed HTML node is not a 'body' element")

    prefix_for = heading_numberer()
    sections: list[Section] = []

    for index, heading in enumerate(headings(body)):
        section_id = index + 1
        level = heading_level(heading)

        title = SectionTitle(
            prefix=prefix_for(level),
            html=serialize_nodes(*child_nodes(heading)),
            text=normalize_whitespace(text_content(heading)),
        )
        content = serialize_nodes(*nodes_until_heading(heading))

        sections.append(
            Section(
                id=section_id,
                level=level,
                path=page_path(section_id),
                title=title,
                content=content,
            )
        )

    logger.debug("Extracted %d sections", len(sections))
    return sections


def page_path(section_id: int) -> str:
    """Return the output file name of the section with the given id."""
    return PAGE_PATH_TEMPLATE.format(id=section_id)


def heading_numberer() -> Callable[[int], str]:
    """Return a stateful function mapping successive heading levels to prefixes.

    Only h1-h3 are numbered ("1", "1.1", "1.1.1"); deeper headings get "".
    An h1 resets the h2 counter but not the h3 counter, so ``h1 h2 h3 h1 h3``
    numbers the last heading "2.0.2".
    """
    counters = [0, 0, 0]

    def prefix(level: int) -> str:
        if level == 1:
            counters[0] += 1
            counters[1] = 0
            return f"{counters[0]}"
        if level == 2:
            counters[1] += 1
            counters[2] = 0
            return f"{counters[0]}.{counters[1]}"
        if level == 3:
            counters[2] += 1
            return f"{counters[0]}.{counters[1]}.{counters[2]}"
        return ""

    return prefix
