"""Parse an HTML document into book metadata and sections."""

from __future__ import annotations

from dataclasses import dataclass

from bookprint.exceptions import MetadataError, StructuralError
from bookprint.html_utils import (
    attribute_map,
    elements_by_tag_name,
    is_body,
    is_head,
    leading_nodes,
    locate_body,
    locate_head,
    parse_html,
    serialize_nodes,
    text_content,
)
from bookprint.schemas import BookMetadata, Section
from bookprint.sections import extract_sections

try:
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_AUTHOR_META = "author"
_DATE_META = "dcterms.date"


@dataclass
class ParsedDocument:
    """Metadata and flat section list extracted from one HTML document."""

    metadata: BookMetadata
    sections: list[Section]


def parse_document(html: str) -> ParsedDocument:
    """Extract title, author, date, preface and sections from HTML.

    Raises:
        StructuralError: If the document has no <head> or no <body>.
        MetadataError: If <head> has no <title>.
    """
    soup = parse_html(html)
    head = locate_head(soup)
    body = locate_body(soup)

    if not is_head(head):
        raise StructuralError("passed HTML node is not a 'head' element")
    if not is_body(body):
        raise StructuralError("passed HTML node is not a 'body' element")

    metadata = BookMetadata(
        title=_extract_title(head),
        author=_extract_meta(head, _AUTHOR_META),
        date=_extract_meta(head, _DATE_META),
        preface=serialize_nodes(*leading_nodes(body)),
    )
    sections = extract_sections(body)

    return ParsedDocument(metadata=metadata, sections=sections)


def _extract_title(head: Tag) -> str:
    for child in head.children:
        if isinstance(child, Tag) and child.name == "title":
            return text_content(child)
    raise MetadataError("passed HTML 'head' node contains no 'title'")


def _extract_meta(head: Tag, name: str) -> str:
    for meta in elements_by_tag_name(head, "meta"):
        attributes = attribute_map(meta)
        if attributes.get("name") == name and "content" in attributes:
            return attributes["content"]
    return ""
