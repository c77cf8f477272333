"""Pipeline turning an HTML document into a navigable book."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bookprint.cross_references import resolve_cross_references
from bookprint.html_parser import parse_document
from bookprint.navigation import annotate
from bookprint.schemas import Book

logger = logging.getLogger(__name__)


@dataclass
class BuildOptions:
    """Options for building a book.

    Attributes:
        strict_references: If True, an href that cannot be percent-decoded
            aborts the build instead of being left as is.
    """

    strict_references: bool = False


def build_book(html: str, options: BuildOptions | None = None) -> Book:
    """Segment, link and cross-reference an HTML document.

    Args:
        html: The complete source document.
        options: Build options. Uses defaults if None.

    Returns:
        The book with navigation set on every section and cross-references
        pointing at generated pages.

    Raises:
        BookprintError: If the document cannot be segmented or resolved.
    """
    opts = options or BuildOptions()

    parsed = parse_document(html)
    sections = parsed.sections

    annotate(sections)
    references = resolve_cross_references(sections, strict=opts.strict_references)

    logger.info(
        "Built book %r with %d sections",
        parsed.metadata.title,
        len(sections),
    )

    return Book(metadata=parsed.metadata, sections=sections, references=references)
