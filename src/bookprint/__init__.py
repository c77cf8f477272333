"""bookprint: turn a single HTML document into a navigable multi-page book."""

from bookprint.cross_references import resolve_cross_references
from bookprint.exceptions import (
    BookprintError,
    FetchError,
    HeadingLevelError,
    MetadataError,
    ParseError,
    ReferenceDecodeError,
    RenderError,
    SerializationError,
    SourceNotFoundError,
    StructuralError,
)
from bookprint.ingestion import BuildOptions, build_book
from bookprint.navigation import annotate, resolve_navigation
from bookprint.schemas import (
    Book,
    BookMetadata,
    CrossReference,
    Navigation,
    ReferenceOutcome,
    Section,
    SectionTitle,
)
from bookprint.sections import extract_sections

__all__ = [
    "Book",
    "BookMetadata",
    "BookprintError",
    "BuildOptions",
    "CrossReference",
    "FetchError",
    "HeadingLevelError",
    "MetadataError",
    "Navigation",
    "ParseError",
    "ReferenceDecodeError",
    "ReferenceOutcome",
    "RenderError",
    "Section",
    "SectionTitle",
    "SerializationError",
    "SourceNotFoundError",
    "StructuralError",
    "annotate",
    "build_book",
    "extract_sections",
    "resolve_cross_references",
    "resolve_navigation",
]
