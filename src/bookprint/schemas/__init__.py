"""Shared schemas for bookprint."""

from bookprint.schemas.book import Book, BookMetadata
from bookprint.schemas.references import CrossReference, ReferenceOutcome
from bookprint.schemas.sections import Navigation, Section, SectionTitle

__all__ = [
    "Book",
    "BookMetadata",
    "CrossReference",
    "Navigation",
    "ReferenceOutcome",
    "Section",
    "SectionTitle",
]
