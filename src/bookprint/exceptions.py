"""Custom exceptions for bookprint."""


class BookprintError(Exception):
    """Base exception for bookprint operations."""


class ParseError(BookprintError):
    """Error during document parsing."""


class StructuralError(ParseError):
    """The supplied node is not the expected root element (head or body)."""


class HeadingLevelError(ParseError):
    """An element treated as a heading has no level between 1 and 6."""


class MetadataError(ParseError):
    """Required document metadata is missing."""


class SerializationError(BookprintError):
    """Serializing a node subtree back to markup failed."""


class ReferenceDecodeError(BookprintError):
    """A cross-reference target could not be percent-decoded."""


class FetchError(BookprintError):
    """Error while loading the source document."""


class SourceNotFoundError(FetchError):
    """The source document does not exist."""


class RenderError(BookprintError):
    """Error while rendering book pages from templates."""
