"""Section models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SectionTitle(BaseModel):
    """Heading of a section: numbering prefix, inner markup and plain text."""

    prefix: str = ""
    html: str = ""
    text: str = ""


class Navigation(BaseModel):
    """Navigation links of a section, as indices into the owning section list.

    Attributes:
        next: Index of the next section on the same level, if any.
        previous: Index of the previous section on the same level, if any.
        ancestors: Ancestor slots; slot ``level - 1`` holds the ancestor of
            that level, ``None`` when the document has no such heading.
        children: Indices of the direct child sections.
    """

    next: int | None = None
    previous: int | None = None
    ancestors: list[int | None] = Field(default_factory=list)
    children: list[int] = Field(default_factory=list)


class Section(BaseModel):
    """A page of the book, created from one heading of the source document."""

    id: int = Field(..., ge=1, frozen=True)
    level: int = Field(..., ge=1, le=6, frozen=True)
    path: str = Field(..., frozen=True)
    title: SectionTitle = Field(..., frozen=True)
    content: str = ""
    navigation: Navigation | None = None
