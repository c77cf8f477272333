"""Book model handed to the renderer."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bookprint.schemas.references import CrossReference
from bookprint.schemas.sections import Navigation, Section


class BookMetadata(BaseModel):
    """Document-level metadata taken from <head> and the body preface."""

    title: str
    author: str = ""
    date: str = ""
    preface: str = ""


class Book(BaseModel):
    """A segmented document.

    ``sections`` owns every section; navigation fields refer back into it by
    index, and the lookup helpers below turn those indices into sections.
    """

    metadata: BookMetadata
    sections: list[Section] = Field(default_factory=list)
    references: list[CrossReference] = Field(default_factory=list)

    def next_of(self, section: Section) -> Section | None:
        return self._at(_navigation(section).next)

    def previous_of(self, section: Section) -> Section | None:
        return self._at(_navigation(section).previous)

    def ancestors_of(self, section: Section) -> list[Section | None]:
        return [self._at(index) for index in _navigation(section).ancestors]

    def parents_of(self, section: Section) -> list[Section]:
        """Ancestors without the empty slots, outermost first."""
        return [ancestor for ancestor in self.ancestors_of(section) if ancestor is not None]

    def children_of(self, section: Section) -> list[Section]:
        return [self.sections[index] for index in _navigation(section).children]

    def _at(self, index: int | None) -> Section | None:
        if index is None:
            return None
        return self.sections[index]


def _navigation(section: Section) -> Navigation:
    return section.navigation or Navigation()
