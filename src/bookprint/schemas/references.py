"""Cross-reference report models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ReferenceOutcome(str, Enum):
    """Result of resolving one anchor."""

    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    UNDECODABLE = "undecodable"


class CrossReference(BaseModel):
    """One anchor found in a section body and what became of it."""

    section_id: int
    href: str
    outcome: ReferenceOutcome
    target_path: str | None = None
