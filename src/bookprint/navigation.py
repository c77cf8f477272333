"""Reconstruct the section hierarchy from heading levels and document order."""

from __future__ import annotations

from typing import Sequence

from bookprint.schemas import Navigation, Section

# Only h1-h3 sections list their children.
MAX_CHILD_LEVEL = 3
_MAX_LEVEL = 6


def resolve_navigation(sections: Sequence[Section]) -> list[Navigation]:
    """Compute next/previous/ancestors/children for every section.

    A single pass keeps a stack of open sections with strictly increasing
    levels. When a section arrives, everything on the stack at the same or a
    deeper level is closed. The closed section on the same level, if any, is
    its previous sibling, and the section left on top is the nearest
    shallower one, which is its parent when it is exactly one level up.

    Ancestor slots are filled from the last section seen on each shallower
    level anywhere earlier in the document, so a slot may point into an
    earlier chapter when the current chapter lacks that level.

    Returns:
        One Navigation per section, aligned with the input order.
    """
    navigations = [Navigation() for _ in sections]
    stack: list[int] = []
    last_seen: list[int | None] = [None] * _MAX_LEVEL

    for index, section in enumerate(sections):
        level = section.level
        navigation = navigations[index]

        while stack and sections[stack[-1]].level >= level:
            closed = stack.pop()
            if sections[closed].level == level:
                navigation.previous = closed
                navigations[closed].next = index

        if stack:
            parent = stack[-1]
            if sections[parent].level == level - 1 and level <= MAX_CHILD_LEVEL:
                navigations[parent].children.append(index)

        navigation.ancestors = _ancestor_slots(last_seen, level)

        stack.append(index)
        last_seen[level - 1] = index

    return navigations


def annotate(sections: Sequence[Section]) -> None:
    """Store freshly computed navigation on each section."""
    for section, navigation in zip(sections, resolve_navigation(sections)):
        section.navigation = navigation


def _ancestor_slots(last_seen: list[int | None], level: int) -> list[int | None]:
    slots = last_seen[: level - 1]
    while slots and slots[-1] is None:
        slots.pop()
    return slots
