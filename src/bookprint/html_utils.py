"""Parse-tree helpers shared by the section extractor and reference resolver."""

from __future__ import annotations

import re
from typing import Iterable

from bookprint.exceptions import HeadingLevelError, ParseError, SerializationError

try:
    from bs4 import BeautifulSoup
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


HEADING_LEVELS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
_HEADING_RE = re.compile(r"^h[1-6]$")


def parse_html(markup: str) -> BeautifulSoup:
    """Parse markup into a BeautifulSoup tree using lxml."""
    try:
        return BeautifulSoup(markup, "lxml")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Cannot parse HTML document: {exc}") from exc


def is_element(node: PageElement | None) -> bool:
    return isinstance(node, Tag)


def is_text(node: PageElement | None) -> bool:
    """Return True for plain text nodes (comments, doctypes and CDATA excluded)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_head(node: PageElement | None) -> bool:
    return is_element(node) and node.name == "head"


def is_body(node: PageElement | None) -> bool:
    return is_element(node) and node.name == "body"


def is_heading(node: PageElement | None) -> bool:
    return is_element(node) and node.name in HEADING_LEVELS


def locate_head(root: Tag | None) -> Tag | None:
    """Return the first <head> element in the subtree of root, or None."""
    if root is None:
        return None
    if is_head(root):
        return root
    return root.find("head")


def locate_body(root: Tag | None) -> Tag | None:
    """Return the first <body> element in the subtree of root, or None."""
    if root is None:
        return None
    if is_body(root):
        return root
    return root.find("body")


def heading_level(node: Tag) -> int:
    """Return the numeric level of a heading element (h1 -> 1, ..., h6 -> 6).

    Raises:
        HeadingLevelError: If the node is not an h1-h6 element.
    """
    name = node.name if is_element(node) else None
    if name not in HEADING_LEVELS:
        raise HeadingLevelError(f"Element {name!r} is not a valid heading tag")
    return HEADING_LEVELS[name]


def headings(node: Tag | None) -> list[Tag]:
    """Return all h1-h6 elements below node in document order."""
    if node is None:
        return []
    return node.find_all(_HEADING_RE)


def child_nodes(node: Tag | None) -> list[PageElement]:
    """Return element and text children of node in document order."""
    if node is None:
        return []
    return [child for child in node.children if is_element(child) or is_text(child)]


def elements_by_tag_name(node: Tag | None, *tags: str) -> list[Tag]:
    """Return all descendants of node with one of the given tag names."""
    if node is None or not tags:
        return []
    return node.find_all(list(tags))


def attribute_map(node: Tag | None) -> dict[str, str]:
    """Return the attributes of node; multi-valued attributes are joined by spaces."""
    if node is None:
        return {}
    attributes: dict[str, str] = {}
    for key, value in node.attrs.items():
        attributes[key] = " ".join(value) if isinstance(value, list) else value
    return attributes


def text_content(node: PageElement | None) -> str:
    """Return the concatenated text of all text nodes below node."""
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        return str(node) if is_text(node) else ""
    return "".join(str(descendant) for descendant in node.descendants if is_text(descendant))


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return " ".join(text.split())


def contains_heading(node: PageElement) -> bool:
    return is_element(node) and node.find(_HEADING_RE) is not None


def nodes_until_heading(node: PageElement) -> list[PageElement]:
    """Collect the nodes following node in document order until the next heading.

    Siblings are collected first; when the siblings run out the search
    continues after the enclosing element, up to the <body>. A following
    node that wraps a heading contributes only its children up to that
    heading.
    """
    collected: list[PageElement] = []
    current = node
    while current is not None:
        nodes, stopped = _collect_until_heading(current.next_siblings)
        collected.extend(nodes)
        if stopped or current.parent is None or is_body(current.parent):
            break
        current = current.parent
    return collected


def leading_nodes(body: Tag) -> list[PageElement]:
    """Collect the nodes of body that precede its first heading."""
    nodes, _ = _collect_until_heading(body.children)
    return nodes


def _collect_until_heading(
    nodes: Iterable[PageElement],
) -> tuple[list[PageElement], bool]:
    collected: list[PageElement] = []
    for node in nodes:
        if is_heading(node):
            return collected, True
        if contains_heading(node):
            inner, _ = _collect_until_heading(node.children)
            collected.extend(inner)
            return collected, True
        collected.append(node)
    return collected, False


def serialize_nodes(*nodes: PageElement | None) -> str:
    """Serialize nodes back to markup text.

    bs4 releases before 4.13 serialize recursively, so very deep nesting
    exhausts the interpreter stack there.

    Raises:
        SerializationError: If a subtree cannot be serialized.
    """
    parts: list[str] = []
    try:
        for node in nodes:
            if node is None:
                continue
            if isinstance(node, Tag):
                parts.append(node.decode())
            elif isinstance(node, NavigableString):
                parts.append(node.output_ready())
    except RecursionError as exc:
        raise SerializationError("Markup is nested too deeply to serialize") from exc
    return "".join(parts)
