"""Rewrite links that name another section's heading to that section's page."""

from __future__ import annotations

import logging
import re
from typing import Sequence
from urllib.parse import unquote_plus

from bookprint.exceptions import ReferenceDecodeError
from bookprint.html_utils import (
    elements_by_tag_name,
    locate_body,
    parse_html,
    serialize_nodes,
)
from bookprint.schemas import CrossReference, ReferenceOutcome, Section

logger = logging.getLogger(__name__)

_MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def resolve_cross_references(
    sections: Sequence[Section], *, strict: bool = False
) -> list[CrossReference]:
    """Point every anchor whose href names a section title at that section's path.

    Authors reference a section by putting its heading text into the href;
    converters such as Pandoc percent-encode that text, so hrefs are decoded
    before the lookup. When several sections share a title the first one
    wins. Section contents are only updated after every section has been
    processed, so a failure leaves all of them untouched.

    Args:
        sections: All sections of the document, in document order.
        strict: Raise instead of skipping anchors whose href cannot be decoded.

    Returns:
        One CrossReference per anchor with an href, in document order.

    Raises:
        ParseError: If a section body cannot be re-parsed.
        SerializationError: If a rewritten body cannot be serialized.
        ReferenceDecodeError: If strict is set and an href cannot be decoded.
    """
    targets = _targets_by_title(sections)
    rewritten: list[str] = []
    report: list[CrossReference] = []

    for section in sections:
        content, references = _rewrite_section(section, targets, strict=strict)
        rewritten.append(content)
        report.extend(references)

    for section, content in zip(sections, rewritten):
        section.content = content

    resolved = sum(1 for reference in report if reference.outcome is ReferenceOutcome.RESOLVED)
    logger.info("Resolved %d of %d cross-references", resolved, len(report))
    return report


def query_unescape(value: str) -> str:
    """Decode a percent-encoded query value, treating '+' as a space.

    Escaped bytes that are not valid UTF-8 are kept as lone surrogates, so
    the result still decodes but never equals a heading's text.

    Raises:
        ReferenceDecodeError: On a malformed escape.
    """
    match = _MALFORMED_ESCAPE_RE.search(value)
    if match:
        raise ReferenceDecodeError(
            f"Invalid escape {value[match.start():match.start() + 3]!r} in {value!r}"
        )
    return unquote_plus(value, errors="surrogateescape")


def _targets_by_title(sections: Sequence[Section]) -> dict[str, Section]:
    targets: dict[str, Section] = {}
    for section in sections:
        targets.setdefault(section.title.text, section)
    return targets


def _rewrite_section(
    section: Section, targets: dict[str, Section], *, strict: bool
) -> tuple[str, list[CrossReference]]:
    body = locate_body(parse_html(section.content))
    references: list[CrossReference] = []
    changed = False

    for anchor in elements_by_tag_name(body, "a"):
        href = anchor.get("href")
        if href is None:
            continue

        try:
            title = query_unescape(href)
        except ReferenceDecodeError:
            if strict:
                raise
            logger.debug("Skipping undecodable reference %r in %s", href, section.path)
            references.append(
                CrossReference(
                    section_id=section.id,
                    href=href,
                    outcome=ReferenceOutcome.UNDECODABLE,
                )
            )
            continue

        target = targets.get(title)
        if target is None:
            references.append(
                CrossReference(
                    section_id=section.id,
                    href=href,
                    outcome=ReferenceOutcome.UNRESOLVED,
                )
            )
            continue

        anchor["href"] = target.path
        changed = True
        references.append(
            CrossReference(
                section_id=section.id,
                href=href,
                outcome=ReferenceOutcome.RESOLVED,
                target_path=target.path,
            )
        )

    if not changed:
        return section.content, references
    return serialize_nodes(*body.contents), references
