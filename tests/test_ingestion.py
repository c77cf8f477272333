"""Tests for the book-building pipeline."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from conftest import wrap_body

from bookprint.exceptions import ParseError, ReferenceDecodeError, SerializationError
from bookprint.ingestion import BuildOptions, build_book
from bookprint.schemas import ReferenceOutcome


class TestBuildBook:
    """End-to-end tests for build_book."""

    def test_sections_are_numbered_and_linked(self, sample_document: str) -> None:
        book = build_book(sample_document)

        assert [section.id for section in book.sections] == [1, 2, 3, 4, 5]
        assert [section.title.prefix for section in book.sections] == [
            "1",
            "1.1",
            "1.2",
            "2",
            "2.0.1",
        ]

        getting_started, install, configure, advanced, deep_dive = book.sections
        assert book.next_of(getting_started) is advanced
        assert book.next_of(install) is configure
        assert book.previous_of(configure) is install
        assert book.children_of(getting_started) == [install, configure]
        assert book.children_of(advanced) == []
        assert book.ancestors_of(deep_dive) == [advanced, configure]

    def test_cross_references_point_at_pages(self, sample_document: str) -> None:
        book = build_book(sample_document)

        assert 'href="page4.html"' in book.sections[0].content
        assert 'href="page1.html"' in book.sections[2].content
        assert 'href="https://example.com"' in book.sections[2].content

        outcomes = [(reference.section_id, reference.outcome) for reference in book.references]
        assert outcomes == [
            (1, ReferenceOutcome.RESOLVED),
            (3, ReferenceOutcome.RESOLVED),
            (3, ReferenceOutcome.UNRESOLVED),
        ]

    def test_every_section_has_navigation(self, sample_document: str) -> None:
        book = build_book(sample_document)

        assert all(section.navigation is not None for section in book.sections)

    def test_malformed_reference_does_not_abort(self) -> None:
        html = wrap_body(
            '<h1>Start</h1><p><a href="50%">odd</a></p>'
            '<h1>End</h1><p><a href="Start">back</a></p>'
        )

        book = build_book(html)

        assert book.references[0].outcome is ReferenceOutcome.UNDECODABLE
        assert book.sections[1].content == '<p><a href="page1.html">back</a></p>'

    def test_strict_references_option(self) -> None:
        html = wrap_body('<h1>Start</h1><p><a href="50%">odd</a></p>')

        with pytest.raises(ReferenceDecodeError):
            build_book(html, BuildOptions(strict_references=True))

    def test_fatal_errors_propagate(self) -> None:
        html = "<html><head></head><body><h1>A</h1></body></html>"

        with pytest.raises(ParseError):
            build_book(html)

    def test_reference_serialization_failure_propagates(self, sample_document: str) -> None:
        with patch(
            "bookprint.cross_references.serialize_nodes",
            side_effect=SerializationError("Markup is nested too deeply to serialize"),
        ):
            with pytest.raises(SerializationError, match="nested too deeply"):
                build_book(sample_document)
