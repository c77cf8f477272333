"""Tests for filesystem helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from bookprint.fs_utils import copy_directory, reset_directory


class TestResetDirectory:
    """Tests for reset_directory."""

    def test_creates_missing_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "out"

        reset_directory(target)

        assert target.is_dir()

    def test_removes_existing_content(self, tmp_path: Path) -> None:
        target = tmp_path / "out"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "old.html").write_text("old")

        reset_directory(target)

        assert target.is_dir()
        assert list(target.iterdir()) == []


class TestCopyDirectory:
    """Tests for copy_directory."""

    def test_copies_nested_files(self, tmp_path: Path) -> None:
        source = tmp_path / "static"
        (source / "css").mkdir(parents=True)
        (source / "css" / "book.css").write_text("body {}")
        (source / "logo.svg").write_text("<svg/>")
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "index.html").write_text("index")

        copy_directory(source, destination)

        assert (destination / "css" / "book.css").read_text() == "body {}"
        assert (destination / "logo.svg").read_text() == "<svg/>"
        assert (destination / "index.html").read_text() == "index"

    def test_rejects_file_source(self, tmp_path: Path) -> None:
        source = tmp_path / "file.txt"
        source.write_text("x")

        with pytest.raises(NotADirectoryError, match="is not a directory"):
            copy_directory(source, tmp_path / "out")
