"""Filesystem helpers for the output directory."""

from __future__ import annotations

import shutil
from pathlib import Path


def reset_directory(path: Path) -> Path:
    """Remove path if it exists and create it again, empty.

    Args:
        path: Directory to reset.

    Returns:
        The (now empty) directory path.
    """
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)
    return path


def copy_directory(source: Path, destination: Path) -> Path:
    """Recursively copy the contents of source into destination.

    Files already present in destination are overwritten.

    Raises:
        NotADirectoryError: If source is not a directory.
    """
    if not source.is_dir():
        raise NotADirectoryError(f"source path '{source}' is not a directory")
    shutil.copytree(source, destination, dirs_exist_ok=True)
    return destination
