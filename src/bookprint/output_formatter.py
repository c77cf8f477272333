"""Render a book into index, map and per-section pages."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from bookprint.exceptions import RenderError
from bookprint.schemas import Book

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"
MAP_TEMPLATE = "map.html"
PAGE_TEMPLATE = "page.html"


def render_book(book: Book, *, template_dir: Path, output_dir: Path) -> list[Path]:
    """Write index.html, map.html and one page per section into output_dir.

    Index and map templates receive ``book`` and ``metadata``; the page
    template additionally receives the current section as ``page``.

    Returns:
        Paths of the written files, index and map first.

    Raises:
        RenderError: If the template directory or a template is missing, or
            a template fails to render.
    """
    if not template_dir.is_dir():
        raise RenderError(f"directory '{template_dir}' does not exist")

    environment = create_environment(template_dir)
    written: list[Path] = []

    for name in (INDEX_TEMPLATE, MAP_TEMPLATE):
        html = _render(environment, name, book=book, metadata=book.metadata)
        written.append(_write(output_dir / name, html))

    for section in book.sections:
        html = _render(
            environment, PAGE_TEMPLATE, book=book, metadata=book.metadata, page=section
        )
        written.append(_write(output_dir / section.path, html))

    logger.info("Wrote %d files to %s", len(written), output_dir)
    return written


def create_environment(template_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


def _render(environment: Environment, name: str, **context: object) -> str:
    try:
        template = environment.get_template(name)
        return template.render(**context)
    except TemplateError as exc:
        raise RenderError(f"Cannot render template '{name}': {exc}") from exc


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path
