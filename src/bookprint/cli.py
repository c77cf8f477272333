"""Command-line interface: turn an HTML document into a book directory."""

from __future__ import annotations

import argparse
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from bookprint.config import BOOKPRINT_OUTPUT_DIR, BOOKPRINT_TEMPLATE_DIR
from bookprint.exceptions import BookprintError, RenderError
from bookprint.fetch import STDIN_SOURCE, load_source
from bookprint.fs_utils import copy_directory, reset_directory
from bookprint.ingestion import BuildOptions, build_book
from bookprint.output_formatter import render_book
from bookprint.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EPILOG = """\
Examples:
  Reading from an HTML file:
    $ bookprint --template-dir templates --output-dir out examples/index.html

  Reading from STDIN:
    $ echo "<html>...</html>" | bookprint --output-dir out -
"""


def get_version() -> str:
    try:
        package_version = version("bookprint")
    except PackageNotFoundError:
        package_version = "(unknown)"
    return f"BookPrint {package_version} {platform.system().lower()}/{platform.machine().lower()}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookprint",
        description="Split an HTML document into a navigable multi-page book.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=STDIN_SOURCE,
        help="HTML file, http(s) URL, or '-' to read from STDIN.",
    )
    parser.add_argument(
        "-t",
        "--template-dir",
        type=Path,
        default=BOOKPRINT_TEMPLATE_DIR,
        help="Directory containing the index.html, map.html and page.html templates.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=BOOKPRINT_OUTPUT_DIR,
        help="Directory where the generated book pages will be stored.",
    )
    parser.add_argument(
        "-s",
        "--static-dir",
        type=Path,
        default=None,
        help="Directory with additional files for the book. Copied to the output directory.",
    )
    parser.add_argument(
        "--strict-references",
        action="store_true",
        help="Fail when a link target cannot be percent-decoded.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("-v", "--version", action="version", version=get_version())
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args_list = sys.argv[1:] if argv is None else argv

    if not args_list:
        parser.print_usage(sys.stderr)
        return 1

    args = parser.parse_args(args_list)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        create_book(
            args.source,
            template_dir=args.template_dir,
            output_dir=args.output_dir,
            static_dir=args.static_dir,
            options=BuildOptions(strict_references=args.strict_references),
        )
    except (BookprintError, OSError) as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Created book in '{args.output_dir}' directory")
    return 0


def create_book(
    source: str | None,
    *,
    template_dir: Path,
    output_dir: Path,
    static_dir: Path | None = None,
    options: BuildOptions | None = None,
) -> None:
    """Load, build and render a book.

    The output directory is only reset once the document has been built
    successfully, so a failing build leaves it untouched.
    """
    if not template_dir.is_dir():
        raise RenderError(f"directory '{template_dir}' does not exist")

    html = load_source(source)
    book = build_book(html, options)

    reset_directory(output_dir)
    if static_dir is not None:
        copy_directory(static_dir, output_dir)

    render_book(book, template_dir=template_dir, output_dir=output_dir)
    logger.info(
        "Created book",
        extra={"output_dir": str(output_dir), "pages": len(book.sections)},
    )
