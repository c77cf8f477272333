"""Entry point for running with python -m bookprint."""

from bookprint.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
