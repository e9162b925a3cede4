"""Entry point for python -m har_extractor."""

from __future__ import annotations


def main() -> None:
    """Run the CLI application."""
    from har_extractor.cli.main import app

    app()


if __name__ == "__main__":
    main()
