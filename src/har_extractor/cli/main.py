"""Main CLI entry point for har-extractor.

A single command: har-extractor [OPTIONS] HAR_FILES...
"""

from __future__ import annotations

import typer

from har_extractor.cli.extract import extract

app = typer.Typer(
    name="har-extractor",
    help="Extract response bodies from HAR files.",
    add_completion=False,
)

app.command()(extract)


if __name__ == "__main__":
    app()
