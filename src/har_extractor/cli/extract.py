"""Extract command for har-extractor CLI - writes HAR response bodies to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from har_extractor.extraction import ExtractOptions, extract_har_file, parse_allowed_hosts


class _EchoHandler(logging.Handler):
    """Logging handler that writes records to stderr through typer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    """Route package log records to stderr; INFO when verbose, WARNING otherwise."""
    logger = logging.getLogger("har_extractor")
    if not any(isinstance(h, _EchoHandler) for h in logger.handlers):
        logger.addHandler(_EchoHandler())
    logger.propagate = False
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: True if --version flag was provided
    """
    if value:
        from har_extractor import __version__

        typer.echo(f"har-extractor {__version__}")
        raise typer.Exit()


def extract(
    har_files: Annotated[
        list[Path] | None,
        typer.Argument(help="HAR files to extract (.har or .har.gz)", show_default=False),
    ] = None,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output directory"),
    ] = Path("."),
    remove_query_string: Annotated[
        bool,
        typer.Option("--remove-query-string", "-r", help="Remove query string from file path"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Enable dry run mode"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show processing file path"),
    ] = False,
    allowed_hosts: Annotated[
        str,
        typer.Option(
            "--allowed-hosts",
            help='Comma-separated list of hosts to allow (e.g. "example.com,example.org")',
        ),
    ] = "",
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Extract response bodies from HAR files, preserving directory structure.

    Each response is written to OUTPUT/<host>/<url path>. Base64 encoded
    bodies are decoded to their original bytes. A file that fails is
    reported and the remaining files are still processed.

    Args:
        har_files: HAR files to process
        output: Root output directory
        remove_query_string: Leave query strings out of file names
        dry_run: Show what would be written without writing anything
        verbose: Log each destination path
        allowed_hosts: Only extract these hosts (exact host[:port] match)
        version: Show version and exit

    Example:
        har-extractor capture.har
        har-extractor -o ./site --remove-query-string capture.har
        har-extractor --allowed-hosts example.com,cdn.example.com *.har
        har-extractor --dry-run --verbose capture.har.gz
    """
    if not har_files:
        typer.echo("Please provide at least one HAR file to process", err=True)
        raise typer.Exit(1)

    _configure_logging(verbose)

    options = ExtractOptions(
        output_dir=output,
        remove_query_string=remove_query_string,
        dry_run=dry_run,
        verbose=verbose,
        allowed_hosts=parse_allowed_hosts(allowed_hosts),
    )

    for har_file in har_files:
        result = extract_har_file(har_file, options)
        if not result.opened:
            typer.echo(f"Failed to open HAR file {har_file}: {result.error}", err=True)
        elif result.error is not None:
            typer.echo(
                f"Failed to process HAR file {har_file} ({result.processed} entries processed): {result.error}",
                err=True,
            )
        else:
            typer.echo(f"Successfully processed HAR file {har_file} ({result.processed} entries processed)")
