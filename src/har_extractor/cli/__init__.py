"""CLI for har-extractor.

This module provides a Typer-based CLI for extracting HAR response bodies.
"""

from __future__ import annotations
