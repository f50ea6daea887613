"""Options shared by every command that ingests a stylesheet."""

from __future__ import annotations

import sys
from typing import Callable

import click

from cascadecss.config import EngineConfig
from cascadecss.engine import StylesheetEngine
from cascadecss.errors import ParseError


def engine_options(command: Callable) -> Callable:
    """Add the engine configuration flags to a click command."""
    command = click.option(
        "--keep-duplicates",
        is_flag=True,
        default=False,
        help="Keep every value of a property declared more than once",
    )(command)
    command = click.option(
        "--browser-specific",
        is_flag=True,
        default=False,
        help="Keep *hack, -vendor and _hack properties",
    )(command)
    command = click.option(
        "--strict",
        is_flag=True,
        default=False,
        help="Stop at the first parse problem",
    )(command)
    return command


def load_engine(
    path: str, *, strict: bool, browser_specific: bool, keep_duplicates: bool
) -> StylesheetEngine:
    """Build an engine from the flags and ingest *path*; exits 1 on a strict-mode error."""
    engine = StylesheetEngine(
        EngineConfig(
            escalate_on_parse_error=strict,
            process_browser_specific_properties=browser_specific,
            retain_duplicate_properties=keep_duplicates,
        )
    )
    try:
        engine.read_file(path)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    return engine
