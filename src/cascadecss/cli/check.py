"""CLI command: cascadecss check -- report parse problems in a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cascadecss.cli.options import engine_options, load_engine


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@engine_options
def check(cssfile: str, strict: bool, browser_specific: bool, keep_duplicates: bool) -> None:
    """Parse a stylesheet and list every parse problem found.

    Exits with code 0 when the stylesheet parsed cleanly, or code 1 when
    there were problems.
    """
    css_path = Path(cssfile)
    engine = load_engine(
        cssfile,
        strict=strict,
        browser_specific=browser_specific,
        keep_duplicates=keep_duplicates,
    )

    diagnostics = engine.diagnostic_records()
    if not diagnostics:
        click.echo(f"OK: {css_path.name} parsed cleanly ({len(engine)} selector(s))")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(f"{diag.kind.value}: {diag}")

    click.echo()
    click.echo(f"Summary: {len(diagnostics)} problem(s), {len(engine)} selector(s) kept")
    sys.exit(1)
