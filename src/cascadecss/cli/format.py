"""CLI command: cascadecss format -- rewrite a stylesheet in canonical form."""

from __future__ import annotations

from pathlib import Path

import click

from cascadecss.cli.options import engine_options, load_engine


@click.command("format")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write to this file instead of stdout",
)
@engine_options
def format_(
    cssfile: str,
    output: str | None,
    strict: bool,
    browser_specific: bool,
    keep_duplicates: bool,
) -> None:
    """Parse a stylesheet and print it back in canonical form.

    Grouped selectors are split apart, redeclared selectors are merged and
    moved to their last position, and properties are sorted by name.
    Parse problems are reported on stderr.
    """
    engine = load_engine(
        cssfile,
        strict=strict,
        browser_specific=browser_specific,
        keep_duplicates=keep_duplicates,
    )
    for message in engine.diagnostics():
        click.echo(f"warning: {message}", err=True)

    if output:
        engine.write_file(output)
        click.echo(f"Wrote {len(engine)} selector(s) to {Path(output).name}", err=True)
    else:
        click.echo(engine.serialize(), nl=False)
