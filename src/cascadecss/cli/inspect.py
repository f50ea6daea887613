"""CLI command: cascadecss inspect -- show selectors in cascade order."""

from __future__ import annotations

import click

from cascadecss.cli.options import engine_options, load_engine


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--selector", "-s", default=None, help="Print one selector as an inline style")
@engine_options
def inspect(
    cssfile: str,
    selector: str | None,
    strict: bool,
    browser_specific: bool,
    keep_duplicates: bool,
) -> None:
    """Parse a stylesheet and display its selectors in cascade order.

    With --selector, print that selector's properties in the form used by
    an HTML style attribute.
    """
    engine = load_engine(
        cssfile,
        strict=strict,
        browser_specific=browser_specific,
        keep_duplicates=keep_duplicates,
    )

    if selector is not None:
        if selector not in engine:
            raise click.ClickException(f"Selector not found: {selector}")
        click.echo(engine.serialize_selector(selector))
        return

    click.echo(f"Selectors: {len(engine)}")
    for position, rule in enumerate(engine.rules(), start=1):
        click.echo(f"  {position:>3}. {rule.selector}  ({len(rule.properties)} properties)")
