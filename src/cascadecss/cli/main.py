"""cascadecss CLI entry point: Click group with subcommands."""

import logging

import click

from cascadecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cascadecss")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log ingest details to stderr")
def cli(verbose: bool) -> None:
    """cascadecss - read, rewrite and inspect CSS while respecting the cascade order."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from cascadecss.cli.format import format_  # noqa: E402
from cascadecss.cli.check import check  # noqa: E402
from cascadecss.cli.inspect import inspect  # noqa: E402

cli.add_command(format_)
cli.add_command(check)
cli.add_command(inspect)
