"""threadstyle CLI entry point: Click group with subcommands."""

import logging

import click

from threadstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="threadstyle")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped properties and files.")
def cli(verbose: bool) -> None:
    """threadstyle - rewrite style shorthand attributes into inline styles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from threadstyle.cli.rewrite import rewrite  # noqa: E402
from threadstyle.cli.inspect import inspect  # noqa: E402

cli.add_command(rewrite)
cli.add_command(inspect)
