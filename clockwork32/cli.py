"""Command-line interface for clockwork32 using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import click
from clockwork32 import __version__
from clockwork32.config import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """clockwork32: Clockwork Base32 encoder/decoder."""
    configure_logging(verbose)


# Register subcommands
from clockwork32.commands.encode import encode  # noqa: E402
from clockwork32.commands.decode import decode  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
