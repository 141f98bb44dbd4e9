"""askwire CLI entry point: Click group with subcommands."""

import logging

import click

from askwire import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=__version__, prog_name="askwire")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging verbosity (logs go to stderr)",
)
def cli(log_level: str) -> None:
    """askwire - ask a sequence of questions and print the answers."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from askwire.cli.check import check  # noqa: E402
from askwire.cli.run import run  # noqa: E402

cli.add_command(run)
cli.add_command(check)
