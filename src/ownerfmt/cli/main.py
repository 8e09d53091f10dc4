"""Main CLI entry point for ownerfmt."""

import click
from .commands.show import show
from .commands.check_owner import check_owner
from .commands.version import version as version_command
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="ownerfmt", message="%(prog)s version %(version)s")
def cli():
    """ownerfmt - Owner ids and emails for UIs and notifications."""
    pass


cli.add_command(show)
cli.add_command(check_owner)
cli.add_command(version_command)
