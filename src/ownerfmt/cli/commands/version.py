"""Version command - show ownerfmt version."""

import click
from ... import __version__


@click.command()
def version():
    """Show ownerfmt version."""
    click.echo(f"ownerfmt version {__version__}")
