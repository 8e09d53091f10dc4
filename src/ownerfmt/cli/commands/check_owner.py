"""Check-owner command - test whether a user owns the described item."""

import sys
import click
from ...ingest.description_loader import load_description_json
from ...utils.errors import OwnerFmtError
from ..utils import format_error
from ..utils.file_resolver import resolve_file_path


@click.command(name="check-owner")
@click.argument('description_json', type=click.Path(exists=False))
@click.argument('user_id')
@click.option('--primary-only', is_flag=True, help='Do not accept co-owners')
def check_owner(description_json, user_id, primary_only):
    """Print 'yes' and exit 0 if USER_ID is an owner, otherwise print 'no' and exit 2."""
    try:
        description = load_description_json(str(resolve_file_path(description_json)))
    except (FileNotFoundError, OwnerFmtError) as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    if description.is_owner(user_id, accept_co_owners=not primary_only):
        click.echo("yes")
    else:
        click.echo("no")
        sys.exit(2)
