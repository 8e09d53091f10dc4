"""Show command - format ownership strings for a description file."""

import json
import sys
import click
from ...config import load_email_resolver
from ...ingest.description_loader import load_description_json
from ...presentation.human_formatter import format_human_friendly
from ...presentation.ownership_formatter import format_ownership_summary
from ...utils.errors import OwnerFmtError
from ...utils.logging import get_logger
from ..utils import format_error
from ..utils.file_resolver import resolve_file_path

logger = get_logger("cli.show")

FIELDS = {
    "owner-id": "owner_id",
    "owner-email": "owner_email",
    "co-owner-ids": "co_owner_ids",
    "co-owner-emails": "co_owner_emails",
}


@click.command()
@click.argument('description_json', type=click.Path(exists=False))
@click.option('--config', 'config_path', type=click.Path(), help='Config YAML with the email directory')
@click.option('--field', type=click.Choice(list(FIELDS)), help='Print a single raw value')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON instead of human-readable')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def show(description_json, config_path, field, as_json, quiet):
    """
    Show owner ids and emails of an ownership description.
    
    Emails are resolved from the configured user directory; owners without
    an email are left out of the email list.
    """
    try:
        try:
            description_path = resolve_file_path(description_json)
        except FileNotFoundError as e:
            click.echo(format_error(str(e)), err=True)
            sys.exit(1)
        
        if not quiet:
            click.echo(f"Loading ownership description: {description_path}", err=True)
        
        description = load_description_json(str(description_path))
        resolver = load_email_resolver(config_path)
        summary = format_ownership_summary(description, resolver)
        
        if field:
            click.echo(getattr(summary, FIELDS[field]))
        elif as_json:
            click.echo(json.dumps(summary.model_dump(), indent=2))
        else:
            click.echo(format_human_friendly(summary))
        
    except OwnerFmtError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Formatting failed: {e}"), err=True)
        sys.exit(1)
