#!/usr/bin/env python3
"""
Contacts CLI - manage countries and persons from the command line.
"""

import os
import sys
import click
from sqlalchemy.orm import Session

from cli.core.context import Context
from cli.countries.commands import CountryListCommand, CountryAddCommand, CountryImportCommand
from cli.persons.commands import PersonListCommand, PersonExportCsvCommand, PersonExportExcelCommand
from contacts.services import PersonField
from contacts.session import create_contacts_engine, create_schema


pass_context = click.make_pass_decorator(Context, ensure=True)
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

FIELD_CHOICES = click.Choice([f.value for f in PersonField])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--db-url', envvar='CONTACTS_DB_URL', default=None,
              help='Database URL (default: $CONTACTS_DB_URL or sqlite:///contacts.db)')
@click.option('--verbose', '-v', is_flag=True, help='Show detailed information')
@pass_context
def cli(ctx: Context, db_url, verbose: bool):
    """Manage the contacts database"""
    ctx.verbose = verbose

    # Initialize database connection
    try:
        ctx.engine, _ = create_contacts_engine(db_url)
        ctx.session = Session(ctx.engine)
    except Exception as e:
        ctx.stderr_console.print(f"Error connecting to database: {e}", style="bold red")
        sys.exit(1)

    click.get_current_context().call_on_close(ctx.session.close)

    audit_log = os.getenv('AUDIT_LOG_PATH')
    if audit_log:
        from webapp.audit import init_audit_events
        init_audit_events(audit_log)


@cli.command('init-db')
@pass_context
def init_db(ctx: Context):
    """Create the Countries and Persons tables."""
    create_schema(ctx.engine)
    ctx.console.print("✅ Schema created", style="green")


# ========================================================================
# Country Commands
# ========================================================================

@cli.group()
def countries():
    """List, add and import countries."""


@countries.command('list')
@pass_context
def countries_list(ctx: Context):
    """List all countries."""
    sys.exit(CountryListCommand(ctx).execute())


@countries.command('add')
@click.argument('name')
@pass_context
def countries_add(ctx: Context, name):
    """Add a country named NAME."""
    sys.exit(CountryAddCommand(ctx).execute(name))


@countries.command('import')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@pass_context
def countries_import(ctx: Context, path):
    """Import countries from the 'Countries' sheet of an .xlsx file."""
    sys.exit(CountryImportCommand(ctx).execute(path))


# ========================================================================
# Person Commands
# ========================================================================

@cli.group()
def persons():
    """List and export persons."""


@persons.command('list')
@click.option('--search-by', type=FIELD_CHOICES, default=None, help='Field to search on')
@click.option('--search', metavar='TEXT', default=None, help='Case-insensitive text to look for')
@click.option('--sort-by', type=FIELD_CHOICES, default=PersonField.PERSON_NAME.value, help='Field to sort on (default: PersonName)')
@click.option('--order', type=click.Choice(['ASC', 'DESC'], case_sensitive=False), default='ASC', help='Sort order (default: ASC)')
@pass_context
def persons_list(ctx: Context, search_by, search, sort_by, order):
    """List persons, optionally filtered and sorted."""
    sys.exit(PersonListCommand(ctx).execute(search_by, search, sort_by, order))


@persons.command('export-csv')
@click.argument('path', type=click.Path(dir_okay=False, writable=True))
@pass_context
def persons_export_csv(ctx: Context, path):
    """Write all persons to a CSV file at PATH."""
    sys.exit(PersonExportCsvCommand(ctx).execute(path))


@persons.command('export-excel')
@click.argument('path', type=click.Path(dir_okay=False, writable=True))
@click.option('--brief', is_flag=True, help='Only Person Name, Age and Gender columns')
@pass_context
def persons_export_excel(ctx: Context, path, brief):
    """Write all persons to an .xlsx workbook at PATH."""
    sys.exit(PersonExportExcelCommand(ctx).execute(path, brief))


if __name__ == '__main__':
    cli()
