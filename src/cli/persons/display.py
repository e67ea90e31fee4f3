"""Display functions for person commands."""

from typing import List

from cli.core.context import Context
from contacts.dto import PersonResponse
from rich.table import Table
from rich import box


def display_persons(ctx: Context, persons: List[PersonResponse]):
    """Render persons as a table; --verbose adds ids and TIN."""
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan bold")
    table.add_column("Email")
    table.add_column("Date of Birth")
    table.add_column("Age", justify="right")
    table.add_column("Gender")
    table.add_column("Country", style="magenta")
    table.add_column("Newsletters")

    if ctx.verbose:
        table.add_column("ID", style="dim")
        table.add_column("TIN")
        table.add_column("Address")

    for i, person in enumerate(persons, 1):
        row = [
            str(i),
            person.person_name or '',
            person.email or '',
            person.date_of_birth.isoformat() if person.date_of_birth else '',
            str(person.age) if person.age is not None else '',
            person.gender or '',
            person.country or '',
            "[green]Yes[/]" if person.receive_news_letters else "[dim]No[/]",
        ]
        if ctx.verbose:
            row.extend([str(person.person_id), person.tin or '', person.address or ''])
        table.add_row(*row)

    ctx.console.print(table)
