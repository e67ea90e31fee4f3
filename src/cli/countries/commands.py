"""Country command classes."""

from pathlib import Path

from cli.core.base import BaseCountryCommand
from cli.core.utils import EXIT_SUCCESS, EXIT_NOT_FOUND
from contacts.dto import CountryAddRequest
from rich.table import Table
from rich import box


class CountryListCommand(BaseCountryCommand):
    """List all countries."""

    def execute(self) -> int:
        try:
            countries = self.service.get_all_countries()
            if not countries:
                self.console.print("❌ No countries found", style="red")
                return EXIT_NOT_FOUND

            table = Table(box=box.SIMPLE)
            table.add_column("#", style="dim")
            table.add_column("Country", style="green")
            if self.ctx.verbose:
                table.add_column("ID", style="dim")

            for i, country in enumerate(sorted(countries, key=lambda c: c.country_name or ''), 1):
                row = [str(i), country.country_name or '']
                if self.ctx.verbose:
                    row.append(str(country.country_id))
                table.add_row(*row)

            self.console.print(table)
            return EXIT_SUCCESS
        except Exception as e:
            return self.handle_exception(e)


class CountryAddCommand(BaseCountryCommand):
    """Add a single country by name."""

    def execute(self, name: str) -> int:
        try:
            country = self.service.add_country(CountryAddRequest(country_name=name))
            self.console.print(f"✅ Added {country.country_name} ({country.country_id})", style="green")
            return EXIT_SUCCESS
        except Exception as e:
            return self.handle_exception(e)


class CountryImportCommand(BaseCountryCommand):
    """Import countries from the 'Countries' sheet of an .xlsx workbook."""

    def execute(self, path: str) -> int:
        try:
            count = self.service.upload_countries_from_excel_file(Path(path).read_bytes())
            self.console.print(f"✅ {count} Countries Uploaded", style="green")
            return EXIT_SUCCESS
        except Exception as e:
            return self.handle_exception(e)
