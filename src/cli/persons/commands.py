"""Person command classes."""

from pathlib import Path
from typing import Optional

from cli.core.base import BasePersonCommand
from cli.core.utils import EXIT_SUCCESS, EXIT_NOT_FOUND
from cli.persons.display import display_persons


class PersonListCommand(BasePersonCommand):
    """List persons with optional search and sort."""

    def execute(self, search_by: Optional[str] = None, search: Optional[str] = None,
                sort_by: str = 'PersonName', order: str = 'ASC') -> int:
        try:
            persons = self.service.get_filtered_persons(search_by, search)
            persons = self.service.get_sorted_persons(persons, sort_by, order)

            if not persons:
                self.console.print("❌ No persons found", style="red")
                return EXIT_NOT_FOUND

            self.console.print(f"✅ Found {len(persons)} person(s):\n", style="green bold")
            display_persons(self.ctx, persons)
            return EXIT_SUCCESS
        except Exception as e:
            return self.handle_exception(e)


class PersonExportCsvCommand(BasePersonCommand):
    """Write all persons to a CSV file."""

    def execute(self, path: str) -> int:
        try:
            buffer = self.service.get_persons_csv()
            Path(path).write_bytes(buffer.getvalue())
            self.console.print(f"✅ Wrote {path}", style="green")
            return EXIT_SUCCESS
        except Exception as e:
            return self.handle_exception(e)


class PersonExportExcelCommand(BasePersonCommand):
    """Write all persons to an .xlsx workbook."""

    def execute(self, path: str, brief: bool = False) -> int:
        try:
            buffer = self.service.get_persons_excel(brief=brief)
            Path(path).write_bytes(buffer.getvalue())
            self.console.print(f"✅ Wrote {path}", style="green")
            return EXIT_SUCCESS
        except Exception as e:
            return self.handle_exception(e)
