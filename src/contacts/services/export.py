"""
CSV / Excel encoding of person responses and Excel decoding of country names.

These helpers only translate between response objects and bytes; the services
decide what to read or store.
"""

import csv
import io
import zipfile
from typing import BinaryIO, Iterable, List, Optional, Union

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException

from contacts.dto import PersonResponse
from contacts.exceptions import UnreadableWorkbookError


PERSONS_SHEET = 'PersonsSheet'
COUNTRIES_SHEET = 'Countries'

EXCEL_DATE_FORMAT = '%Y-%m-%d'

# (header, value getter) pairs, in column order
EXCEL_COLUMNS = [
    ('Person Name', lambda p: p.person_name),
    ('Email', lambda p: p.email),
    ('Date of Birth', lambda p: p.date_of_birth.strftime(EXCEL_DATE_FORMAT) if p.date_of_birth else None),
    ('Age', lambda p: p.age),
    ('Gender', lambda p: p.gender),
    ('Country', lambda p: p.country),
    ('Address', lambda p: p.address),
    ('Receive News Letters', lambda p: p.receive_news_letters),
]

EXCEL_BRIEF_COLUMNS = [
    ('Person Name', lambda p: p.person_name),
    ('Age', lambda p: p.age),
    ('Gender', lambda p: p.gender),
]

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(start_color='228B22', end_color='228B22', fill_type='solid')  # ForestGreen


def _csv_value(value):
    if value is None:
        return ''
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    return value


def persons_to_csv(persons: Iterable[PersonResponse]) -> io.BytesIO:
    """
    Encode persons as CSV: a header of response field names, one row each.

    Returns:
        BytesIO positioned at 0 holding UTF-8 text
    """
    field_names = PersonResponse.field_names()

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(field_names)
    for person in persons:
        writer.writerow([_csv_value(getattr(person, name)) for name in field_names])

    return io.BytesIO(output.getvalue().encode('utf-8'))


def persons_to_excel(persons: Iterable[PersonResponse], brief: bool = False) -> io.BytesIO:
    """
    Encode persons as an .xlsx workbook with a single ``PersonsSheet``.

    Args:
        persons: Responses to write, in order
        brief: Write only name, age and gender

    Returns:
        BytesIO positioned at 0 holding the workbook
    """
    columns = EXCEL_BRIEF_COLUMNS if brief else EXCEL_COLUMNS

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = PERSONS_SHEET

    for col, (header, _) in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=col, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL

    for row, person in enumerate(persons, start=2):
        for col, (_, getter) in enumerate(columns, start=1):
            sheet.cell(row=row, column=col, value=getter(person))

    # Approximate auto-fit: widest rendered value per column
    for col in range(1, len(columns) + 1):
        letter = get_column_letter(col)
        width = max(len(str(cell.value)) for cell in sheet[letter] if cell.value is not None)
        sheet.column_dimensions[letter].width = width + 2

    output = io.BytesIO()
    workbook.save(output)
    output.seek(0)
    return output


def read_country_names(source: Union[bytes, BinaryIO]) -> Optional[List[str]]:
    """
    Read country names from column A of the ``Countries`` worksheet, row 2 down.

    Blank cells are skipped. Duplicates are returned as-is.

    Args:
        source: Workbook bytes or a binary file object

    Returns:
        List of names, or None if the workbook has no ``Countries`` worksheet

    Raises:
        UnreadableWorkbookError: If the bytes are not an .xlsx package
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        workbook = load_workbook(source, read_only=True, data_only=True)
    except (zipfile.BadZipFile, KeyError, InvalidFileException) as e:
        # KeyError: a zip archive without the xlsx package parts
        raise UnreadableWorkbookError(f"Not an xlsx workbook: {e}") from e

    try:
        if COUNTRIES_SHEET not in workbook.sheetnames:
            return None

        names = []
        for row in workbook[COUNTRIES_SHEET].iter_rows(min_row=2, max_col=1, values_only=True):
            value = row[0] if row else None
            if value is None:
                continue
            name = str(value).strip()
            if name:
                names.append(name)
        return names
    finally:
        workbook.close()
