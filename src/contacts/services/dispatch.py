"""
Field-driven filtering and sorting of person responses.

A field tag selects a value extractor; filtering and sorting then apply one
generic rule to whatever the extractor returns. Both operate on an already
materialized list of ``PersonResponse`` objects and never touch the store.

Field tags use the names the UI sends in ``searchBy`` / ``sortBy``:

    PersonName, Email, DateOfBirth, Gender, Age, CountryID, Country,
    Address, ReceiveNewsLetters

Usage:
    from contacts.services.dispatch import filter_persons, sort_persons

    matching = filter_persons(persons, 'PersonName', 'ma')
    ordered = sort_persons(matching, 'Age', SortOrderOptions.DESC)
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from contacts.dto import PersonResponse
from contacts.enums import SortOrderOptions


__all__ = [
    'PersonField',
    'SEARCH_FIELDS',
    'SORT_FIELDS',
    'DATE_OF_BIRTH_SEARCH_FORMAT',
    'parse_field',
    'filter_persons',
    'sort_persons',
]


class PersonField(str, Enum):
    PERSON_NAME = 'PersonName'
    EMAIL = 'Email'
    DATE_OF_BIRTH = 'DateOfBirth'
    GENDER = 'Gender'
    AGE = 'Age'
    COUNTRY_ID = 'CountryID'
    COUNTRY = 'Country'
    ADDRESS = 'Address'
    RECEIVE_NEWS_LETTERS = 'ReceiveNewsLetters'


# "06 May 2002"
DATE_OF_BIRTH_SEARCH_FORMAT = '%d %B %Y'


def _date_of_birth_text(person: PersonResponse) -> Optional[str]:
    if person.date_of_birth is None:
        return None
    return person.date_of_birth.strftime(DATE_OF_BIRTH_SEARCH_FORMAT)


# Text used for substring search, per field
SEARCH_FIELDS: Dict[PersonField, Callable[[PersonResponse], Optional[str]]] = {
    PersonField.PERSON_NAME: lambda p: p.person_name,
    PersonField.EMAIL: lambda p: p.email,
    PersonField.DATE_OF_BIRTH: _date_of_birth_text,
    PersonField.GENDER: lambda p: p.gender,
    PersonField.COUNTRY_ID: lambda p: p.country,
    PersonField.COUNTRY: lambda p: p.country,
    PersonField.ADDRESS: lambda p: p.address,
}

# Value used for ordering, per field
SORT_FIELDS: Dict[PersonField, Callable[[PersonResponse], Any]] = {
    PersonField.PERSON_NAME: lambda p: p.person_name,
    PersonField.EMAIL: lambda p: p.email,
    PersonField.DATE_OF_BIRTH: lambda p: p.date_of_birth,
    PersonField.GENDER: lambda p: p.gender,
    PersonField.AGE: lambda p: p.age,
    PersonField.COUNTRY: lambda p: p.country,
    PersonField.COUNTRY_ID: lambda p: p.country,
    PersonField.ADDRESS: lambda p: p.address,
    PersonField.RECEIVE_NEWS_LETTERS: lambda p: p.receive_news_letters,
}


def parse_field(name) -> Optional[PersonField]:
    """Return the field tag for ``name``, or None if it is not a known field."""
    if isinstance(name, PersonField):
        return name
    try:
        return PersonField(name)
    except ValueError:
        return None


def filter_persons(persons: List[PersonResponse], search_by,
                   search_string: Optional[str]) -> List[PersonResponse]:
    """
    Keep persons whose ``search_by`` field contains ``search_string``.

    Matching is a case-insensitive substring test. A person whose value for the
    field is missing (None or empty) is kept.

    Args:
        persons: Responses to filter
        search_by: Field tag (or its string name)
        search_string: Text to look for

    Returns:
        The input list itself when either argument is empty or the field is
        not searchable; otherwise a new list of matching persons
    """
    if not search_by or not search_string:
        return persons

    extractor = SEARCH_FIELDS.get(parse_field(search_by))
    if extractor is None:
        return persons

    needle = search_string.casefold()
    matching = []
    for person in persons:
        value = extractor(person)
        if not value or needle in value.casefold():
            matching.append(person)
    return matching


def _null_first_key(extractor):
    # (False, ...) sorts before (True, ...); values are never compared with None.
    # Strings compare case-insensitively, with the exact text as tie-break.
    def key(person):
        value = extractor(person)
        if value is None:
            return (False, 0, 0)
        if isinstance(value, str):
            return (True, value.casefold(), value)
        return (True, value, 0)
    return key


def sort_persons(persons: List[PersonResponse], sort_by,
                 sort_order=SortOrderOptions.ASC) -> List[PersonResponse]:
    """
    Return a new list ordered by the ``sort_by`` field.

    The sort is stable. Missing values come first in ascending order and last
    in descending order. Text compares case-insensitively, so "adam"
    sorts before "Mary". An unknown field returns a copy in the original order.

    Args:
        persons: Responses to order
        sort_by: Field tag (or its string name)
        sort_order: SortOrderOptions or 'ASC' / 'DESC'
    """
    extractor = SORT_FIELDS.get(parse_field(sort_by))
    if extractor is None:
        return list(persons)

    descending = SortOrderOptions.parse(sort_order) is SortOrderOptions.DESC
    return sorted(persons, key=_null_first_key(extractor), reverse=descending)
