"""
Field-driven filtering and sorting of person responses.

These tests build PersonResponse objects directly; no database is needed.
"""

import uuid
from datetime import date

import pytest

from contacts.dto import PersonResponse
from contacts.enums import SortOrderOptions
from contacts.services.dispatch import (
    PersonField, SEARCH_FIELDS, SORT_FIELDS, parse_field, filter_persons, sort_persons,
)


def person(name, email=None, dob=None, gender=None, country=None, address=None,
           news=False, age=None):
    return PersonResponse(
        person_id=uuid.uuid4(), person_name=name, email=email, date_of_birth=dob,
        gender=gender, country=country, address=address, receive_news_letters=news, age=age,
    )


@pytest.fixture
def people():
    return [
        person('Mary', 'mary@example.com', date(2002, 5, 6), 'Female', 'USA', 'Boston', True, 24),
        person('Smith', 'smith@example.com', date(1985, 1, 20), 'Male', 'India', 'Chennai', False, 42),
        person('Rahman', None, None, 'Other', None, None, True, None),
    ]


class TestParseField:

    def test_known_names(self):
        assert parse_field('PersonName') is PersonField.PERSON_NAME
        assert parse_field(PersonField.AGE) is PersonField.AGE

    def test_unknown_names(self):
        assert parse_field('personname') is None
        assert parse_field('') is None
        assert parse_field(None) is None

    def test_every_sortable_field_has_extractor(self):
        """Only Age and ReceiveNewsLetters are sort-only."""
        assert set(SORT_FIELDS) == set(PersonField)
        assert set(PersonField) - set(SEARCH_FIELDS) == {PersonField.AGE, PersonField.RECEIVE_NEWS_LETTERS}


class TestFilterPersons:

    @pytest.mark.parametrize('search_by, search_string', [
        (None, 'ma'), ('', 'ma'), ('PersonName', ''), ('PersonName', None),
    ])
    def test_empty_arguments_return_input(self, people, search_by, search_string):
        assert filter_persons(people, search_by, search_string) is people

    def test_unknown_field_returns_input(self, people):
        assert filter_persons(people, 'ShoeSize', '42') is people

    def test_unsearchable_field_returns_input(self, people):
        assert filter_persons(people, 'Age', '42') is people

    def test_name_substring_case_insensitive(self, people):
        result = filter_persons(people, 'PersonName', 'MA')
        assert [p.person_name for p in result] == ['Mary', 'Rahman']

    def test_missing_value_passes(self, people):
        """Rahman has no email and is kept by any email search."""
        result = filter_persons(people, 'Email', 'smith')
        assert [p.person_name for p in result] == ['Smith', 'Rahman']

    def test_date_of_birth_uses_long_month_format(self, people):
        """Dates are searched as e.g. '06 May 2002'."""
        result = filter_persons(people, 'DateOfBirth', '06 may')
        assert [p.person_name for p in result] == ['Mary', 'Rahman']

        result = filter_persons(people, 'DateOfBirth', 'january')
        assert [p.person_name for p in result] == ['Smith', 'Rahman']

    def test_gender(self, people):
        result = filter_persons(people, 'Gender', 'female')
        assert [p.person_name for p in result] == ['Mary']

    def test_country_aliases(self, people):
        by_id = filter_persons(people, 'CountryID', 'us')
        by_name = filter_persons(people, 'Country', 'us')
        assert [p.person_name for p in by_id] == [p.person_name for p in by_name] == ['Mary', 'Rahman']

    def test_address(self, people):
        result = filter_persons(people, PersonField.ADDRESS, 'chen')
        assert [p.person_name for p in result] == ['Smith', 'Rahman']

    def test_filter_returns_new_list(self, people):
        result = filter_persons(people, 'PersonName', 'a')
        assert result is not people
        assert len(people) == 3


class TestSortPersons:

    def test_sort_by_name(self, people):
        result = sort_persons(people, 'PersonName', SortOrderOptions.ASC)
        assert [p.person_name for p in result] == ['Mary', 'Rahman', 'Smith']

    def test_sort_by_name_descending(self, people):
        result = sort_persons(people, 'PersonName', 'DESC')
        assert [p.person_name for p in result] == ['Smith', 'Rahman', 'Mary']

    def test_name_sort_ignores_case(self):
        mixed = [person('Mary'), person('Zed'), person('adam')]

        ascending = sort_persons(mixed, 'PersonName')
        assert [p.person_name for p in ascending] == ['adam', 'Mary', 'Zed']

        descending = sort_persons(mixed, 'PersonName', SortOrderOptions.DESC)
        assert [p.person_name for p in descending] == ['Zed', 'Mary', 'adam']

    def test_case_only_differences_order_deterministically(self):
        result = sort_persons([person('mary'), person('Mary')], 'PersonName')
        assert [p.person_name for p in result] == ['Mary', 'mary']

    def test_unknown_field_keeps_order(self, people):
        result = sort_persons(people, 'ShoeSize', SortOrderOptions.DESC)
        assert result == people
        assert result is not people

    def test_nulls_first_ascending_last_descending(self, people):
        ascending = sort_persons(people, 'Age', SortOrderOptions.ASC)
        assert [p.person_name for p in ascending] == ['Rahman', 'Mary', 'Smith']

        descending = sort_persons(people, 'Age', SortOrderOptions.DESC)
        assert [p.person_name for p in descending] == ['Smith', 'Mary', 'Rahman']

    def test_sort_by_date_of_birth(self, people):
        result = sort_persons(people, 'DateOfBirth')
        assert [p.person_name for p in result] == ['Rahman', 'Smith', 'Mary']

    def test_sort_by_country(self, people):
        result = sort_persons(people, 'Country')
        assert [p.person_name for p in result] == ['Rahman', 'Smith', 'Mary']

    def test_sort_by_newsletters_is_stable(self, people):
        """Ties keep their original relative order."""
        result = sort_persons(people, 'ReceiveNewsLetters')
        assert [p.person_name for p in result] == ['Smith', 'Mary', 'Rahman']

    def test_ascending_descending_are_reverses(self, people):
        ascending = sort_persons(people, 'Email')
        descending = sort_persons(people, 'Email', SortOrderOptions.DESC)
        assert descending == list(reversed(ascending))

    def test_sort_order_parse(self):
        assert SortOrderOptions.parse('desc') is SortOrderOptions.DESC
        assert SortOrderOptions.parse('ASC') is SortOrderOptions.ASC
        assert SortOrderOptions.parse(None) is SortOrderOptions.ASC
        assert SortOrderOptions.parse('sideways') is SortOrderOptions.ASC
