"""Enumerated option sets shared by requests, services and views."""

from enum import Enum


class GenderOptions(str, Enum):
    MALE = 'Male'
    FEMALE = 'Female'
    OTHER = 'Other'


class SortOrderOptions(str, Enum):
    ASC = 'ASC'
    DESC = 'DESC'

    @classmethod
    def parse(cls, value) -> 'SortOrderOptions':
        """
        Coerce a query-string value into a sort order.

        Anything other than a case-insensitive 'DESC' sorts ascending.
        """
        if isinstance(value, cls):
            return value
        if value and str(value).upper() == cls.DESC.value:
            return cls.DESC
        return cls.ASC
