"""
Contacts Package

Import order matters! Follow dependency chain:
1. Base classes (no dependencies)
2. Models (Country before Person)
3. Request / response objects
4. Services
"""

# 1. Base classes first
from .base import Base, SessionMixin

# 2. Models
from .core.countries import Country
from .core.persons import Person

# 3. Request / response objects
from .enums import GenderOptions, SortOrderOptions
from .exceptions import InvalidArgumentError, UnreadableWorkbookError
from .dto import (
    CountryAddRequest,
    CountryResponse,
    PersonAddRequest,
    PersonUpdateRequest,
    PersonResponse,
)

# 4. Services
from .services import CountriesService, PersonsService, PersonField

__all__ = [
    'Base',
    'SessionMixin',
    'Country',
    'Person',
    'GenderOptions',
    'SortOrderOptions',
    'InvalidArgumentError',
    'UnreadableWorkbookError',
    'CountryAddRequest',
    'CountryResponse',
    'PersonAddRequest',
    'PersonUpdateRequest',
    'PersonResponse',
    'CountriesService',
    'PersonsService',
    'PersonField',
]
