from .countries import CountriesService
from .persons import PersonsService
from .dispatch import PersonField, filter_persons, sort_persons

__all__ = [
    'CountriesService',
    'PersonsService',
    'PersonField',
    'filter_persons',
    'sort_persons',
]
