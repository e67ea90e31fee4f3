from .base import BaseRepository, CountriesRepositoryBase, PersonsRepositoryBase
from .countries import CountriesRepository
from .persons import PersonsRepository

__all__ = [
    'BaseRepository',
    'CountriesRepositoryBase',
    'PersonsRepositoryBase',
    'CountriesRepository',
    'PersonsRepository',
]
