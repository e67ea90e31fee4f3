"""Storage contracts for Country and Person records."""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from contacts.core import Country, Person


class BaseRepository(ABC):
    """Base class for all repositories; holds the injected session."""

    def __init__(self, session: Session):
        self.session = session


class CountriesRepositoryBase(BaseRepository):
    """Data access contract for Country records."""

    @abstractmethod
    def add(self, country: Country) -> Country:
        """Store a new country and return it."""

    @abstractmethod
    def get_all(self) -> List[Country]:
        """Return all countries."""

    @abstractmethod
    def get_by_id(self, country_id: uuid.UUID) -> Optional[Country]:
        """Return the country with this id, or None."""

    @abstractmethod
    def get_by_name(self, country_name: str) -> Optional[Country]:
        """Return the country with exactly this name, or None."""


class PersonsRepositoryBase(BaseRepository):
    """Data access contract for Person records."""

    @abstractmethod
    def add(self, person: Person) -> Person:
        """Store a new person and return it."""

    @abstractmethod
    def get_all(self) -> List[Person]:
        """Return all persons."""

    @abstractmethod
    def get_by_id(self, person_id: uuid.UUID) -> Optional[Person]:
        """Return the person with this id, or None."""

    @abstractmethod
    def get_filtered(self, predicate: ColumnElement) -> List[Person]:
        """Return persons matching a SQL boolean clause."""

    @abstractmethod
    def update(self, person: Person) -> Optional[Person]:
        """Overwrite the mutable fields of the stored person; None if not found."""

    @abstractmethod
    def delete(self, person_id: uuid.UUID) -> bool:
        """Delete the person; False if not found."""
