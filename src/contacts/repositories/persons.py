"""SQLAlchemy-backed Person storage."""

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload
from sqlalchemy.sql.elements import ColumnElement

from contacts.core import Person
from .base import PersonsRepositoryBase


class PersonsRepository(PersonsRepositoryBase):

    def _query(self):
        # Country is always needed to build responses
        return select(Person).options(joinedload(Person.country))

    def add(self, person: Person) -> Person:
        self.session.add(person)
        self.session.flush()
        return person

    def get_all(self) -> List[Person]:
        return list(self.session.execute(self._query()).scalars())

    def get_by_id(self, person_id: uuid.UUID) -> Optional[Person]:
        return self.session.execute(
            self._query().where(Person.person_id == person_id)
        ).scalars().first()

    def get_filtered(self, predicate: ColumnElement) -> List[Person]:
        return list(self.session.execute(self._query().where(predicate)).scalars())

    def update(self, person: Person) -> Optional[Person]:
        found = Person.get_by_person_id(self.session, person.person_id)
        if found is None:
            return None

        for field in Person.MUTABLE_FIELDS:
            setattr(found, field, getattr(person, field))

        self.session.flush()
        # country_id may have changed; reload the relationship
        self.session.refresh(found, attribute_names=['country'])
        return found

    def delete(self, person_id: uuid.UUID) -> bool:
        found = Person.get_by_person_id(self.session, person_id)
        if found is None:
            return False

        self.session.delete(found)
        self.session.flush()
        return True
