"""SQLAlchemy-backed Country storage."""

import uuid
from typing import List, Optional

from sqlalchemy import select

from contacts.core import Country
from .base import CountriesRepositoryBase


class CountriesRepository(CountriesRepositoryBase):

    def add(self, country: Country) -> Country:
        self.session.add(country)
        self.session.flush()
        return country

    def get_all(self) -> List[Country]:
        return list(self.session.execute(select(Country)).scalars())

    def get_by_id(self, country_id: uuid.UUID) -> Optional[Country]:
        return Country.get_by_country_id(self.session, country_id)

    def get_by_name(self, country_name: str) -> Optional[Country]:
        return Country.get_by_name(self.session, country_name)
