"""
Service accessors bound to the request-scoped Flask-SQLAlchemy session.
"""

from contacts.services import CountriesService, PersonsService
from webapp.extensions import db


def persons_service() -> PersonsService:
    return PersonsService(db.session)


def countries_service() -> CountriesService:
    return CountriesService(db.session)
