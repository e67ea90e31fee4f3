"""
Request and response objects for the contacts services.

Request objects carry user-supplied values into a service before validation;
response objects are built from stored entities and add derived fields
(age, country name).

Usage:
    from contacts.dto import PersonAddRequest

    request = PersonAddRequest(person_name='Smith', email='smith@example.com')
    response = persons_service.add_person(request)
    print(response.person_id, response.age)
"""

import uuid
from dataclasses import dataclass, fields
from datetime import date
from typing import Optional

from contacts.core import Country, Person
from contacts.enums import GenderOptions


# ============================================================================
# Countries
# ============================================================================

@dataclass
class CountryAddRequest:
    country_name: Optional[str] = None

    def to_country(self) -> Country:
        return Country(country_name=self.country_name)


@dataclass
class CountryResponse:
    country_id: uuid.UUID
    country_name: Optional[str]

    @classmethod
    def from_country(cls, country: Country) -> 'CountryResponse':
        return cls(country_id=country.country_id, country_name=country.country_name)


# ============================================================================
# Persons
# ============================================================================

def _gender_value(gender) -> Optional[str]:
    if gender is None:
        return None
    return gender.value if isinstance(gender, GenderOptions) else str(gender)


@dataclass
class PersonAddRequest:
    person_name: Optional[str] = None
    email: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[GenderOptions] = None
    country_id: Optional[uuid.UUID] = None
    address: Optional[str] = None
    receive_news_letters: bool = False
    tin: Optional[str] = None

    def to_person(self) -> Person:
        return Person(
            person_name=self.person_name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            gender=_gender_value(self.gender),
            country_id=self.country_id,
            address=self.address,
            receive_news_letters=bool(self.receive_news_letters),
            tin=self.tin,
        )


@dataclass
class PersonUpdateRequest:
    person_id: Optional[uuid.UUID] = None
    person_name: Optional[str] = None
    email: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[GenderOptions] = None
    country_id: Optional[uuid.UUID] = None
    address: Optional[str] = None
    receive_news_letters: bool = False
    tin: Optional[str] = None

    def to_person(self) -> Person:
        return Person(
            person_id=self.person_id,
            person_name=self.person_name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            gender=_gender_value(self.gender),
            country_id=self.country_id,
            address=self.address,
            receive_news_letters=bool(self.receive_news_letters),
            tin=self.tin,
        )


def calculate_age(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    Age in whole years, rounded from days / 365.25.

    Returns None when no date of birth is known.
    """
    if date_of_birth is None:
        return None
    today = today or date.today()
    return round((today - date_of_birth).days / 365.25)


@dataclass
class PersonResponse:
    person_id: uuid.UUID
    person_name: Optional[str] = None
    email: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    country_id: Optional[uuid.UUID] = None
    country: Optional[str] = None
    address: Optional[str] = None
    receive_news_letters: bool = False
    tin: Optional[str] = None
    age: Optional[int] = None

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_person(cls, person: Person) -> 'PersonResponse':
        return cls(
            person_id=person.person_id,
            person_name=person.person_name,
            email=person.email,
            date_of_birth=person.date_of_birth,
            gender=person.gender,
            country_id=person.country_id,
            country=person.country_name,
            address=person.address,
            receive_news_letters=bool(person.receive_news_letters),
            tin=person.tin,
            age=calculate_age(person.date_of_birth),
        )

    def to_person_update_request(self) -> PersonUpdateRequest:
        gender = None
        if self.gender:
            try:
                gender = GenderOptions(self.gender)
            except ValueError:
                gender = None
        return PersonUpdateRequest(
            person_id=self.person_id,
            person_name=self.person_name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            gender=gender,
            country_id=self.country_id,
            address=self.address,
            receive_news_letters=self.receive_news_letters,
            tin=self.tin,
        )
