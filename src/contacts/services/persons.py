"""
Person service: validation, storage orchestration, listing and export.

Mutations validate first, then run inside ``management_transaction``. Reads
take a fresh snapshot from the repository and never mutate state.

Usage:
    from contacts.services import PersonsService
    from contacts.enums import SortOrderOptions

    service = PersonsService(session)
    persons = service.get_filtered_persons('Email', 'smith')
    persons = service.get_sorted_persons(persons, 'PersonName', SortOrderOptions.DESC)
"""

import io
import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from contacts.dto import PersonAddRequest, PersonResponse, PersonUpdateRequest
from contacts.enums import SortOrderOptions
from contacts.exceptions import InvalidArgumentError
from contacts.manage import management_transaction
from contacts.repositories import (
    CountriesRepository, CountriesRepositoryBase,
    PersonsRepository, PersonsRepositoryBase,
)
from contacts.schemas import PersonAddRequestSchema, PersonUpdateRequestSchema, validate_request
from .dispatch import filter_persons, sort_persons
from .export import persons_to_csv, persons_to_excel

logger = logging.getLogger(__name__)


class PersonsService:
    """Person operations over an injected session / repositories."""

    def __init__(self, session: Session,
                 repository: Optional[PersonsRepositoryBase] = None,
                 countries_repository: Optional[CountriesRepositoryBase] = None):
        self.session = session
        self.repository = repository or PersonsRepository(session)
        self.countries_repository = countries_repository or CountriesRepository(session)

    def _check_country_exists(self, country_id: Optional[uuid.UUID]) -> None:
        if country_id is not None and self.countries_repository.get_by_id(country_id) is None:
            raise InvalidArgumentError('Given country does not exist', field='country_id')

    # ------------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------------

    def add_person(self, person_add_request: Optional[PersonAddRequest]) -> PersonResponse:
        """
        Validate and store a new person.

        Raises:
            InvalidArgumentError: If the request is None, fails validation, or
                references a country that does not exist
        """
        if person_add_request is None:
            raise InvalidArgumentError('Person add request is required')

        validate_request(PersonAddRequestSchema(), person_add_request)
        self._check_country_exists(person_add_request.country_id)

        person = person_add_request.to_person()
        person.person_id = uuid.uuid4()

        with management_transaction(self.session, 'add person'):
            self.repository.add(person)

        logger.info("Added person %s", person.person_id)
        return PersonResponse.from_person(person)

    def update_person(self, person_update_request: Optional[PersonUpdateRequest]) -> PersonResponse:
        """
        Overwrite every mutable field of an existing person.

        Raises:
            InvalidArgumentError: If the request is None, fails validation,
                references a missing country, or no person has the given id
        """
        if person_update_request is None:
            raise InvalidArgumentError('Person update request is required')

        validate_request(PersonUpdateRequestSchema(), person_update_request)
        self._check_country_exists(person_update_request.country_id)

        with management_transaction(self.session, 'update person'):
            updated = self.repository.update(person_update_request.to_person())
            if updated is None:
                raise InvalidArgumentError('Given person id does not exist', field='person_id')

        logger.info("Updated person %s", updated.person_id)
        return PersonResponse.from_person(updated)

    def delete_person(self, person_id: Optional[uuid.UUID]) -> bool:
        """
        Hard-delete a person.

        Returns:
            True if a person was deleted, False if none had this id
        """
        if person_id is None:
            return False

        with management_transaction(self.session, 'delete person'):
            deleted = self.repository.delete(person_id)

        if deleted:
            logger.info("Deleted person %s", person_id)
        return deleted

    # ------------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------------

    def get_all_persons(self) -> List[PersonResponse]:
        return [PersonResponse.from_person(p) for p in self.repository.get_all()]

    def get_person_by_person_id(self, person_id: Optional[uuid.UUID]) -> Optional[PersonResponse]:
        if person_id is None:
            return None

        person = self.repository.get_by_id(person_id)
        if person is None:
            return None
        return PersonResponse.from_person(person)

    def get_filtered_persons(self, search_by: Optional[str],
                             search_string: Optional[str]) -> List[PersonResponse]:
        """All persons, narrowed by ``filter_persons`` on one field."""
        return filter_persons(self.get_all_persons(), search_by, search_string)

    def get_sorted_persons(self, all_persons: List[PersonResponse], sort_by: Optional[str],
                           sort_order=SortOrderOptions.ASC) -> List[PersonResponse]:
        """``all_persons`` ordered by ``sort_persons`` on one field."""
        return sort_persons(all_persons, sort_by, sort_order)

    # ------------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------------

    def get_persons_csv(self) -> io.BytesIO:
        return persons_to_csv(self.get_all_persons())

    def get_persons_excel(self, brief: bool = False) -> io.BytesIO:
        return persons_to_excel(self.get_all_persons(), brief=brief)
