"""
Country service: add, look up, and bulk import countries.

Usage:
    from contacts.services import CountriesService
    from contacts.dto import CountryAddRequest

    service = CountriesService(session)
    usa = service.add_country(CountryAddRequest(country_name='USA'))
"""

import logging
import uuid
from typing import BinaryIO, List, Optional, Union

from sqlalchemy.orm import Session

from contacts.dto import CountryAddRequest, CountryResponse
from contacts.exceptions import InvalidArgumentError
from contacts.manage import management_transaction
from contacts.repositories import CountriesRepository, CountriesRepositoryBase
from contacts.schemas import CountryAddRequestSchema, validate_request
from .export import read_country_names

logger = logging.getLogger(__name__)


class CountriesService:
    """Country operations over an injected session / repository."""

    def __init__(self, session: Session, repository: Optional[CountriesRepositoryBase] = None):
        self.session = session
        self.repository = repository or CountriesRepository(session)

    def add_country(self, country_add_request: Optional[CountryAddRequest]) -> CountryResponse:
        """
        Add a new country.

        Raises:
            InvalidArgumentError: If the request is None, the name is blank,
                or a country with exactly this name already exists
        """
        if country_add_request is None:
            raise InvalidArgumentError('Country add request is required')

        validate_request(CountryAddRequestSchema(), country_add_request)

        if self.repository.get_by_name(country_add_request.country_name) is not None:
            raise InvalidArgumentError('Given country name already exists', field='country_name')

        country = country_add_request.to_country()
        country.country_id = uuid.uuid4()

        with management_transaction(self.session, 'add country'):
            self.repository.add(country)

        logger.info("Added country %s (%s)", country.country_name, country.country_id)
        return CountryResponse.from_country(country)

    def get_all_countries(self) -> List[CountryResponse]:
        return [CountryResponse.from_country(c) for c in self.repository.get_all()]

    def get_country_by_country_id(self, country_id: Optional[uuid.UUID]) -> Optional[CountryResponse]:
        if country_id is None:
            return None

        country = self.repository.get_by_id(country_id)
        if country is None:
            return None
        return CountryResponse.from_country(country)

    def upload_countries_from_excel_file(self, source: Union[bytes, BinaryIO]) -> int:
        """
        Insert countries listed in the ``Countries`` worksheet.

        Names already stored, or repeated earlier in the file, are skipped.
        So are names that fail the same validation as ``add_country``
        (e.g. longer than 100 characters); each is logged as a warning.

        Args:
            source: .xlsx bytes or binary file object

        Returns:
            Number of countries inserted (0 if the worksheet is missing)

        Raises:
            UnreadableWorkbookError: If ``source`` is not an .xlsx workbook
        """
        names = read_country_names(source)
        if names is None:
            logger.warning("Uploaded workbook has no 'Countries' worksheet")
            return 0

        inserted = 0
        with management_transaction(self.session, 'import countries'):
            for name in names:
                request = CountryAddRequest(country_name=name)
                try:
                    validate_request(CountryAddRequestSchema(), request)
                except InvalidArgumentError as e:
                    logger.warning("Skipping country %r from workbook: %s", name, e.message)
                    continue
                if self.repository.get_by_name(name) is not None:
                    continue
                country = request.to_country()
                country.country_id = uuid.uuid4()
                self.repository.add(country)
                inserted += 1

        logger.info("Imported %d of %d countries from workbook", inserted, len(names))
        return inserted
