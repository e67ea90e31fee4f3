"""
Request / response schemas.

Tests:
- Loading raw form / JSON input into request objects
- Service-side validation of already-built request objects
- Response serialization
"""

import uuid
from datetime import date

import pytest
from marshmallow import ValidationError

from contacts.dto import CountryAddRequest, CountryResponse, PersonAddRequest, PersonResponse, PersonUpdateRequest
from contacts.enums import GenderOptions
from contacts.exceptions import InvalidArgumentError
from contacts.schemas import (
    CountryAddRequestSchema, PersonAddRequestSchema, PersonUpdateRequestSchema,
    CountryResponseSchema, PersonResponseSchema, validate_request,
)


class TestPersonAddRequestSchema:

    def test_load_form_data(self):
        country_id = uuid.uuid4()
        request = PersonAddRequestSchema().load({
            'person_name': 'Mary',
            'email': 'mary@example.com',
            'date_of_birth': '2002-05-06',
            'gender': 'Female',
            'country_id': str(country_id),
            'address': '',
            'receive_news_letters': 'true',
            'tin': '',
        })

        assert isinstance(request, PersonAddRequest)
        assert request.date_of_birth == date(2002, 5, 6)
        assert request.gender is GenderOptions.FEMALE
        assert request.country_id == country_id
        assert request.address is None
        assert request.tin is None
        assert request.receive_news_letters is True

    def test_blank_inputs_are_missing(self):
        """Empty strings count as not supplied, so required rules apply."""
        with pytest.raises(ValidationError) as exc_info:
            PersonAddRequestSchema().load({'person_name': '', 'email': ''})

        assert exc_info.value.messages['person_name'] == ["Person Name can't be blank"]
        assert exc_info.value.messages['email'] == ["Email can't be blank"]

    def test_newsletter_defaults_false(self):
        request = PersonAddRequestSchema().load({'person_name': 'A', 'email': 'a@example.com'})
        assert request.receive_news_letters is False

    def test_invalid_gender(self):
        with pytest.raises(ValidationError) as exc_info:
            PersonAddRequestSchema().load({'person_name': 'A', 'email': 'a@example.com', 'gender': 'Robot'})
        assert 'gender' in exc_info.value.messages

    def test_invalid_country_id(self):
        with pytest.raises(ValidationError) as exc_info:
            PersonAddRequestSchema().load({'person_name': 'A', 'email': 'a@example.com', 'country_id': 'nope'})
        assert exc_info.value.messages['country_id'] == ['Please select a valid country']

    def test_unknown_keys_ignored(self):
        request = PersonAddRequestSchema().load({'person_name': 'A', 'email': 'a@example.com', 'csrf': 'x'})
        assert request.person_name == 'A'

    def test_update_schema_requires_person_id(self):
        with pytest.raises(ValidationError) as exc_info:
            PersonUpdateRequestSchema().load({'person_name': 'A', 'email': 'a@example.com'})
        assert 'person_id' in exc_info.value.messages

    def test_update_schema_builds_update_request(self):
        person_id = uuid.uuid4()
        request = PersonUpdateRequestSchema().load({
            'person_id': str(person_id), 'person_name': 'A', 'email': 'a@example.com'})

        assert isinstance(request, PersonUpdateRequest)
        assert request.person_id == person_id


class TestValidateRequest:

    def test_valid_request_passes(self):
        validate_request(PersonAddRequestSchema(), PersonAddRequest(
            person_name='Mary', email='mary@example.com', gender=GenderOptions.FEMALE,
            date_of_birth=date(2002, 5, 6), country_id=uuid.uuid4()))

    def test_first_error_names_the_field(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_request(PersonAddRequestSchema(), PersonAddRequest(email='bad'))

        error = exc_info.value
        assert error.field in ('person_name', 'email')
        assert set(error.errors) == {'person_name', 'email'}
        assert error.message in error.errors[error.field]

    def test_tin_length(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_request(PersonAddRequestSchema(), PersonAddRequest(
                person_name='A', email='a@example.com', tin='1' * 12))
        assert exc_info.value.field == 'tin'

    def test_country_request(self):
        validate_request(CountryAddRequestSchema(), CountryAddRequest(country_name='USA'))
        with pytest.raises(InvalidArgumentError):
            validate_request(CountryAddRequestSchema(), CountryAddRequest(country_name='x' * 101))


class TestResponseSchemas:

    def test_person_response_dump(self):
        person_id, country_id = uuid.uuid4(), uuid.uuid4()
        response = PersonResponse(
            person_id=person_id, person_name='Mary', email='mary@example.com',
            date_of_birth=date(2002, 5, 6), gender='Female', country_id=country_id,
            country='USA', receive_news_letters=True, age=24)

        result = PersonResponseSchema().dump(response)

        assert result['person_id'] == str(person_id)
        assert result['country_id'] == str(country_id)
        assert result['date_of_birth'] == '2002-05-06'
        assert result['country'] == 'USA'
        assert result['age'] == 24
        assert result['receive_news_letters'] is True
        assert result['address'] is None

    def test_country_response_dump(self):
        country_id = uuid.uuid4()
        result = CountryResponseSchema().dump(CountryResponse(country_id=country_id, country_name='USA'))
        assert result == {'country_id': str(country_id), 'country_name': 'USA'}


class TestResponseConversion:

    def test_to_person_update_request(self):
        response = PersonResponse(person_id=uuid.uuid4(), person_name='Mary', email='m@example.com',
                                  gender='Female', tin='1')
        update = response.to_person_update_request()

        assert update.person_id == response.person_id
        assert update.gender is GenderOptions.FEMALE
        assert update.tin == '1'

    def test_unknown_stored_gender_is_dropped(self):
        response = PersonResponse(person_id=uuid.uuid4(), person_name='A', gender='unknown')
        assert response.to_person_update_request().gender is None
