"""
Request schemas: one explicit rule set per request type.

Each schema both validates an already-built request object (service side,
via ``validate_request``) and loads raw form/JSON input into a request object
(presentation side, via ``Schema.load``).

Usage:
    from contacts.schemas import PersonAddRequestSchema, validate_request

    validate_request(PersonAddRequestSchema(), add_request)   # raises InvalidArgumentError
    add_request = PersonAddRequestSchema().load(form_data)    # raises ValidationError
"""

import dataclasses
import uuid
from datetime import date
from enum import Enum

from marshmallow import fields, validate, pre_load, post_load, ValidationError

from . import BaseSchema
from contacts.dto import CountryAddRequest, PersonAddRequest, PersonUpdateRequest
from contacts.enums import GenderOptions
from contacts.exceptions import InvalidArgumentError


def _not_blank(message):
    def validator(value):
        if value is None or not str(value).strip():
            raise ValidationError(message)
    return validator


def _blank_messages(message):
    return {'required': message, 'null': message}


# ============================================================================
# Countries
# ============================================================================

class CountryAddRequestSchema(BaseSchema):
    """Rules for adding a country."""
    country_name = fields.String(
        required=True,
        error_messages=_blank_messages("Country Name can't be blank"),
        validate=[
            _not_blank("Country Name can't be blank"),
            validate.Length(max=100, error='Country Name can be at most {max} characters'),
        ],
    )

    @pre_load
    def drop_blank_values(self, data, **kwargs):
        return {k: v for k, v in data.items() if v != ''}

    @post_load
    def make_request(self, data, **kwargs):
        return CountryAddRequest(**data)


# ============================================================================
# Persons
# ============================================================================

class PersonAddRequestSchema(BaseSchema):
    """Rules for adding a person."""
    person_name = fields.String(
        required=True,
        error_messages=_blank_messages("Person Name can't be blank"),
        validate=[
            _not_blank("Person Name can't be blank"),
            validate.Length(max=40, error='Person Name can be at most {max} characters'),
        ],
    )
    email = fields.Email(
        required=True,
        error_messages={
            **_blank_messages("Email can't be blank"),
            'invalid': 'Email value should be a valid email',
        },
        validate=validate.Length(max=40, error='Email can be at most {max} characters'),
    )
    date_of_birth = fields.Date(allow_none=True, load_default=None,
                                error_messages={'invalid': 'Date of Birth should be a valid date'})
    gender = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.OneOf(
            [g.value for g in GenderOptions],
            error='Gender should be one of: {choices}',
        ),
    )
    country_id = fields.UUID(allow_none=True, load_default=None,
                             error_messages={'invalid_uuid': 'Please select a valid country'})
    address = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.Length(max=200, error='Address can be at most {max} characters'),
    )
    receive_news_letters = fields.Boolean(load_default=False)
    tin = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.Length(max=11, error='TIN can be at most {max} characters'),
    )

    request_class = PersonAddRequest

    @pre_load
    def drop_blank_values(self, data, **kwargs):
        """Empty form inputs mean 'not supplied', so defaults and required rules apply."""
        return {k: v for k, v in data.items() if v != ''}

    @post_load
    def make_request(self, data, **kwargs):
        if data.get('gender') is not None:
            data['gender'] = GenderOptions(data['gender'])
        return self.request_class(**data)


class PersonUpdateRequestSchema(PersonAddRequestSchema):
    """Rules for updating a person: the add rules plus a required identity."""
    person_id = fields.UUID(
        required=True,
        error_messages={
            **_blank_messages("Person ID can't be blank"),
            'invalid_uuid': 'Person ID should be a valid identifier',
        },
    )

    request_class = PersonUpdateRequest


# ============================================================================
# Service-side validation
# ============================================================================

def _primitive(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


def validate_request(schema: BaseSchema, request_object) -> None:
    """
    Validate a request object against its schema.

    All violations are collected; the first one names the error.

    Args:
        schema: Request schema instance
        request_object: Dataclass request object

    Raises:
        InvalidArgumentError: If any rule is violated
    """
    data = {k: _primitive(v) for k, v in dataclasses.asdict(request_object).items()}
    errors = schema.validate(data)
    if errors:
        raise InvalidArgumentError.from_validation_errors(errors)
