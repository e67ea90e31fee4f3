"""
Marshmallow schemas for the contacts services.

This module provides the base schema infrastructure and exports all schema
classes: request schemas (validation + form/JSON loading) and response schemas
(API serialization).

Usage:
    from contacts.schemas import PersonAddRequestSchema, PersonResponseSchema

    # Load and validate a submitted form into a request object
    add_request = PersonAddRequestSchema().load(request.form)

    # Serialize service responses
    persons_data = PersonResponseSchema(many=True).dump(persons)
"""

from marshmallow import Schema, EXCLUDE


class BaseSchema(Schema):
    """
    Base schema class for all contacts schemas.

    Provides shared configuration:
    - unknown=EXCLUDE: ignore extra form fields (submit buttons, tokens)

    All request and response schemas should inherit from this class.
    """
    class Meta:
        unknown = EXCLUDE


# Import and export all schemas
from .requests import (
    CountryAddRequestSchema,
    PersonAddRequestSchema,
    PersonUpdateRequestSchema,
    validate_request,
)
from .responses import CountryResponseSchema, PersonResponseSchema

__all__ = [
    'BaseSchema',
    # Request schemas
    'CountryAddRequestSchema',
    'PersonAddRequestSchema',
    'PersonUpdateRequestSchema',
    'validate_request',
    # Response schemas
    'CountryResponseSchema',
    'PersonResponseSchema',
]
