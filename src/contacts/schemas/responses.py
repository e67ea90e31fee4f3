"""
Response schemas for API serialization.

Usage:
    from contacts.schemas import PersonResponseSchema

    persons_data = PersonResponseSchema(many=True).dump(persons)
"""

from marshmallow import fields

from . import BaseSchema


class CountryResponseSchema(BaseSchema):
    """Country identity and name."""
    country_id = fields.UUID(dump_only=True)
    country_name = fields.String(dump_only=True)


class PersonResponseSchema(BaseSchema):
    """
    Full person response, including derived fields.

    ``age`` and ``country`` are computed when the response object is built,
    so they are dumped as-is.
    """
    person_id = fields.UUID(dump_only=True)
    person_name = fields.String(dump_only=True)
    email = fields.String(dump_only=True)
    date_of_birth = fields.Date(dump_only=True)
    gender = fields.String(dump_only=True)
    country_id = fields.UUID(dump_only=True)
    country = fields.String(dump_only=True)
    address = fields.String(dump_only=True)
    receive_news_letters = fields.Boolean(dump_only=True)
    tin = fields.String(dump_only=True)
    age = fields.Integer(dump_only=True)
