"""
Country API endpoints (v1).

Example usage:
    GET  /api/v1/countries
    POST /api/v1/countries   {"country_name": "Japan"}
"""

import logging

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from contacts.exceptions import InvalidArgumentError
from contacts.schemas import CountryAddRequestSchema, CountryResponseSchema
from webapp.api.helpers import register_error_handlers, error_response
from webapp.utils.services import countries_service

bp = Blueprint('api_countries', __name__)
register_error_handlers(bp)
logger = logging.getLogger(__name__)


@bp.route('', methods=['GET'])
def list_countries():
    countries = countries_service().get_all_countries()
    return jsonify({
        'countries': CountryResponseSchema(many=True).dump(countries),
        'count': len(countries),
    })


@bp.route('', methods=['POST'])
def add_country():
    """
    Add a country.

    Returns:
        201 with the stored country, or 400 with {'error', 'details'}
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return error_response('Request body must be a JSON object', 400)

    try:
        add_request = CountryAddRequestSchema().load(payload)
        country = countries_service().add_country(add_request)
    except ValidationError as err:
        return error_response('Validation failed', 400, code='INVALID_ARGUMENT', details=err.messages)
    except InvalidArgumentError as e:
        return error_response(e.message, 400, code='INVALID_ARGUMENT', details=e.errors)

    return jsonify(CountryResponseSchema().dump(country)), 201
