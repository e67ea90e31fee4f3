"""
Person API endpoints (v1).

Example usage:
    GET /api/v1/persons?searchBy=Email&searchString=smith&sortBy=Age&sortOrder=DESC
    GET /api/v1/persons/3f2b1c1e-6d9e-4c4f-9f0e-0b8b2a7c5d11
"""

from flask import Blueprint, jsonify, request

from contacts.enums import SortOrderOptions
from contacts.schemas import PersonResponseSchema
from contacts.services import PersonField
from webapp.api.helpers import register_error_handlers, parse_uuid_or_404
from webapp.utils.services import persons_service

bp = Blueprint('api_persons', __name__)
register_error_handlers(bp)


@bp.route('', methods=['GET'])
def list_persons():
    """
    List persons, filtered and sorted the same way as the persons page.

    Query parameters:
        searchBy, searchString: Field tag and text to filter on
        sortBy: Field tag (default PersonName)
        sortOrder: ASC or DESC (default ASC)

    Returns:
        JSON with persons list and count
    """
    service = persons_service()
    persons = service.get_filtered_persons(request.args.get('searchBy'), request.args.get('searchString'))
    persons = service.get_sorted_persons(
        persons,
        request.args.get('sortBy', PersonField.PERSON_NAME.value),
        SortOrderOptions.parse(request.args.get('sortOrder')),
    )

    return jsonify({
        'persons': PersonResponseSchema(many=True).dump(persons),
        'count': len(persons),
    })


@bp.route('/<person_id>', methods=['GET'])
def get_person(person_id):
    """Single person by id; 404 if unknown or malformed."""
    parsed, error = parse_uuid_or_404(person_id, 'Person')
    if error:
        return error

    person = persons_service().get_person_by_person_id(parsed)
    if person is None:
        return jsonify({'error': f'Person {person_id} not found'}), 404

    return jsonify(PersonResponseSchema().dump(person))
