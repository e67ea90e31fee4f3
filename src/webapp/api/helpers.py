"""
API helper utilities for common patterns.

This module provides reusable helpers for:
- Error handler registration
- UUID path/query parsing with 404 handling
- Standard error responses
"""

import uuid
from flask import jsonify
from typing import Optional, Tuple, Any, Dict


def register_error_handlers(blueprint):
    """
    Register standard API error handlers on a blueprint.

    Provides consistent JSON error responses for common HTTP error codes.

    Usage:
        from webapp.api.helpers import register_error_handlers
        bp = Blueprint('api_name', __name__)
        register_error_handlers(bp)
    """

    @blueprint.errorhandler(400)
    def bad_request(e):
        return jsonify({'error': str(e.description) if hasattr(e, 'description') else 'Bad request'}), 400

    @blueprint.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Resource not found'}), 404

    @blueprint.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405


def parse_uuid_or_404(value: str, label: str) -> Tuple[Optional[uuid.UUID], Optional[Tuple[Any, int]]]:
    """
    Parse an identifier from the URL, returning a 404 error if it is malformed.

    Args:
        value: Raw identifier text
        label: Resource name used in the error message

    Returns:
        tuple: (uuid, error_response)
        If error_response is not None, return it immediately from your endpoint.

    Usage:
        person_id, error = parse_uuid_or_404(raw_id, 'Person')
        if error:
            return error
    """
    try:
        return uuid.UUID(value), None
    except (ValueError, TypeError):
        return None, (jsonify({'error': f'{label} {value} not found'}), 404)


def error_response(
    message: str,
    status_code: int = 400,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Tuple[Any, int]:
    """
    Create a standard error response wrapper.

    Args:
        message: Human-readable error message
        status_code: HTTP status code (default: 400)
        code: Machine-readable error code (e.g., 'NOT_FOUND', 'INVALID_ARGUMENT')
        details: Additional error details dict

    Returns:
        tuple: (JSON response, status code)

    Usage:
        return error_response('Validation failed', 400, details={'email': ['...']})
        # Returns: {'error': 'Validation failed', 'details': {...}}
    """
    response = {'error': message}
    if code:
        response['code'] = code
    if details:
        response['details'] = details
    return jsonify(response), status_code
