"""
Exceptions raised by the contacts service layer.
"""
from typing import Dict, List, Optional


class InvalidArgumentError(ValueError):
    """
    A request was absent, failed validation, or referenced a record that does
    not exist.

    Attributes:
        errors: Mapping of field name to list of messages (may be empty)
        field: First offending field, or None for whole-request errors
        message: First human-readable message
    """

    def __init__(self, message: str, field: Optional[str] = None,
                 errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or ({field: [message]} if field else {})

    @classmethod
    def from_validation_errors(cls, errors: Dict[str, List[str]]) -> 'InvalidArgumentError':
        """Build from a marshmallow ``{field: [messages]}`` mapping; the first field wins."""
        field = next(iter(errors))
        messages = errors[field]
        message = messages[0] if isinstance(messages, list) else str(messages)
        return cls(message, field=field, errors=errors)


class UnreadableWorkbookError(ValueError):
    """Uploaded bytes are not an .xlsx workbook openpyxl can open."""
