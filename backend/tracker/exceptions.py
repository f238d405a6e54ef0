"""
Custom exception handler for consistent API error responses.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

# Markers found in the driver's error text (constraint name on PostgreSQL,
# column list on SQLite) -> field and message shown to the caller
UNIQUE_CONSTRAINT_MESSAGES = [
    (
        ('unique_section_name_per_template', 'tracker_resumesection.template_id, tracker_resumesection.name'),
        'name',
        'A section with this name already exists in this template.',
    ),
]


class NotFoundError(drf_exceptions.NotFound):
    default_code = 'not_found'

    def __init__(self, label='Resource', detail=None):
        super().__init__(detail or f"{label} not found.")


class StoreError(drf_exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An unexpected error occurred. Please try again later.'
    default_code = 'internal_server_error'


def _collect_messages(data):
    """Build a list of human-readable messages from DRF error data."""
    messages = []
    if isinstance(data, dict):
        if 'detail' in data and not isinstance(data['detail'], (dict, list)):
            messages.append(str(data['detail']))
        for field, value in data.items():
            if field == 'detail':
                continue
            msg = str(value[0]) if isinstance(value, (list, tuple)) and value else str(value)
            if field == 'non_field_errors':
                messages.append(msg)
            else:
                messages.append(f"{field}: {msg}")
    elif isinstance(data, (list, tuple)):
        messages.extend(str(v) for v in data if v)
    elif data:
        messages.append(str(data))
    return messages


def _translate(exc):
    """Map Django/database exceptions onto the DRF taxonomy. Returns None if unknown."""
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, 'error_dict'):
            return drf_exceptions.ValidationError(exc.message_dict)
        return drf_exceptions.ValidationError({'non_field_errors': exc.messages})
    if isinstance(exc, IntegrityError):
        text = str(exc)
        for markers, field, message in UNIQUE_CONSTRAINT_MESSAGES:
            if any(marker in text for marker in markers):
                return drf_exceptions.ValidationError({field: [message]}, code='unique')
        logger.error("Unclassified integrity error: %s", exc, exc_info=True)
        return StoreError()
    if isinstance(exc, DatabaseError):
        logger.error("Database error: %s", exc, exc_info=True)
        return StoreError()
    return None


def custom_exception_handler(exc, context):
    """
    Render every error as::

        {
            "error": {
                "code": "validation_error",
                "message": "First human-readable message",
                "messages": [...],
                "details": {...}  # field -> first error
            }
        }
    """
    exc = _translate(exc) or exc
    view = context.get('view') if isinstance(context, dict) else None
    response = exception_handler(exc, context)

    if response is None:
        logger.error("Unhandled exception in %s: %s", getattr(view, '__name__', view), exc, exc_info=True)
        set_rollback()
        return Response(
            {
                'error': {
                    'code': 'internal_server_error',
                    'message': StoreError.default_detail,
                }
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, drf_exceptions.ValidationError):
        code = 'validation_error'
        logger.debug("Validation failed: %s", response.data)
    else:
        code = getattr(exc, 'default_code', None) or 'error'

    messages = _collect_messages(response.data)
    body = {
        'code': code,
        'message': messages[0] if messages else 'An error occurred',
    }
    if messages:
        body['messages'] = messages
    if isinstance(response.data, dict):
        details = {}
        for field, errors in response.data.items():
            if field == 'detail':
                continue
            if isinstance(errors, list):
                details[field] = str(errors[0]) if errors else 'Invalid value'
            else:
                details[field] = errors if isinstance(errors, dict) else str(errors)
        if details:
            body['details'] = details
    response.data = {'error': body}
    return response
