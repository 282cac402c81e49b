"""
Custom exception handlers for DRF.

Every failure leaves the API in the same envelope:
``{"success": false, "error": {"code": ..., "message": ...}}``.
"""
import logging

from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    UnauthorizedError,
    ResourceUnavailableError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(code: str, message: str, status_code: int) -> Response:
    """Build an error envelope response."""
    return Response(
        {
            'success': False,
            'error': {
                'code': code,
                'message': message,
            },
        },
        status=status_code,
    )


def _first_message(detail) -> str:
    """Pick the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            if key in ('non_field_errors', 'detail'):
                return message
            return f"{key}: {message}"
        return "Invalid input"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid input"
    return str(detail)


def _handle_domain_exception(exc: DomainException) -> Response:
    if isinstance(exc, ValidationError):
        return error_response(exc.code, exc.message, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, UnauthorizedError):
        return error_response(exc.code, exc.message, status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, EntityNotFoundError):
        return error_response(exc.code, exc.message, status.HTTP_404_NOT_FOUND)

    if isinstance(exc, ResourceUnavailableError):
        logger.warning(f"Unavailable resource: {exc.message}")
        return error_response(exc.code, exc.message, status.HTTP_400_BAD_REQUEST)

    return error_response(exc.code, exc.message, status.HTTP_400_BAD_REQUEST)


def custom_exception_handler(exc, context):
    """Handle domain and framework exceptions with a single response shape."""
    if isinstance(exc, DomainException):
        set_rollback()
        return _handle_domain_exception(exc)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, (drf_exceptions.ValidationError, drf_exceptions.ParseError)):
            code = "VALIDATION_ERROR"
        elif isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
            code = "UNAUTHORIZED"
        elif isinstance(exc, drf_exceptions.NotFound):
            code = "NOT_FOUND"
        else:
            code = str(exc.default_code).upper()
        return error_response(code, _first_message(exc.detail), response.status_code)

    view = context.get('view')
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
    )
    set_rollback()
    return error_response(
        "INTERNAL_ERROR",
        INTERNAL_ERROR_MESSAGE,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
