# api/exceptions.py
from rest_framework.views import exception_handler
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError
import functools
import logging
from django.conf import settings

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """Business rule failure the client can act on (missing restaurant, item not in cart...)."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Request conflicts with the current state."
    default_code = "conflict"


class InternalServerError(APIException):
    """Unexpected failure. The original error is only logged server side."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Something went wrong, please try again later."
    default_code = "internal_error"


def database_errors(message):
    """
    Service method decorator: a DatabaseError is logged and surfaced as a 500
    carrying `message`. APIExceptions raised by the method pass through.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DatabaseError:
                logger.exception(f"{func.__qualname__} failed")
                raise InternalServerError(message)
        return wrapper
    return decorator


MESSAGES = {
    400: "Validation error",
    401: "Authentication required",
    403: "Permission denied",
    404: "Resource not found",
    409: "Conflict",
    500: "Internal server error",
}


def _message_for(response, exc):
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str):
        return str(detail)
    return MESSAGES.get(response.status_code, "An error occurred")


def fresh_exception_handler(exc, context):
    """
    Render every error as {"error", "message", "details", "status_code"}
    """
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        response.data = {
            "error": True,
            "message": _message_for(response, exc),
            "details": response.data,
            "status_code": response.status_code,
        }

    # Handle Django ValidationError
    elif isinstance(exc, ValidationError):
        logger.error(f"Validation Error: {exc}")
        response = Response({
            "error": True,
            "message": "Validation error",
            "details": {"non_field_errors": exc.messages},
            "status_code": 400,
        }, status=status.HTTP_400_BAD_REQUEST)

    # Handle Django IntegrityError
    elif isinstance(exc, IntegrityError):
        logger.error(f"Integrity Error: {exc}")
        response = Response({
            "error": True,
            "message": "Conflict",
            "details": {"detail": "This operation violates database constraints"},
            "status_code": 409,
        }, status=status.HTTP_409_CONFLICT)

    # Handle unexpected errors
    else:
        logger.exception("Unexpected Error", exc_info=exc)
        response = Response({
            "error": True,
            "message": "Something went wrong, please try again later.",
            "details": {"detail": str(exc)} if settings.DEBUG else {},
            "status_code": 500,
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return response
