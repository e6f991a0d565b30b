"""Error types and the DRF exception handler that renders them as `{"error": ...}`."""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """A store-level constraint rejected the change (duplicate or dependent rows)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "The request conflicts with existing records."
    default_code = "conflict"


def error_message(detail) -> str:
    """Flatten DRF error detail (str, list or dict) into one readable sentence."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return error_message(detail["detail"])
        if not detail:
            return "Invalid request"
        field, value = next(iter(detail.items()))
        message = error_message(value)
        return message if field == "non_field_errors" else f"{field}: {message}"
    if isinstance(detail, (list, tuple)):
        return error_message(detail[0]) if detail else "Invalid request"
    return str(detail)


def blog_exception_handler(exc, context):
    """Map every API failure to a single `{"error": message}` JSON body."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s: %s",
            view.__class__.__name__ if view is not None else "api view",
            exc,
            exc_info=exc,
        )
        body = {"error": "Internal server error"}
        if settings.DEBUG:
            body["details"] = str(exc)
        return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.data = {"error": error_message(response.data)}
    return response
