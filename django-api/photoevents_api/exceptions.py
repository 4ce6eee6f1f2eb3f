"""Translate errors into JSON responses at the request boundary.

Domain errors become ``{"msg", "code"}`` payloads with a status chosen by
their code. Serializer validation errors keep DRF's field-error shape.
Anything unexpected is logged and returned as a generic 500.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from accounts.domain.errors import MissingTokenError
from photoevents_api.errors import DomainError

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "MISSING_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "MALFORMED_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NO_DELETABLE_PHOTOS": status.HTTP_404_NOT_FOUND,
}


def api_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        status_code = _STATUS_BY_CODE.get(exc.code.value, status.HTTP_400_BAD_REQUEST)
        return Response({"msg": exc.message, "code": exc.code.value}, status=status_code)

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            f"Unhandled error in {type(view).__name__ if view else 'unknown view'}",
            exc_info=exc,
        )
        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        return response

    if isinstance(exc, exceptions.NotAuthenticated):
        logger.warning("Rejected request: no bearer token")
        missing = MissingTokenError()
        response.data = {"msg": missing.message, "code": missing.code.value}
    elif isinstance(response.data, dict) and isinstance(response.data.get("detail"), str):
        detail = response.data["detail"]
        code = getattr(detail, "code", None) or "error"
        response.data = {"msg": str(detail), "code": code.upper()}
    return response
