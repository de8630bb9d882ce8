import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


class InternalError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An unexpected error occurred."
    default_code = "internal_error"


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def ignite_exception_handler(exc, context):
    """
    Every error leaves the API as ``{"message": ...}``; field-level
    validation detail is kept under ``errors``.
    """
    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, DatabaseError):
            logger.exception("Datastore failure in %s", context.get("view").__class__.__name__)
            return Response(
                {"message": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return None

    detail = response.data
    if isinstance(detail, dict) and "detail" in detail:
        body = {"message": str(detail["detail"])}
    else:
        body = {"message": _first_message(detail)}
        if isinstance(detail, dict):
            body["errors"] = detail

    response.data = body
    return response
