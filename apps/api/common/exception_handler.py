# PATH: apps/api/common/exception_handler.py
# Single top-level handler: every error leaves the API as {"error": "..."}.
from __future__ import annotations

import logging

from django.db import IntegrityError
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.core.exceptions import DomainError

logger = logging.getLogger(__name__)


def _first_message(detail) -> str:
    """Walk DRF's nested error detail down to the first human message."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            msg = _first_message(value)
            if key in ("non_field_errors", "detail"):
                return msg
            return f"{key}: {msg}"
        return "Invalid request."
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request."
    return str(detail)


def api_exception_handler(exc, context):
    # --------------------------------------------------
    # 1) domain errors raised by services
    # --------------------------------------------------
    if isinstance(exc, DomainError):
        return Response({"error": exc.message}, status=exc.http_status)

    # --------------------------------------------------
    # 2) ORM integrity failures
    # --------------------------------------------------
    if isinstance(exc, (ProtectedError, RestrictedError)):
        return Response(
            {"error": "The record is still referenced by other records and cannot be deleted."},
            status=status.HTTP_409_CONFLICT,
        )
    if isinstance(exc, IntegrityError):
        logger.warning("IntegrityError mapped to 409: %s", exc)
        return Response(
            {"error": "The record already exists. Duplicate value."},
            status=status.HTTP_409_CONFLICT,
        )

    # --------------------------------------------------
    # 3) DRF / Django HTTP errors
    # --------------------------------------------------
    if isinstance(exc, Http404):
        return Response({"error": "Not found."}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, drf_exceptions.ValidationError):
        return Response(
            {"error": _first_message(exc.detail), "details": exc.detail},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = getattr(exc, "detail", None)
        response.data = {"error": _first_message(detail) if detail else str(exc)}
        return response

    # --------------------------------------------------
    # 4) unexpected
    # --------------------------------------------------
    view = context.get("view")
    logger.exception(
        "Unexpected error in %s: %s",
        view.__class__.__name__ if view else "?",
        exc,
    )
    return Response(
        {"error": "An unexpected server error occurred."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
