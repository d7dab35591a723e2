# ======================================================================
# PATH: apps/core/exceptions.py
# ======================================================================
"""
Domain error taxonomy.

Services raise these; apps.api.common.exception_handler maps them to
`{"error": message}` responses. Plain Python, no DRF dependency.
"""
from __future__ import annotations


class DomainError(Exception):
    """
    Base for every expected, caller-facing failure.

    code:
      - validation_error
      - not_authenticated
      - forbidden
      - not_found
      - conflict
    """

    http_status = 400
    default_code = "error"

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.message = str(message)
        self.code = str(code or self.default_code)


class ValidationError(DomainError):
    """Missing or malformed request fields."""
    http_status = 400
    default_code = "validation_error"


class NotAuthenticatedError(DomainError):
    http_status = 401
    default_code = "not_authenticated"


class ForbiddenError(DomainError):
    """Role lacks permission, or the exam policy denies the attempt."""
    http_status = 403
    default_code = "forbidden"


class NotFoundError(DomainError):
    http_status = 404
    default_code = "not_found"


class ConflictError(DomainError):
    """Unique value already taken, or a restricted delete."""
    http_status = 409
    default_code = "conflict"
