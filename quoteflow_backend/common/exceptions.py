# common/exceptions.py

"""
SERVICE ERRORS

Centralized domain errors raised by the service layers
(merchants, products, quotes, storefront).

Views never build error responses for these by hand:
common.exception_handler maps each kind to its HTTP status.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service-layer failures."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None, *, field: str | None = None):
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Malformed, missing or out-of-range input. `field` names the culprit when known."""

    status_code = 400
    default_message = "Invalid input"


class NotFound(ServiceError):
    """Resource absent, or not owned by the caller (the two are indistinguishable)."""

    status_code = 404
    default_message = "Not found"


class Unauthorized(ServiceError):
    """Missing, invalid or expired credential, or password mismatch."""

    status_code = 401
    default_message = "Invalid or expired token"


class Conflict(ServiceError):
    """Unique-constraint violation (duplicate email, taken store name)."""

    status_code = 409
    default_message = "Conflict"
