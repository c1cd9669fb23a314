# common/exception_handler.py

"""
API EXCEPTION HANDLER

Wired through REST_FRAMEWORK["EXCEPTION_HANDLER"].

- ServiceError subclasses -> {"detail": ..., "field": ...} with their own status
- Everything else -> DRF default handling (serializer errors, auth, throttling, 404s)
"""

from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.exceptions import ServiceError, Unauthorized

logger = logging.getLogger(__name__)


def service_exception_handler(exc, context):
    if isinstance(exc, ServiceError):
        payload = {"detail": exc.message}
        if exc.field:
            payload["field"] = exc.field

        view = context.get("view")
        logger.info(
            "Service error in %s: %s (%s)",
            view.__class__.__name__ if view else "unknown view",
            exc.message,
            exc.__class__.__name__,
        )

        headers = {}
        if isinstance(exc, Unauthorized):
            headers["WWW-Authenticate"] = 'Bearer realm="api"'

        return Response(payload, status=exc.status_code, headers=headers)

    return exception_handler(exc, context)
