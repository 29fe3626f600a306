"""Map domain error kinds onto DRF responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import (
    NotFoundError,
    StaleResponseError,
    TransientFetchError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):  # type: ignore
    """Translate domain errors, defer everything else to DRF."""

    if isinstance(exc, ValidationError):
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, NotFoundError):
        return Response(
            {"detail": str(exc), "kind": "not_found", "resource": exc.resource},
            status=status.HTTP_404_NOT_FOUND,
        )
    if isinstance(exc, (TransientFetchError, StaleResponseError)):
        logger.warning("Degraded response for %s: %s", context.get("view"), exc)
        return Response({"detail": str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    return exception_handler(exc, context)
