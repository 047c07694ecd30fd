"""
DRF glue for domain errors.

Domain services raise ``shared.domain.exceptions`` errors; views mix in
``DomainErrorMixin`` so those errors reach the client as regular DRF
error responses.
"""

from __future__ import annotations

import logging

from rest_framework import exceptions  # type: ignore

from shared.domain import exceptions as domain

logger = logging.getLogger(__name__)


def to_api_exception(exc: domain.DomainError) -> exceptions.APIException:
    """Map a domain error to the matching DRF exception."""
    if isinstance(exc, domain.Unauthorized):
        return exceptions.NotAuthenticated(exc.message)
    if isinstance(exc, domain.Forbidden):
        return exceptions.PermissionDenied(exc.message)
    if isinstance(exc, domain.NotFound):
        return exceptions.NotFound(exc.message)
    if isinstance(exc, (domain.InvalidData, domain.MissingId, domain.ReservationConflict)):
        return exceptions.ValidationError({"detail": exc.message})
    return exceptions.APIException(exc.message)


class DomainErrorMixin:
    """Translate domain errors raised inside a view into API errors."""

    def handle_exception(self, exc):  # type: ignore
        if isinstance(exc, domain.DomainError):
            logger.info("Domain error in %s: %s", type(self).__name__, exc)
            exc = to_api_exception(exc)
        return super().handle_exception(exc)
