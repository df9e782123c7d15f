"""
DRF exception handler that understands domain failures.

Domain services raise ``DomainError`` subclasses; this maps each kind to an
HTTP status so views can let them propagate.
"""

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import (
    CapacityExceeded,
    DomainError,
    InvalidDateRange,
    InvalidPricingInput,
    NotFound,
    ReservationLocked,
    SelfDeletionForbidden,
    Unauthorized,
)

STATUS_BY_ERROR = {
    NotFound: status.HTTP_404_NOT_FOUND,
    Unauthorized: status.HTTP_403_FORBIDDEN,
    ReservationLocked: status.HTTP_409_CONFLICT,
    SelfDeletionForbidden: status.HTTP_400_BAD_REQUEST,
    InvalidDateRange: status.HTTP_400_BAD_REQUEST,
    InvalidPricingInput: status.HTTP_400_BAD_REQUEST,
    CapacityExceeded: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: DomainError) -> int:
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=status_for(exc),
        )
    return exception_handler(exc, context)
