"""
Domain Exceptions

Typed failures raised by the domain services. They never carry HTTP
concerns; the API layer maps them to responses by ``code``.
"""


class DomainError(Exception):
    """Base class for all domain failures"""

    code = 'domain_error'
    default_message = 'Domain rule violated.'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidDateRange(DomainError, ValueError):
    """Check-out is not strictly after check-in"""

    code = 'invalid_date_range'
    default_message = 'Check-out date must be after check-in date.'


class InvalidPricingInput(DomainError, ValueError):
    """Negative amount or a percentage outside 0-100"""

    code = 'invalid_pricing_input'
    default_message = 'Pricing input is out of range.'


class NotFound(DomainError):
    code = 'not_found'
    default_message = 'Requested object does not exist.'


class SelfDeletionForbidden(DomainError):
    code = 'self_deletion_forbidden'
    default_message = 'Administrators cannot delete their own account.'


class ReservationLocked(DomainError):
    """Raised on any write to a cancelled reservation"""

    code = 'reservation_locked'
    default_message = 'Cancelled reservations cannot be modified.'


class Unauthorized(DomainError):
    code = 'unauthorized'
    default_message = 'You do not have permission to perform this action.'


class CapacityExceeded(DomainError):
    code = 'capacity_exceeded'
    default_message = 'Number of guests exceeds the listing capacity.'
