"""
Consistency Domain Events

Emitted by ``apps.core.cascade`` and published after the surrounding
transaction commits.
"""

from dataclasses import dataclass, field

from shared.domain.base import DomainEvent


@dataclass
class UserDeleted(DomainEvent):
    """
    Event: A user and everything tied to them was removed

    Carries the counts of purged dependents for the audit log.
    """
    deleted_by: int | None = None
    counts: dict = field(default_factory=dict)


@dataclass
class ListingDeleted(DomainEvent):
    counts: dict = field(default_factory=dict)


@dataclass
class ReviewDeleted(DomainEvent):
    listing_id: int | None = None


@dataclass
class ReservationDeleted(DomainEvent):
    listing_id: int | None = None


@dataclass
class ReservationCancelled(DomainEvent):
    """Event: A reservation was soft-deleted (status -> Cancelled)"""
    cancelled_by: int | None = None
    listing_id: int | None = None


@dataclass
class OrphansPurged(DomainEvent):
    counts: dict = field(default_factory=dict)
