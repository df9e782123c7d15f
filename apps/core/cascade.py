"""
Cascade Consistency Manager

Keeps references between users, listings, reviews and reservations intact
when a parent is removed. Foreign keys between these models are declared
with ``DO_NOTHING`` and no database constraint, so nothing is cascaded
implicitly; every fan-out lives here, is named, and is called explicitly
by the API layer after it has authorized the request.

Ordering inside one cascade is fixed: the parent row goes first, then its
dependents. Each step is a delete-many over a set of ids, so running a
step again after an interruption only removes what is still there. The
steps run inside one ``DjangoUnitOfWork``; on backends without
multi-statement atomicity the idempotent purges (``purge_user_dependents``,
``purge_listing_dependents``, ``purge_orphans``) bring a partially cleaned
state to the same end state.

Callers get typed failures from ``shared.domain.exceptions``. Nothing in
this module logs; the audit trail is written by the event handlers in
``apps.core.handlers``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore

from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.reviews.models import Review
from shared.application.context import Actor
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import NotFound, ReservationLocked, SelfDeletionForbidden, Unauthorized

from .events import (
    ListingDeleted,
    OrphansPurged,
    ReservationCancelled,
    ReservationDeleted,
    ReviewDeleted,
    UserDeleted,
)


@dataclass
class CascadeResult:
    """Number of rows removed per entity"""
    users: int = 0
    listings: int = 0
    reviews: int = 0
    reservations: int = 0

    def merge(self, other: 'CascadeResult') -> 'CascadeResult':
        self.users += other.users
        self.listings += other.listings
        self.reviews += other.reviews
        self.reservations += other.reservations
        return self

    @property
    def total(self) -> int:
        return self.users + self.listings + self.reviews + self.reservations

    def as_dict(self) -> dict:
        return asdict(self)


def _pk(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise NotFound(f"Invalid identifier: {value!r}")


def _delete(queryset: QuerySet) -> int:
    """Delete-many returning the count for the queryset's own model only."""
    _, per_model = queryset.delete()
    return per_model.get(queryset.model._meta.label, 0)


def _existing_listing_ids():
    return Listing.objects.values("pk")


# ===== Dependent purges (idempotent) =====

def purge_listing_dependents(listing_id) -> CascadeResult:
    """Remove reviews and reservations that reference ``listing_id``."""
    listing_id = _pk(listing_id)
    return CascadeResult(
        reviews=_delete(Review.objects.filter(listing_id=listing_id)),
        reservations=_delete(Reservation.objects.filter(listing_id=listing_id)),
    )


def purge_user_dependents(user_id) -> CascadeResult:
    """
    Remove everything tied to ``user_id``

    Listings the user owns, then reviews and reservations that the user
    wrote/made or that sit on those listings. Reviews and reservations
    whose listing is already gone are swept too, which is what lets an
    interrupted run (listings removed, their dependents not yet) converge.
    """
    user_id = _pk(user_id)
    listing_ids = list(Listing.objects.filter(owner_id=user_id).values_list("pk", flat=True))

    result = CascadeResult()
    result.listings = _delete(Listing.objects.filter(pk__in=listing_ids))

    detached = ~Q(listing_id__in=_existing_listing_ids())
    result.reviews = _delete(
        Review.objects.filter(Q(author_id=user_id) | Q(listing_id__in=listing_ids) | detached)
    )
    result.reservations = _delete(
        Reservation.objects.filter(Q(guest_id=user_id) | Q(listing_id__in=listing_ids) | detached)
    )
    return result


# ===== Cascade operations =====

def delete_user(user_id, acting_admin_id) -> CascadeResult:
    """
    Delete a user and everything that depends on them

    Raises:
        SelfDeletionForbidden: the acting admin targets their own account
        NotFound: the user does not exist
    """
    user_id = _pk(user_id)
    if acting_admin_id is not None and user_id == _pk(acting_admin_id):
        raise SelfDeletionForbidden()

    User = get_user_model()
    with DjangoUnitOfWork() as uow:
        users = User.objects.filter(pk=user_id)
        if not users.exists():
            raise NotFound(f"User {user_id} not found")

        result = CascadeResult(users=_delete(users))
        result.merge(purge_user_dependents(user_id))

        uow.add_event(UserDeleted(
            aggregate_id=user_id,
            deleted_by=acting_admin_id,
            counts=result.as_dict(),
        ))
    return result


def delete_listing(listing_id) -> CascadeResult:
    """
    Delete a listing with its reviews and reservations

    Deleting a listing that is already gone is a no-op, apart from purging
    dependents an interrupted earlier run may have left behind.
    The caller checks that the actor owns the listing or is an admin.
    """
    listing_id = _pk(listing_id)
    with DjangoUnitOfWork() as uow:
        result = CascadeResult(listings=_delete(Listing.objects.filter(pk=listing_id)))
        result.merge(purge_listing_dependents(listing_id))

        if result.total:
            uow.add_event(ListingDeleted(aggregate_id=listing_id, counts=result.as_dict()))
    return result


def delete_review(review_id) -> CascadeResult:
    """Delete a review, detaching it from its listing. No further cascade."""
    review_id = _pk(review_id)
    with DjangoUnitOfWork() as uow:
        listing_id = Review.objects.filter(pk=review_id).values_list("listing_id", flat=True).first()
        if listing_id is None:
            raise NotFound(f"Review {review_id} not found")

        result = CascadeResult(reviews=_delete(Review.objects.filter(pk=review_id)))
        uow.add_event(ReviewDeleted(aggregate_id=review_id, listing_id=listing_id))
    return result


def delete_reservation(reservation_id) -> CascadeResult:
    """Delete a reservation, detaching it from its listing. No further cascade."""
    reservation_id = _pk(reservation_id)
    with DjangoUnitOfWork() as uow:
        listing_id = (
            Reservation.objects.filter(pk=reservation_id).values_list("listing_id", flat=True).first()
        )
        if listing_id is None:
            raise NotFound(f"Reservation {reservation_id} not found")

        result = CascadeResult(reservations=_delete(Reservation.objects.filter(pk=reservation_id)))
        uow.add_event(ReservationDeleted(aggregate_id=reservation_id, listing_id=listing_id))
    return result


def cancel_reservation(reservation_id, actor: Actor) -> Reservation:
    """
    Soft-delete a reservation: status becomes Cancelled and stays so

    Raises:
        NotFound: no such reservation
        Unauthorized: actor is neither the guest nor an admin
        ReservationLocked: the reservation is already cancelled
    """
    reservation_id = _pk(reservation_id)
    with DjangoUnitOfWork() as uow:
        try:
            reservation = Reservation.objects.select_for_update().get(pk=reservation_id)
        except Reservation.DoesNotExist:
            raise NotFound(f"Reservation {reservation_id} not found")

        if not actor.may_manage(reservation.guest_id):
            raise Unauthorized()
        if reservation.is_cancelled:
            raise ReservationLocked()

        reservation.mark_cancelled()
        uow.add_event(ReservationCancelled(
            aggregate_id=reservation.pk,
            cancelled_by=actor.user_id,
            listing_id=reservation.listing_id,
        ))
    return reservation


def purge_orphans() -> CascadeResult:
    """
    Sweep every dangling reference

    Listings whose owner is gone, then reviews and reservations whose
    listing, author or guest is gone. Safe to run at any time.
    """
    User = get_user_model()
    existing_users = User.objects.values("pk")

    with DjangoUnitOfWork() as uow:
        result = CascadeResult(
            listings=_delete(Listing.objects.exclude(owner_id__in=existing_users)),
        )
        result.reviews = _delete(
            Review.objects.filter(
                ~Q(listing_id__in=_existing_listing_ids()) | ~Q(author_id__in=existing_users)
            )
        )
        result.reservations = _delete(
            Reservation.objects.filter(
                ~Q(listing_id__in=_existing_listing_ids()) | ~Q(guest_id__in=existing_users)
            )
        )
        if result.total:
            uow.add_event(OrphansPurged(counts=result.as_dict()))
    return result
