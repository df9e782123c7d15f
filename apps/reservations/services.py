"""Domain services for reservation writes.

Every write path prices the stay through ``apps.reservations.pricing``;
a total submitted by the client never reaches the database.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from shared.application.context import Actor
from shared.application.field_policy import RESERVATION_ADMIN_FIELDS, strip_admin_only_fields
from shared.domain.exceptions import CapacityExceeded, NotFound, ReservationLocked, Unauthorized

from .models import Reservation
from .pricing import quote_for_listing

EDITABLE_FIELDS = frozenset({"check_in", "check_out", "adults", "children"}) | RESERVATION_ADMIN_FIELDS
REPRICE_FIELDS = frozenset({"check_in", "check_out"})


def _ensure_capacity(listing, adults: int, children: int) -> None:
    if adults + children > listing.guests:
        raise CapacityExceeded(
            f"This place hosts at most {listing.guests} guests, {adults + children} requested."
        )


@transaction.atomic
def create_reservation(
    listing,
    guest,
    check_in: date,
    check_out: date,
    adults: int = 1,
    children: int = 0,
) -> Reservation:
    """Create a Pending reservation priced from the listing's current rate."""
    quote = quote_for_listing(listing, check_in, check_out)
    _ensure_capacity(listing, adults, children)

    reservation = Reservation(
        guest=guest,
        listing=listing,
        check_in=check_in,
        check_out=check_out,
        adults=adults,
        children=children,
    )
    reservation.apply_quote(quote)
    reservation.save()
    return reservation


def _load_for_update(reservation_id) -> Reservation:
    try:
        return (
            Reservation.objects.select_for_update()
            .select_related("listing")
            .get(pk=reservation_id)
        )
    except (Reservation.DoesNotExist, ValueError, TypeError):
        raise NotFound(f"Reservation {reservation_id} not found")


@transaction.atomic
def update_reservation(reservation_id, actor: Actor, changes: Mapping[str, Any]) -> Reservation:
    """
    Edit a reservation on behalf of its guest or an administrator.

    Admin-only fields are dropped for everyone else. Changing the dates
    re-prices the stay at the listing's current rate.

    Raises:
        NotFound, Unauthorized, ReservationLocked, InvalidDateRange, CapacityExceeded
    """
    reservation = _load_for_update(reservation_id)

    if not actor.may_manage(reservation.guest_id):
        raise Unauthorized()
    if reservation.is_cancelled:
        raise ReservationLocked()

    allowed = strip_admin_only_fields(changes, actor, RESERVATION_ADMIN_FIELDS)
    updates = {name: value for name, value in allowed.items() if name in EDITABLE_FIELDS}
    if not updates:
        return reservation

    for name, value in updates.items():
        setattr(reservation, name, value)

    _ensure_capacity(reservation.listing, reservation.adults, reservation.children)
    if REPRICE_FIELDS & updates.keys():
        reservation.apply_quote(
            quote_for_listing(reservation.listing, reservation.check_in, reservation.check_out)
        )
    if reservation.is_cancelled:
        reservation.cancelled_at = timezone.now()

    reservation.save()
    return reservation


@transaction.atomic
def set_reservation_status(reservation_id, status: str) -> Reservation:
    """Administrative status transition; Cancelled is terminal."""
    if status not in Reservation.Status.values:
        raise ValueError(f"Unknown reservation status: {status!r}")
    reservation = _load_for_update(reservation_id)
    if reservation.is_cancelled:
        raise ReservationLocked()
    if status == Reservation.Status.CANCELLED:
        reservation.mark_cancelled()
        return reservation
    reservation.status = status
    reservation.save(update_fields=["status", "updated_at"])
    return reservation
