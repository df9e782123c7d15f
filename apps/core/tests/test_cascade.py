"""Tests for the cascade consistency service."""

import pytest

from apps.core.cascade import (
    CascadeResult,
    cancel_reservation,
    delete_listing,
    delete_reservation,
    delete_review,
    delete_user,
    purge_orphans,
    purge_user_dependents,
)
from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.reviews.models import Review
from apps.users.models import User
from shared.application.context import Actor
from shared.domain.exceptions import NotFound, ReservationLocked, SelfDeletionForbidden, Unauthorized

from .conftest import make_listing, make_reservation, make_review

pytestmark = pytest.mark.django_db


def _counts():
    return (
        User.objects.count(),
        Listing.objects.count(),
        Review.objects.count(),
        Reservation.objects.count(),
    )


def test_delete_user_removes_owned_and_authored_rows(world, admin, alice, bob):
    _, _, third = world["listings"]

    result = delete_user(alice.pk, acting_admin_id=admin.pk)

    assert result.as_dict() == {"users": 1, "listings": 2, "reviews": 2, "reservations": 2}
    assert not User.objects.filter(pk=alice.pk).exists()
    assert list(Listing.objects.values_list("pk", flat=True)) == [third.pk]
    assert list(Review.objects.values_list("author_id", "listing_id")) == [(bob.pk, third.pk)]
    assert list(Reservation.objects.values_list("guest_id", "listing_id")) == [(bob.pk, third.pk)]


def test_delete_user_refuses_self_deletion(world, admin):
    before = _counts()

    with pytest.raises(SelfDeletionForbidden):
        delete_user(admin.pk, acting_admin_id=admin.pk)

    assert _counts() == before


def test_delete_user_missing(world, admin):
    with pytest.raises(NotFound):
        delete_user(987654, acting_admin_id=admin.pk)


def test_interrupted_user_delete_converges(world, alice):
    first, _, _ = world["listings"]
    # Simulate a run that stopped after the user and one listing were removed
    User.objects.filter(pk=alice.pk).delete()
    Listing.objects.filter(pk=first.pk).delete()

    result = purge_user_dependents(alice.pk)

    assert result.as_dict() == {"users": 0, "listings": 1, "reviews": 2, "reservations": 2}
    assert purge_user_dependents(alice.pk).total == 0
    assert purge_orphans().total == 0


def test_delete_listing_is_idempotent(world):
    first, second, third = world["listings"]

    result = delete_listing(first.pk)
    assert result.as_dict() == {"users": 0, "listings": 1, "reviews": 1, "reservations": 1}

    again = delete_listing(first.pk)
    assert again.total == 0
    assert set(Listing.objects.values_list("pk", flat=True)) == {second.pk, third.pk}
    assert Review.objects.count() == 2
    assert Reservation.objects.count() == 2


def test_delete_review_and_reservation_do_not_touch_listing(world):
    first, _, _ = world["listings"]
    review = world["reviews"][0]
    reservation = world["reservations"][0]

    assert delete_review(review.pk).reviews == 1
    assert delete_reservation(reservation.pk).reservations == 1
    assert Listing.objects.filter(pk=first.pk).exists()

    with pytest.raises(NotFound):
        delete_review(review.pk)
    with pytest.raises(NotFound):
        delete_reservation(reservation.pk)


def test_bad_identifier_is_not_found():
    with pytest.raises(NotFound):
        delete_listing("abc")


def test_cancel_reservation_locks_row(world, alice, bob):
    reservation = world["reservations"][0]

    with pytest.raises(Unauthorized):
        cancel_reservation(reservation.pk, Actor(user_id=alice.pk))

    cancelled = cancel_reservation(reservation.pk, Actor(user_id=bob.pk))
    assert cancelled.status == Reservation.Status.CANCELLED
    assert cancelled.cancelled_at is not None

    with pytest.raises(ReservationLocked):
        cancel_reservation(reservation.pk, Actor(user_id=None, is_admin=True))

    with pytest.raises(NotFound):
        cancel_reservation(987654, Actor(user_id=bob.pk))


def test_purge_orphans_sweeps_dangling_rows(world, alice, bob):
    ghost_listing = make_listing(alice, "Bamboo Treehouse")
    make_review(bob, ghost_listing)
    stray_review = make_review(bob, world["listings"][2], rating=4)
    stray_reservation = make_reservation(bob, world["listings"][2])
    # Point rows at accounts that no longer exist
    Listing.objects.filter(pk=ghost_listing.pk).update(owner_id=987654)
    Review.objects.filter(pk=stray_review.pk).update(author_id=987655)
    Reservation.objects.filter(pk=stray_reservation.pk).update(guest_id=987655)

    result = purge_orphans()

    assert result.as_dict() == {"users": 0, "listings": 1, "reviews": 2, "reservations": 1}
    assert _counts() == (2, 3, 3, 3)
    assert purge_orphans().total == 0


def test_cascade_result_merge():
    result = CascadeResult(users=1).merge(CascadeResult(listings=2, reviews=3))
    assert result.as_dict() == {"users": 1, "listings": 2, "reviews": 3, "reservations": 0}
    assert result.total == 6
