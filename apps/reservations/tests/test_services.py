"""Tests for reservation write services."""

from datetime import date
from decimal import Decimal

import pytest

from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.reservations.services import create_reservation, set_reservation_status, update_reservation
from apps.users.models import User
from shared.application.context import Actor
from shared.domain.exceptions import (
    CapacityExceeded,
    InvalidDateRange,
    NotFound,
    ReservationLocked,
    Unauthorized,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def host():
    return User.objects.create_user(username="host", email="host@example.com", password="secret1")


@pytest.fixture
def guest():
    return User.objects.create_user(username="guest", email="guest@example.com", password="secret1")


@pytest.fixture
def listing(host):
    return Listing.objects.create(
        owner=host,
        title="Snow Peak Cabin",
        description="Wooden cabin with a view of the peaks.",
        price=Decimal("1000"),
        cleaning_fee=Decimal("200"),
        service_fee_pct=Decimal("3"),
        location="Manali",
        country="India",
        guests=3,
        is_verified=True,
    )


@pytest.fixture
def reservation(listing, guest):
    return create_reservation(listing, guest, date(2024, 1, 1), date(2024, 1, 4), adults=2)


def test_create_prices_from_listing(reservation):
    reservation.refresh_from_db()
    assert reservation.status == Reservation.Status.PENDING
    assert reservation.nights == 3
    assert reservation.base_price == Decimal("3000")
    assert reservation.service_fee == Decimal("90")
    assert reservation.tax == Decimal("592")
    assert reservation.price == Decimal("3882")


def test_create_rejects_too_many_guests(listing, guest):
    with pytest.raises(CapacityExceeded):
        create_reservation(listing, guest, date(2024, 1, 1), date(2024, 1, 2), adults=2, children=2)
    assert not Reservation.objects.exists()


def test_create_rejects_bad_dates(listing, guest):
    with pytest.raises(InvalidDateRange):
        create_reservation(listing, guest, date(2024, 1, 2), date(2024, 1, 2))


def test_guest_changes_dates_and_price_follows(reservation, guest):
    updated = update_reservation(
        reservation.pk, Actor.from_user(guest), {"check_out": date(2024, 1, 2)}
    )

    assert updated.nights == 1
    assert updated.price == Decimal("1451")  # 1000 + 200 + 30 = 1230, tax 221


def test_price_uses_current_listing_rate_on_reprice(reservation, listing, guest):
    listing.price = Decimal("2000")
    listing.save()

    updated = update_reservation(reservation.pk, Actor.from_user(guest), {"check_in": date(2024, 1, 3)})

    assert updated.nightly_rate == Decimal("2000")
    assert updated.base_price == Decimal("2000")


def test_guest_cannot_touch_admin_fields(reservation, guest):
    update_reservation(
        reservation.pk,
        Actor.from_user(guest),
        {"status": Reservation.Status.CONFIRMED, "is_verified": True, "adults": 1},
    )

    reservation.refresh_from_db()
    assert reservation.status == Reservation.Status.PENDING
    assert reservation.is_verified is False
    assert reservation.adults == 1


def test_admin_may_confirm_through_update(reservation):
    admin = Actor(user_id=999, is_admin=True)

    updated = update_reservation(reservation.pk, admin, {"status": Reservation.Status.CONFIRMED})

    assert updated.status == Reservation.Status.CONFIRMED


def test_stranger_is_unauthorized(reservation, host):
    with pytest.raises(Unauthorized):
        update_reservation(reservation.pk, Actor.from_user(host), {"adults": 1})


def test_missing_reservation(guest):
    with pytest.raises(NotFound):
        update_reservation(123456, Actor.from_user(guest), {"adults": 1})


@pytest.mark.parametrize("bad_id", ["abc", None])
def test_malformed_reservation_id(guest, bad_id):
    with pytest.raises(NotFound):
        update_reservation(bad_id, Actor.from_user(guest), {"adults": 1})
    with pytest.raises(NotFound):
        set_reservation_status(bad_id, "Confirmed")


def test_cancelled_reservation_is_locked(reservation, guest):
    reservation.mark_cancelled()
    before = Reservation.objects.values().get(pk=reservation.pk)

    with pytest.raises(ReservationLocked):
        update_reservation(reservation.pk, Actor.from_user(guest), {"adults": 1})
    with pytest.raises(ReservationLocked):
        update_reservation(reservation.pk, Actor(user_id=None, is_admin=True), {"status": "Pending"})

    assert Reservation.objects.values().get(pk=reservation.pk) == before


def test_capacity_checked_on_update(reservation, guest):
    with pytest.raises(CapacityExceeded):
        update_reservation(reservation.pk, Actor.from_user(guest), {"children": 5})

    reservation.refresh_from_db()
    assert reservation.children == 0


def test_set_status_transitions(reservation):
    confirmed = set_reservation_status(reservation.pk, Reservation.Status.CONFIRMED)
    assert confirmed.status == Reservation.Status.CONFIRMED

    cancelled = set_reservation_status(reservation.pk, Reservation.Status.CANCELLED)
    assert cancelled.status == Reservation.Status.CANCELLED
    assert cancelled.cancelled_at is not None

    with pytest.raises(ReservationLocked):
        set_reservation_status(reservation.pk, Reservation.Status.CONFIRMED)


def test_set_status_rejects_unknown_value(reservation):
    with pytest.raises(ValueError):
        set_reservation_status(reservation.pk, "Archived")
