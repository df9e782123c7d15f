from datetime import date
from decimal import Decimal

import pytest

from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.reviews.models import Review
from apps.users.models import User


def make_listing(owner, title, **extra):
    fields = {
        "owner": owner,
        "title": title,
        "description": "A quiet place to stay for a few nights.",
        "price": Decimal("1000"),
        "location": "Goa",
        "country": "India",
        "is_verified": True,
    }
    fields.update(extra)
    return Listing.objects.create(**fields)


def make_review(author, listing, rating=5):
    return Review.objects.create(author=author, listing=listing, rating=rating, comment="Lovely stay.")


def make_reservation(guest, listing, **extra):
    fields = {
        "guest": guest,
        "listing": listing,
        "check_in": date(2024, 3, 1),
        "check_out": date(2024, 3, 3),
        "price": Decimal("2000"),
    }
    fields.update(extra)
    return Reservation.objects.create(**fields)


@pytest.fixture
def admin():
    return User.objects.create_user(
        username="admin", email="admin@example.com", password="secret1", role=User.RoleChoices.ADMIN
    )


@pytest.fixture
def alice():
    return User.objects.create_user(username="alice", email="alice@example.com", password="secret1")


@pytest.fixture
def bob():
    return User.objects.create_user(username="bob", email="bob@example.com", password="secret1")


@pytest.fixture
def world(alice, bob):
    """Alice owns two listings, Bob owns one; both review and book across them."""
    first = make_listing(alice, "Tropical Beach Villa")
    second = make_listing(alice, "Cozy Studio")
    third = make_listing(bob, "Snow Peak Cabin")
    return {
        "listings": (first, second, third),
        "reviews": (
            make_review(bob, first),
            make_review(alice, third),
            make_review(bob, third),
        ),
        "reservations": (
            make_reservation(bob, first),
            make_reservation(alice, third),
            make_reservation(bob, third),
        ),
    }
