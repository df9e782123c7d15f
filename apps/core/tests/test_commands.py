"""Management command tests."""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.listings.models import Listing
from apps.reviews.models import Review
from apps.users.models import User

pytestmark = pytest.mark.django_db


def test_create_admin_creates_superuser():
    call_command("create_admin", username="root", email="Root@Example.com", password="s3cret!", stdout=StringIO())

    admin = User.objects.get(username="root")
    assert admin.email == "root@example.com"
    assert admin.is_admin()
    assert admin.is_superuser
    assert admin.check_password("s3cret!")


def test_create_admin_promotes_existing_account(alice):
    call_command("create_admin", username="ignored", email=alice.email, password="new-pass", stdout=StringIO())

    alice.refresh_from_db()
    assert alice.role == User.RoleChoices.ADMIN
    assert alice.check_password("new-pass")
    assert not User.objects.filter(username="ignored").exists()


def test_create_admin_requires_password():
    with pytest.raises(CommandError):
        call_command("create_admin", password="", stdout=StringIO())


def test_seed_data_is_repeatable():
    call_command("seed_data", seed=7, stdout=StringIO())

    assert User.objects.count() == 5
    assert User.objects.get(username="amit_travels").is_admin()
    assert Listing.objects.count() == 15
    assert Listing.objects.filter(is_verified=False).count() == 0
    reviews = Review.objects.count()
    assert 30 <= reviews <= 60

    call_command("seed_data", seed=7, stdout=StringIO())
    assert User.objects.count() == 5
    assert Listing.objects.count() == 15
    assert Review.objects.count() == reviews


def test_purge_orphans_command(world, alice):
    User.objects.filter(pk=alice.pk).delete()
    out = StringIO()

    call_command("purge_orphans", stdout=out)

    assert "Removed" in out.getvalue()
    assert not Listing.objects.filter(owner_id=alice.pk).exists()

    out = StringIO()
    call_command("purge_orphans", stdout=out)
    assert "No orphans found" in out.getvalue()
