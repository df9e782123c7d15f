"""Events from the cascade are published only after commit."""

import pytest

from apps.core import handlers
from apps.core.cascade import cancel_reservation, delete_listing, delete_user
from apps.core.events import ListingDeleted, ReservationCancelled, UserDeleted
from shared.application import message_bus as bus_module
from shared.application.context import Actor
from shared.application.message_bus import MessageBus, message_bus
from shared.domain.exceptions import SelfDeletionForbidden

pytestmark = pytest.mark.django_db


@pytest.fixture
def published(monkeypatch):
    """Swap the global bus for one that records every event."""
    seen = []
    bus = MessageBus()
    for event_type in (UserDeleted, ListingDeleted, ReservationCancelled):
        bus.register_event_handler(event_type, seen.append)
    monkeypatch.setattr(bus_module, "message_bus", bus)
    return seen


def test_handlers_registered_on_startup():
    assert handlers.log_user_deleted in message_bus.handlers_for(UserDeleted)
    assert handlers.log_reservation_cancelled in message_bus.handlers_for(ReservationCancelled)


def test_user_deleted_published_after_commit(world, admin, alice, published, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        result = delete_user(alice.pk, acting_admin_id=admin.pk)

    assert len(published) == 1
    event = published[0]
    assert isinstance(event, UserDeleted)
    assert event.aggregate_id == alice.pk
    assert event.deleted_by == admin.pk
    assert event.counts == result.as_dict()


def test_nothing_published_on_failure(admin, published, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(SelfDeletionForbidden):
            delete_user(admin.pk, acting_admin_id=admin.pk)

    assert callbacks == []
    assert published == []


def test_noop_listing_delete_publishes_nothing(published, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        delete_listing(987654)

    assert published == []


def test_cancel_publishes_event(world, bob, published, django_capture_on_commit_callbacks):
    reservation = world["reservations"][0]

    with django_capture_on_commit_callbacks(execute=True):
        cancel_reservation(reservation.pk, Actor(user_id=bob.pk))

    assert [type(event) for event in published] == [ReservationCancelled]
    assert published[0].listing_id == reservation.listing_id
    assert published[0].cancelled_by == bob.pk
