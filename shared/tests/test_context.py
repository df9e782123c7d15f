from types import SimpleNamespace

from django.contrib.auth.models import AnonymousUser

from shared.application.context import Actor
from shared.application.field_policy import (
    LISTING_ADMIN_FIELDS,
    RESERVATION_ADMIN_FIELDS,
    strip_admin_only_fields,
)


def test_anonymous_actor():
    actor = Actor.from_user(AnonymousUser())
    assert actor.is_anonymous
    assert not actor.may_manage(None)


def test_actor_from_user():
    user = SimpleNamespace(pk=7, is_authenticated=True, is_admin=lambda: False)
    actor = Actor.from_user(user)
    assert actor == Actor(user_id=7, is_admin=False)
    assert actor.may_manage(7)
    assert not actor.may_manage(8)


def test_admin_manages_anything():
    assert Actor(user_id=1, is_admin=True).may_manage(99)


def test_non_admin_loses_reserved_fields():
    payload = {"title": "Cabin", "is_verified": True}

    cleaned = strip_admin_only_fields(payload, Actor(user_id=3), LISTING_ADMIN_FIELDS)

    assert cleaned == {"title": "Cabin"}
    assert payload == {"title": "Cabin", "is_verified": True}


def test_admin_keeps_reserved_fields():
    payload = {"adults": 2, "status": "Confirmed", "is_verified": True}

    cleaned = strip_admin_only_fields(payload, Actor(user_id=1, is_admin=True), RESERVATION_ADMIN_FIELDS)

    assert cleaned == payload
