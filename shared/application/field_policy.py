"""
Field Policy

Allow-list transform applied to incoming payloads before any write:
fields reserved for administrators are dropped from non-admin payloads
instead of being rejected.
"""

from typing import Any, Iterable, Mapping

from shared.application.context import Actor

LISTING_ADMIN_FIELDS = frozenset({'is_verified'})
RESERVATION_ADMIN_FIELDS = frozenset({'status', 'is_verified'})


def strip_admin_only_fields(
    payload: Mapping[str, Any],
    actor: Actor,
    admin_fields: Iterable[str],
) -> dict[str, Any]:
    """Return a copy of ``payload`` the actor is allowed to write"""
    data = dict(payload.items())
    if actor.is_admin:
        return data
    for name in admin_fields:
        data.pop(name, None)
    return data
