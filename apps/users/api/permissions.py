"""Permission classes shared by the marketplace API."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def _is_admin(user) -> bool:
    if not user or not user.is_authenticated:
        return False
    if getattr(user, "is_superuser", False):
        return True
    return hasattr(user, "is_admin") and user.is_admin()


class IsAdmin(permissions.BasePermission):
    """Only marketplace administrators."""

    message = "Administrator access required."

    def has_permission(self, request, view) -> bool:  # type: ignore
        return _is_admin(request.user)


class IsNotBlocked(permissions.BasePermission):
    """Blocked accounts keep read access but cannot write anything."""

    message = "This account has been blocked."

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return True
        if request.method in permissions.SAFE_METHODS:
            return True
        return not getattr(user, "is_blocked", False)


class IsOwnerOrAdmin(permissions.BasePermission):
    """
    Object-level permission: the object's owner or an administrator.

    Views declare which attribute holds the owner id via ``owner_field``
    (defaults to ``owner_id``).
    """

    message = "Permission denied."

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        if _is_admin(user):
            return True
        owner_field = getattr(view, "owner_field", "owner_id")
        return getattr(obj, owner_field, None) == user.id
