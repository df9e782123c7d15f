"""
Request Context

The acting user is passed explicitly into application services instead of
being read from the session inside them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Who is performing an operation"""
    user_id: int | None
    is_admin: bool = False

    @classmethod
    def from_user(cls, user) -> 'Actor':
        """Build the actor for an authenticated (or anonymous) Django user"""
        if user is None or not getattr(user, 'is_authenticated', False):
            return cls(user_id=None, is_admin=False)
        is_admin = user.is_admin() if hasattr(user, 'is_admin') else bool(user.is_superuser)
        return cls(user_id=user.pk, is_admin=is_admin)

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    def owns(self, owner_id: int | None) -> bool:
        return self.user_id is not None and self.user_id == owner_id

    def may_manage(self, owner_id: int | None) -> bool:
        """Owner of the object or an administrator"""
        return self.is_admin or self.owns(owner_id)
