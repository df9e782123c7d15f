"""User domain models for airHost.

The marketplace knows two roles: regular users, who list places, book
stays and leave reviews, and administrators, who moderate listings,
reservations and accounts. Accounts can be blocked by an administrator
without being deleted.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.core.validators import MinLengthValidator, RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


PHONE_VALIDATOR = RegexValidator(
    regex=r"^[0-9]{10,12}$",
    message=_("Contact number must be 10-12 digits."),
)


class CustomUserManager(BaseUserManager):
    """Менеджер пользователей: логин по username, email обязателен."""

    use_in_migrations = True

    def _create_user(self, username: str, email: str, password: str | None, **extra_fields: Any):
        if not username:
            raise ValueError("Username is required.")
        if not email:
            raise ValueError("Email is required.")
        email = self.normalize_email(email).lower()
        username = self.model.normalize_username(username.strip())

        user = self.model(username=username, email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, username: str, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.USER)
        return self._create_user(username, email, password, **extra_fields)

    def create_superuser(self, username: str, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields["role"] = CustomUser.RoleChoices.ADMIN

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(username, email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Пользователь маркетплейса с ролью и статусом блокировки."""

    class RoleChoices(models.TextChoices):
        USER = "user", _("User")
        ADMIN = "admin", _("Admin")

    class StatusChoices(models.TextChoices):
        ACTIVE = "active", _("Active")
        BLOCKED = "blocked", _("Blocked")

    username = models.CharField(
        _("Username"),
        max_length=30,
        unique=True,
        validators=[MinLengthValidator(3)],
        error_messages={"unique": _("A user with that username already exists.")},
    )
    email = models.EmailField(_("Email"), unique=True)
    phone = models.CharField(
        _("Phone"),
        max_length=12,
        blank=True,
        validators=[PHONE_VALIDATOR],
    )
    location = models.CharField(_("Location"), max_length=30, blank=True)
    role = models.CharField(
        _("Role"),
        max_length=10,
        choices=RoleChoices.choices,
        default=RoleChoices.USER,
    )
    status = models.CharField(
        _("Status"),
        max_length=10,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.username} ({self.get_role_display()})"

    # --- Доменные помощники -------------------------------------------------
    def is_admin(self) -> bool:
        return self.role == self.RoleChoices.ADMIN or self.is_superuser

    @property
    def is_blocked(self) -> bool:
        return self.status == self.StatusChoices.BLOCKED

    def block(self) -> None:
        self.status = self.StatusChoices.BLOCKED
        self.save(update_fields=["status", "updated_at"])

    def unblock(self) -> None:
        self.status = self.StatusChoices.ACTIVE
        self.save(update_fields=["status", "updated_at"])


# Backwards compatibility alias used across apps/tests
User = CustomUser
