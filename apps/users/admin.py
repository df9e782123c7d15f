"""Admin registrations for the users domain."""

from __future__ import annotations

from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from apps.core.cascade import delete_user
from shared.domain.exceptions import SelfDeletionForbidden

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(BaseUserAdmin):
    fieldsets = (
        (None, {"fields": ("username", "password")}),
        (_("Personal info"), {"fields": ("email", "first_name", "last_name", "phone", "location")}),
        (_("Role and status"), {"fields": ("role", "status")}),
        (
            _("Permissions"),
            {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("username", "email", "password1", "password2", "phone", "location", "role"),
            },
        ),
    )
    list_display = ("username", "email", "role", "status", "is_staff", "created_at")
    list_filter = ("role", "status", "is_staff", "is_superuser")
    search_fields = ("username", "email", "phone")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at", "date_joined", "last_login")
    actions = ("block_users", "unblock_users")

    @admin.action(description=_("Block selected users"))
    def block_users(self, request, queryset):
        updated = queryset.exclude(pk=request.user.pk).update(status=CustomUser.StatusChoices.BLOCKED)
        self.message_user(request, _("%d user(s) blocked.") % updated)

    @admin.action(description=_("Unblock selected users"))
    def unblock_users(self, request, queryset):
        updated = queryset.update(status=CustomUser.StatusChoices.ACTIVE)
        self.message_user(request, _("%d user(s) unblocked.") % updated)

    # Deletion goes through the cascade so listings, reviews and reservations follow
    def delete_model(self, request, obj):
        try:
            delete_user(obj.pk, acting_admin_id=request.user.pk)
        except SelfDeletionForbidden as exc:
            self.message_user(request, exc.message, level=messages.ERROR)

    def delete_queryset(self, request, queryset):
        for user in queryset:
            self.delete_model(request, user)
