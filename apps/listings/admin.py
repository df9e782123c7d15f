"""Admin registrations for the listings domain."""

from __future__ import annotations

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from apps.core.cascade import delete_listing

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ("title", "location", "country", "category", "price", "owner", "is_verified", "created_at")
    list_filter = ("is_verified", "category", "badge", "country")
    search_fields = ("title", "location", "country", "owner__username")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at", "updated_at")
    actions = ("verify_listings",)

    @admin.action(description=_("Verify selected listings"))
    def verify_listings(self, request, queryset):
        updated = queryset.update(is_verified=True)
        self.message_user(request, _("%d listing(s) verified.") % updated)

    def delete_model(self, request, obj):
        delete_listing(obj.pk)

    def delete_queryset(self, request, queryset):
        for pk in list(queryset.values_list("pk", flat=True)):
            delete_listing(pk)
