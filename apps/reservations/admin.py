"""Admin registrations for the reservations domain."""

from __future__ import annotations

from django.contrib import admin

from apps.core.cascade import delete_reservation

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "listing", "guest", "check_in", "check_out", "status", "price", "created_at")
    list_filter = ("status", "is_verified", "check_in")
    search_fields = ("listing__title", "guest__username", "guest__email")
    raw_id_fields = ("listing", "guest")
    date_hierarchy = "check_in"
    readonly_fields = (
        "nights",
        "nightly_rate",
        "base_price",
        "cleaning_fee",
        "service_fee",
        "subtotal",
        "tax",
        "price",
        "cancelled_at",
        "created_at",
        "updated_at",
    )

    def delete_model(self, request, obj):
        delete_reservation(obj.pk)

    def delete_queryset(self, request, queryset):
        for pk in list(queryset.values_list("pk", flat=True)):
            delete_reservation(pk)
