"""Admin registrations for the reviews domain."""

from __future__ import annotations

from django.contrib import admin

from apps.core.cascade import delete_review

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("listing", "author", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("listing__title", "author__username", "comment")
    raw_id_fields = ("listing", "author")
    readonly_fields = ("created_at", "updated_at")

    def delete_model(self, request, obj):
        delete_review(obj.pk)

    def delete_queryset(self, request, queryset):
        for pk in list(queryset.values_list("pk", flat=True)):
            delete_review(pk)
