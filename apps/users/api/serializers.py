"""Serializers for the admin dashboard API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.models import CustomUser


class DashboardUserSerializer(serializers.ModelSerializer):
    """Пользователь в панели администратора со счётчиками."""

    role_display = serializers.CharField(source="get_role_display", read_only=True)
    listings_count = serializers.IntegerField(read_only=True)
    reservations_count = serializers.IntegerField(read_only=True)
    reviews_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = CustomUser
        fields = [
            "id",
            "username",
            "email",
            "phone",
            "location",
            "role",
            "role_display",
            "status",
            "listings_count",
            "reservations_count",
            "reviews_count",
            "created_at",
        ]
        read_only_fields = fields


class DashboardStatsSerializer(serializers.Serializer):
    """Platform-wide counters shown on the dashboard."""

    users = serializers.IntegerField()
    blocked_users = serializers.IntegerField()
    listings = serializers.IntegerField()
    unverified_listings = serializers.IntegerField()
    reviews = serializers.IntegerField()
    avg_rating = serializers.FloatField(allow_null=True)
    reservations = serializers.DictField(child=serializers.IntegerField())
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)


class CascadeResultSerializer(serializers.Serializer):
    users = serializers.IntegerField()
    listings = serializers.IntegerField()
    reviews = serializers.IntegerField()
    reservations = serializers.IntegerField()
