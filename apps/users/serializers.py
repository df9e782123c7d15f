"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Основной сериализатор пользователя (профиль)."""

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "phone",
            "location",
            "role",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "username",
            "role",
            "status",
            "created_at",
            "updated_at",
        ]

    def validate_email(self, value: str) -> str:
        return value.lower()
