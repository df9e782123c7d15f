"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import PHONE_VALIDATOR


User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(min_length=3, max_length=30)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.CharField(validators=[PHONE_VALIDATOR])
    location = serializers.CharField(min_length=3, max_length=30)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if User.objects.filter(username__iexact=attrs["username"]).exists():
            raise serializers.ValidationError({"username": "Username or Email already exists."})
        if User.objects.filter(email__iexact=attrs["email"]).exists():
            raise serializers.ValidationError({"email": "Username or Email already exists."})
        return attrs

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        try:
            user = User.objects.get(username=attrs.get("username", ""))
        except User.DoesNotExist:
            raise serializers.ValidationError({"non_field_errors": ["Invalid username or password."]})

        if not user.check_password(attrs.get("password", "")):
            raise serializers.ValidationError({"non_field_errors": ["Invalid username or password."]})

        if user.is_blocked or not user.is_active:
            raise serializers.ValidationError({"non_field_errors": ["This account has been blocked."]})

        attrs["user"] = user
        return attrs
