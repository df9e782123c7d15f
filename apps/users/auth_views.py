"""Views for authentication flows (register, login, logout)."""

from __future__ import annotations

import structlog
from django.contrib.auth import login, logout  # type: ignore
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from .auth_serializers import LoginSerializer, RegisterSerializer
from .serializers import UserSerializer

logger = structlog.get_logger(__name__)


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        login(request, user)
        logger.info("auth.registered", user_id=user.pk, username=user.username)
        data = {
            "user": UserSerializer(user).data,
            "tokens": _tokens_for_user(user),
            "detail": f"Welcome to airHost, {user.username}!",
        }
        return Response(data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        login(request, user)
        logger.info("auth.logged_in", user_id=user.pk)
        data = {
            "user": UserSerializer(user).data,
            "tokens": _tokens_for_user(user),
            "detail": "Welcome back!",
        }
        return Response(data, status=status.HTTP_200_OK)


class LogoutView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        if request.user.is_authenticated:
            logger.info("auth.logged_out", user_id=request.user.pk)
        logout(request)
        return Response(status=status.HTTP_204_NO_CONTENT)
