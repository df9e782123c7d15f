"""User API views."""

from __future__ import annotations

import structlog
from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .api.permissions import IsNotBlocked
from .serializers import UserSerializer

User = get_user_model()
logger = structlog.get_logger(__name__)


class UserViewSet(viewsets.GenericViewSet):
    """Профиль текущего пользователя.

    Управление чужими аккаунтами живёт в ``apps.users.api`` (панель администратора).
    """

    serializer_class = UserSerializer
    queryset = User.objects.all()
    permission_classes = [permissions.IsAuthenticated, IsNotBlocked]

    @action(detail=False, methods=["get", "patch"])
    def me(self, request):
        """GET возвращает профиль, PATCH обновляет email, телефон и город."""
        if request.method == "GET":
            return Response(self.get_serializer(request.user).data)

        serializer = self.get_serializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("user.profile_updated", user_id=request.user.pk, fields=sorted(serializer.validated_data))
        return Response(serializer.data)
