"""API views for the admin dashboard."""

from __future__ import annotations

from decimal import Decimal

import structlog
from django.db import models  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.core.cascade import delete_user
from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.reviews.models import Review
from apps.users.models import CustomUser
from .permissions import IsAdmin
from .serializers import CascadeResultSerializer, DashboardStatsSerializer, DashboardUserSerializer

logger = structlog.get_logger(__name__)


class DashboardUserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Управление аккаунтами из панели администратора.

    Endpoints:
    - GET /api/v1/dashboard/users/ - list users (?q=, ?role=, ?status=)
    - GET /api/v1/dashboard/users/{id}/ - user details
    - DELETE /api/v1/dashboard/users/{id}/ - delete user with everything they own
    - POST /api/v1/dashboard/users/{id}/block/ - block account
    - POST /api/v1/dashboard/users/{id}/unblock/ - unblock account
    """

    serializer_class = DashboardUserSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def get_queryset(self):  # type: ignore
        qs = CustomUser.objects.annotate(
            listings_count=models.Count("listings", distinct=True),
            reservations_count=models.Count("reservations", distinct=True),
            reviews_count=models.Count("reviews", distinct=True),
        )
        params = self.request.query_params
        term = params.get("q")
        if term:
            qs = qs.filter(models.Q(username__icontains=term) | models.Q(email__icontains=term))
        if params.get("role"):
            qs = qs.filter(role=params["role"])
        if params.get("status"):
            qs = qs.filter(status=params["status"])
        return qs.order_by("-created_at")

    def destroy(self, request, *args, **kwargs):  # type: ignore
        """Удаление пользователя каскадом; удалить самого себя нельзя."""
        result = delete_user(kwargs["pk"], acting_admin_id=request.user.pk)
        logger.info("dashboard.user_deleted", user_id=kwargs["pk"], admin_id=request.user.pk)
        return Response(CascadeResultSerializer(result.as_dict()).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=["post"], url_path="block")
    def block(self, request, pk=None):  # type: ignore
        user = self.get_object()
        if user.pk == request.user.pk:
            return Response(
                {"detail": "You cannot block your own account."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if user.is_blocked:
            return Response(
                {"detail": "User is already blocked."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        user.block()
        logger.info("dashboard.user_blocked", user_id=user.pk, admin_id=request.user.pk)
        return Response(self.get_serializer(self.get_object()).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=["post"], url_path="unblock")
    def unblock(self, request, pk=None):  # type: ignore
        user = self.get_object()
        if not user.is_blocked:
            return Response(
                {"detail": "User is not blocked."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        user.unblock()
        logger.info("dashboard.user_unblocked", user_id=user.pk, admin_id=request.user.pk)
        return Response(self.get_serializer(self.get_object()).data, status=status.HTTP_200_OK)


class DashboardStatsView(APIView):
    """Сводная статистика платформы."""

    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def get(self, request, format=None):  # type: ignore
        reservations_by_status = {value: 0 for value in Reservation.Status.values}
        for row in Reservation.objects.values("status").annotate(total=models.Count("id")):
            reservations_by_status[row["status"]] = row["total"]

        revenue = (
            Reservation.objects.filter(status=Reservation.Status.CONFIRMED)
            .aggregate(total=models.Sum("price"))
            .get("total")
            or Decimal("0")
        )
        avg_rating = Review.objects.aggregate(avg=models.Avg("rating")).get("avg")

        stats = {
            "users": CustomUser.objects.count(),
            "blocked_users": CustomUser.objects.filter(status=CustomUser.StatusChoices.BLOCKED).count(),
            "listings": Listing.objects.count(),
            "unverified_listings": Listing.objects.filter(is_verified=False).count(),
            "reviews": Review.objects.count(),
            "avg_rating": avg_rating,
            "reservations": reservations_by_status,
            "revenue": revenue,
        }
        return Response(DashboardStatsSerializer(stats).data)
