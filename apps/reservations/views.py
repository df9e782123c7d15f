"""API views for the reservation domain."""

from __future__ import annotations

import structlog
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.core.cascade import cancel_reservation, delete_reservation
from apps.users.api.permissions import IsAdmin, IsNotBlocked, IsOwnerOrAdmin
from shared.application.context import Actor

from .models import Reservation
from .pricing import quote_for_listing
from .serializers import (
    PriceQuoteSerializer,
    QuoteRequestSerializer,
    ReservationCreateSerializer,
    ReservationSerializer,
    ReservationStatusSerializer,
    ReservationUpdateSerializer,
)
from .services import set_reservation_status, update_reservation

logger = structlog.get_logger(__name__)


class ReservationViewSet(viewsets.ModelViewSet):
    """Viewset для создания и управления бронированиями.

    Гость видит свои бронирования, администратор видит все.
    """

    queryset = Reservation.objects.select_related("listing", "guest").all()
    permission_classes = [permissions.IsAuthenticated, IsNotBlocked, IsOwnerOrAdmin]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    owner_field = "guest_id"

    def get_permissions(self):  # type: ignore
        if self.action == "destroy":
            return [permissions.IsAuthenticated(), IsAdmin()]
        if self.action == "quote":
            return [permissions.AllowAny()]
        return super().get_permissions()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return ReservationCreateSerializer
        if self.action == "partial_update":
            return ReservationUpdateSerializer
        if self.action == "quote":
            return QuoteRequestSerializer
        return ReservationSerializer

    def get_queryset(self):  # type: ignore
        user = self.request.user
        qs = super().get_queryset()
        if not user.is_authenticated:
            return qs.none()
        if not Actor.from_user(user).is_admin:
            qs = qs.filter(guest=user)
        status_filter = self.request.query_params.get("status")
        if status_filter:
            qs = qs.filter(status=status_filter)
        return qs

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = serializer.save()
        logger.info(
            "reservation.created",
            reservation_id=reservation.pk,
            listing_id=reservation.listing_id,
            guest_id=reservation.guest_id,
            price=str(reservation.price),
        )
        read_serializer = ReservationSerializer(reservation, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        # Lookup is scoped by get_queryset, so foreign ids answer 404 like GET does
        reservation = self.get_object()
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        reservation = update_reservation(
            reservation.pk,
            Actor.from_user(request.user),
            serializer.validated_data,
        )
        logger.info(
            "reservation.updated",
            reservation_id=reservation.pk,
            user_id=request.user.pk,
            fields=sorted(serializer.validated_data),
        )
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        """Жёсткое удаление, только администратор."""
        result = delete_reservation(kwargs["pk"])
        logger.info("reservation.deleted", reservation_id=kwargs["pk"], admin_id=request.user.pk)
        return Response(result.as_dict(), status=status.HTTP_200_OK)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        """Отмена гостем или администратором; отменённую бронь изменить нельзя."""
        reservation = cancel_reservation(self.get_object().pk, Actor.from_user(request.user))
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"])
    def quote(self, request):  # type: ignore
        """Предварительный расчёт стоимости без создания брони."""
        serializer = QuoteRequestSerializer(data=request.query_params, context=self.get_serializer_context())
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        price = quote_for_listing(data["listing"], data["check_in"], data["check_out"])
        return Response(PriceQuoteSerializer(price.as_dict()).data)


class ReservationStatusView(APIView):
    """POST /api/v1/dashboard/reservations/{id}/status/ - confirm or cancel."""

    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def post(self, request, pk: int):  # type: ignore
        serializer = ReservationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = set_reservation_status(pk, serializer.validated_data["status"])
        logger.info(
            "reservation.status_changed",
            reservation_id=reservation.pk,
            status=reservation.status,
            admin_id=request.user.pk,
        )
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_200_OK)
