"""Listing API views."""

from __future__ import annotations

import structlog
from django.db import models  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.core.cascade import delete_listing
from apps.users.api.permissions import IsAdmin, IsNotBlocked, IsOwnerOrAdmin

from .filters import ListingFilterSet
from .models import Listing
from .serializers import ListingDetailSerializer, ListingSerializer, ListingWriteSerializer

logger = structlog.get_logger(__name__)


def _annotated(qs):
    # Meta.ordering is not applied to GROUP BY queries, pagination needs an explicit one
    return (
        qs.select_related("owner")
        .annotate(
            reviews_count=models.Count("reviews", distinct=True),
            avg_rating=models.Avg("reviews__rating"),
        )
        .order_by("-created_at", "-pk")
    )


class ListingViewSet(viewsets.ModelViewSet):
    """Viewset для объявлений.

    Публичный список показывает только проверенные объекты; владелец видит
    и свои непроверенные, администратор видит всё.
    """

    queryset = Listing.objects.all()
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsNotBlocked, IsOwnerOrAdmin]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ListingFilterSet
    ordering_fields = ["price", "created_at", "title"]
    owner_field = "owner_id"

    def get_queryset(self):  # type: ignore
        return _annotated(Listing.objects.visible_to(self.request.user))

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return ListingWriteSerializer
        if self.action == "retrieve":
            return ListingDetailSerializer
        return ListingSerializer

    def perform_create(self, serializer):  # type: ignore
        listing = serializer.save(owner=self.request.user)
        logger.info("listing.created", listing_id=listing.pk, owner_id=listing.owner_id)

    def perform_update(self, serializer):  # type: ignore
        listing = serializer.save()
        logger.info("listing.updated", listing_id=listing.pk, user_id=self.request.user.pk)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        """Удаляет объявление вместе с отзывами и бронированиями."""
        listing = self.get_object()
        result = delete_listing(listing.pk)
        logger.info("listing.deleted", listing_id=listing.pk, user_id=request.user.pk)
        return Response(result.as_dict(), status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], permission_classes=[permissions.IsAuthenticated])
    def mine(self, request):
        """Объявления текущего пользователя, включая непроверенные."""
        qs = self.filter_queryset(_annotated(Listing.objects.filter(owner=request.user)))
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(ListingSerializer(page, many=True).data)
        return Response(ListingSerializer(qs, many=True).data)


class ListingVerifyView(APIView):
    """POST /api/v1/dashboard/listings/{id}/verify/ - publish a listing."""

    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def post(self, request, pk: int):  # type: ignore
        listing = get_object_or_404(Listing, pk=pk)
        listing.verify()
        logger.info("listing.verified", listing_id=listing.pk, admin_id=request.user.pk)
        return Response(ListingSerializer(listing).data, status=status.HTTP_200_OK)
