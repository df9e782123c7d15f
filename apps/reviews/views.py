"""API views for managing reviews."""

from __future__ import annotations

import structlog
from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.cascade import delete_review
from apps.listings.models import Listing
from apps.users.api.permissions import IsNotBlocked, IsOwnerOrAdmin

from .models import Review
from .serializers import ReviewCreateSerializer, ReviewSerializer

logger = structlog.get_logger(__name__)


class ListingReviewViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """Отзывы конкретного объявления: список и создание."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsNotBlocked]

    def get_listing(self) -> Listing:
        return get_object_or_404(Listing.objects.visible_to(self.request.user), pk=self.kwargs['listing_pk'])

    def get_queryset(self):  # type: ignore
        listing = self.get_listing()
        return Review.objects.filter(listing=listing).select_related('author').order_by('-created_at')

    def get_serializer_class(self):  # type: ignore
        if self.action == 'create':
            return ReviewCreateSerializer
        return ReviewSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        listing = self.get_listing()
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = serializer.save(author=request.user, listing=listing)
        logger.info('review.created', review_id=review.pk, listing_id=listing.pk, author_id=request.user.pk)
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class ReviewViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Viewset for retrieving and deleting reviews."""

    queryset = Review.objects.select_related('author').all()
    serializer_class = ReviewSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsNotBlocked, IsOwnerOrAdmin]
    owner_field = 'author_id'

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset().filter(listing__in=Listing.objects.visible_to(self.request.user))
        # Фильтрация по listing / author (query params)
        listing_id = self.request.query_params.get('listing')
        if listing_id:
            qs = qs.filter(listing_id=listing_id)
        author_id = self.request.query_params.get('author')
        if author_id:
            qs = qs.filter(author_id=author_id)
        return qs

    def destroy(self, request, *args, **kwargs):  # type: ignore
        """Удаление отзыва автором или администратором."""
        review = self.get_object()
        delete_review(review.pk)
        logger.info('review.deleted', review_id=review.pk, user_id=request.user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
