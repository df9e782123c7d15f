"""Serializers for reviews.

The author and the listing are taken from the request and the URL in the
view; the payload only carries the rating and the comment.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Review


class ReviewCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating a new review."""

    class Meta:
        model = Review
        fields = ['rating', 'comment']

    def validate_rating(self, value: int) -> int:  # type: ignore
        if value < 1 or value > 5:
            raise serializers.ValidationError('Rating must be between 1 and 5.')
        return value

    def validate_comment(self, value: str) -> str:  # type: ignore
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Comment cannot be empty.')
        return value


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer for reviews including related ids."""

    author_id = serializers.ReadOnlyField(source='author.id')
    author_name = serializers.ReadOnlyField(source='author.username')
    listing_id = serializers.ReadOnlyField()

    class Meta:
        model = Review
        fields = [
            'id',
            'author_id',
            'author_name',
            'listing_id',
            'rating',
            'comment',
            'created_at',
            'updated_at',
        ]
