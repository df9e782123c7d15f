"""Serializers for the listings domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.application.context import Actor
from shared.application.field_policy import LISTING_ADMIN_FIELDS, strip_admin_only_fields

from .models import AMENITY_FIELDS, Listing

LISTING_FIELDS = [
    "id",
    "title",
    "description",
    "price",
    "location",
    "country",
    "category",
    "badge",
    "image_url",
    "image_filename",
    "latitude",
    "longitude",
    "guests",
    "cleaning_fee",
    "service_fee_pct",
    *AMENITY_FIELDS,
    "is_verified",
]


class ListingSerializer(serializers.ModelSerializer):
    owner = serializers.ReadOnlyField(source="owner_id")
    owner_username = serializers.ReadOnlyField(source="owner.username")
    amenities = serializers.SerializerMethodField()
    reviews_count = serializers.IntegerField(read_only=True)
    avg_rating = serializers.FloatField(read_only=True)

    class Meta:
        model = Listing
        fields = [
            *LISTING_FIELDS,
            "owner",
            "owner_username",
            "amenities",
            "reviews_count",
            "avg_rating",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_amenities(self, obj: Listing) -> list[str]:
        return sorted(obj.amenities)


class ListingDetailSerializer(ListingSerializer):
    """Listing with its reviews, newest first."""

    reviews = serializers.SerializerMethodField()

    class Meta(ListingSerializer.Meta):
        fields = [*ListingSerializer.Meta.fields, "reviews"]
        read_only_fields = fields

    def get_reviews(self, obj: Listing) -> list[dict]:
        from apps.reviews.serializers import ReviewSerializer

        reviews = obj.reviews.select_related("author").order_by("-created_at")
        return ReviewSerializer(reviews, many=True, context=self.context).data


class ListingWriteSerializer(serializers.ModelSerializer):
    """Create/update payload. ``is_verified`` is silently dropped for non-admins."""

    class Meta:
        model = Listing
        fields = LISTING_FIELDS
        read_only_fields = ["id"]

    def to_internal_value(self, data):  # type: ignore
        request = self.context.get("request")
        actor = Actor.from_user(getattr(request, "user", None))
        return super().to_internal_value(strip_admin_only_fields(data, actor, LISTING_ADMIN_FIELDS))

    def validate_title(self, value: str) -> str:
        value = value.strip()
        if len(value) < 3:
            raise serializers.ValidationError("Title must be at least 3 characters.")
        return value

    def validate_description(self, value: str) -> str:
        value = value.strip()
        if len(value) < 10:
            raise serializers.ValidationError("Description must be at least 10 characters.")
        return value
