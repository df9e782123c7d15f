"""Serializers for the reservation domain.

Money fields are always produced by the pricing engine; a ``price`` sent
by the client is not a declared field and is therefore discarded.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.models import Listing
from shared.application.context import Actor
from shared.application.field_policy import RESERVATION_ADMIN_FIELDS, strip_admin_only_fields

from .models import Reservation
from .services import create_reservation


def _visible_listings(context):
    request = context.get("request")
    return Listing.objects.visible_to(getattr(request, "user", None))


class _StayDatesMixin:
    def validate(self, attrs):  # type: ignore
        check_in = attrs.get("check_in")
        check_out = attrs.get("check_out")
        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError("Check-out must be after check-in.")
        return attrs


class ReservationCreateSerializer(_StayDatesMixin, serializers.Serializer):
    """Бронирование объекта гостем."""

    listing = serializers.PrimaryKeyRelatedField(queryset=Listing.objects.all())
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    adults = serializers.IntegerField(min_value=1, default=1)
    children = serializers.IntegerField(min_value=0, default=0)

    def validate_listing(self, listing: Listing) -> Listing:
        if not _visible_listings(self.context).filter(pk=listing.pk).exists():
            raise serializers.ValidationError("This listing is not available for booking.")
        return listing

    def create(self, validated_data):  # type: ignore
        return create_reservation(guest=self.context["request"].user, **validated_data)


class ReservationUpdateSerializer(_StayDatesMixin, serializers.Serializer):
    """Partial edit. ``status`` and ``is_verified`` are dropped for non-admins."""

    check_in = serializers.DateField(required=False)
    check_out = serializers.DateField(required=False)
    adults = serializers.IntegerField(min_value=1, required=False)
    children = serializers.IntegerField(min_value=0, required=False)
    status = serializers.ChoiceField(choices=Reservation.Status.choices, required=False)
    is_verified = serializers.BooleanField(required=False)

    def to_internal_value(self, data):  # type: ignore
        request = self.context.get("request")
        actor = Actor.from_user(getattr(request, "user", None))
        return super().to_internal_value(strip_admin_only_fields(data, actor, RESERVATION_ADMIN_FIELDS))


class ReservationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Reservation.Status.choices)


class QuoteRequestSerializer(_StayDatesMixin, serializers.Serializer):
    listing = serializers.PrimaryKeyRelatedField(queryset=Listing.objects.all())
    check_in = serializers.DateField()
    check_out = serializers.DateField()

    def validate_listing(self, listing: Listing) -> Listing:
        if not _visible_listings(self.context).filter(pk=listing.pk).exists():
            raise serializers.ValidationError("Listing not found.")
        return listing


class PriceQuoteSerializer(serializers.Serializer):
    nights = serializers.IntegerField()
    nightly_rate = serializers.DecimalField(max_digits=12, decimal_places=2)
    base_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    cleaning_fee = serializers.DecimalField(max_digits=12, decimal_places=2)
    service_fee = serializers.DecimalField(max_digits=12, decimal_places=2)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)


class ReservationSerializer(serializers.ModelSerializer):
    """Детальный сериализатор бронирования."""

    guest_id = serializers.ReadOnlyField()
    guest_username = serializers.ReadOnlyField(source="guest.username")
    listing_id = serializers.ReadOnlyField()
    listing_title = serializers.ReadOnlyField(source="listing.title")

    class Meta:
        model = Reservation
        fields = [
            "id",
            "guest_id",
            "guest_username",
            "listing_id",
            "listing_title",
            "check_in",
            "check_out",
            "adults",
            "children",
            "status",
            "is_verified",
            "nights",
            "nightly_rate",
            "base_price",
            "cleaning_fee",
            "service_fee",
            "subtotal",
            "tax",
            "price",
            "cancelled_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
