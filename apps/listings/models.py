"""Listing domain models for airHost."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

DEFAULT_LATITUDE = Decimal("18.879702")
DEFAULT_LONGITUDE = Decimal("72.140273")
DEFAULT_SERVICE_FEE_PCT = Decimal("3")

AMENITY_FIELDS = (
    "has_wifi",
    "has_ac",
    "has_kitchen",
    "has_parking",
    "has_pool",
    "has_gym",
    "has_workspace",
    "has_pets",
    "has_cctv",
)


class ListingQuerySet(models.QuerySet):
    def verified(self):
        return self.filter(is_verified=True)

    def visible_to(self, user):
        """Public index shows verified listings; owners also see their own."""
        if user is not None and user.is_authenticated:
            if hasattr(user, "is_admin") and user.is_admin():
                return self
            return self.filter(models.Q(is_verified=True) | models.Q(owner=user))
        return self.verified()

    def search(self, term: str):
        """Substring match on location or country (case-insensitive)."""
        if not term:
            return self
        return self.filter(models.Q(location__icontains=term) | models.Q(country__icontains=term))


class Listing(models.Model):
    """Объект, сдаваемый посуточно."""

    class Category(models.TextChoices):
        ROOMS = "Rooms", _("Rooms")
        HOTELS = "Hotels", _("Hotels")
        ENTIRE_HOME = "Entire Home", _("Entire Home")
        CABINS = "Cabins", _("Cabins")
        LUXE = "Luxe", _("Luxe")

    class Badge(models.TextChoices):
        STANDARD = "Standard", _("Standard")
        PREMIUM = "Premium", _("Premium")
        BUDGET = "Budget", _("Budget")
        LUXURY = "Luxury", _("Luxury")
        TRENDING = "Trending", _("Trending")
        POPULAR = "Popular", _("Popular")
        NEW = "New", _("New")
        TOP_RATED = "Top Rated", _("Top Rated")
        FEATURED = "Featured", _("Featured")
        ICONIC = "Iconic", _("Iconic")

    # Integrity is maintained by apps.core.cascade, not by the database.
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="listings",
    )
    title = models.CharField(max_length=100, validators=[MinLengthValidator(3)])
    description = models.TextField(validators=[MinLengthValidator(10)])
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        help_text=_("Nightly rate."),
    )
    location = models.CharField(max_length=255)
    country = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.ROOMS)
    badge = models.CharField(max_length=20, choices=Badge.choices, default=Badge.STANDARD)
    image_url = models.URLField(max_length=500, blank=True)
    image_filename = models.CharField(max_length=255, blank=True)
    latitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        default=DEFAULT_LATITUDE,
        validators=[MinValueValidator(Decimal("-90")), MaxValueValidator(Decimal("90"))],
    )
    longitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        default=DEFAULT_LONGITUDE,
        validators=[MinValueValidator(Decimal("-180")), MaxValueValidator(Decimal("180"))],
    )
    guests = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    cleaning_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0"))],
    )
    service_fee_pct = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=DEFAULT_SERVICE_FEE_PCT,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
    )
    has_wifi = models.BooleanField(default=False)
    has_ac = models.BooleanField(default=False)
    has_kitchen = models.BooleanField(default=False)
    has_parking = models.BooleanField(default=False)
    has_pool = models.BooleanField(default=False)
    has_gym = models.BooleanField(default=False)
    has_workspace = models.BooleanField(default=False)
    has_pets = models.BooleanField(default=False)
    has_cctv = models.BooleanField(default=False)
    is_verified = models.BooleanField(
        default=False,
        help_text=_("Only verified listings appear on the public index."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ListingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_verified"], name="listing_verified_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    @property
    def amenities(self) -> set[str]:
        """Names of enabled amenities (``wifi``, ``pool`` ...)."""
        return {name.removeprefix("has_") for name in AMENITY_FIELDS if getattr(self, name)}

    def verify(self) -> None:
        if not self.is_verified:
            self.is_verified = True
            self.save(update_fields=["is_verified", "updated_at"])
