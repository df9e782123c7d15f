"""Reservation domain models for airHost."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Reservation(models.Model):
    """Бронирование объекта гостем."""

    class Status(models.TextChoices):
        PENDING = "Pending", _("Pending")
        CONFIRMED = "Confirmed", _("Confirmed")
        CANCELLED = "Cancelled", _("Cancelled")

    guest = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="reservations",
    )
    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="reservations",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    adults = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    children = models.PositiveSmallIntegerField(default=0)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    is_verified = models.BooleanField(default=False)

    # Snapshot of the pricing breakdown at the time the reservation was priced
    nights = models.PositiveSmallIntegerField(default=1)
    nightly_rate = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    base_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    cleaning_fee = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    service_fee = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    tax = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Total computed by the pricing engine."),
    )

    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="reservation_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["listing", "check_in", "check_out"], name="reservation_listing_dates_idx"),
            models.Index(fields=["status"], name="reservation_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation #{self.pk} for listing {self.listing_id}"

    @property
    def is_cancelled(self) -> bool:
        return self.status == self.Status.CANCELLED

    @property
    def party_size(self) -> int:
        return self.adults + self.children

    def apply_quote(self, quote) -> None:
        """Copy a ``PriceQuote`` onto the stored breakdown."""
        self.nights = quote.nights
        self.nightly_rate = quote.nightly_rate
        self.base_price = quote.base_price
        self.cleaning_fee = quote.cleaning_fee
        self.service_fee = quote.service_fee
        self.subtotal = quote.subtotal
        self.tax = quote.tax
        self.price = quote.total

    def mark_cancelled(self) -> None:
        self.status = self.Status.CANCELLED
        self.cancelled_at = timezone.now()
        self.save(update_fields=["status", "cancelled_at", "updated_at"])
