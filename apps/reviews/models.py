"""Models for the review domain.

Defines the ``Review`` entity: a rating from 1 to 5 and a comment left by
a user on a listing. Reviews are removed together with their listing or
author by ``apps.core.cascade``.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Review(models.Model):
    """Represents a review left by a user for a listing."""

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="reviews",
    )
    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="reviews",
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text=_("Rating from 1 to 5"),
    )
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Review")
        verbose_name_plural = _("Reviews")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["listing", "-created_at"], name="review_listing_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Review by {self.author_id} for listing {self.listing_id} (Rating: {self.rating})"
