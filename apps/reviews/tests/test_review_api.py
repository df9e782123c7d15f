"""API tests for reviews."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.listings.models import Listing
from apps.reviews.models import Review
from apps.users.models import User


class ReviewAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(username="sara", email="sara@example.com", password="secret1")
        self.author = User.objects.create_user(username="john", email="john@example.com", password="secret1")
        self.stranger = User.objects.create_user(username="rahul", email="rahul@example.com", password="secret1")
        self.admin = User.objects.create_user(
            username="admin", email="admin@example.com", password="secret1", role=User.RoleChoices.ADMIN
        )
        self.listing = Listing.objects.create(
            owner=self.owner,
            title="Backwater Houseboat",
            description="Houseboat on the Kerala backwaters.",
            price=Decimal("4200"),
            location="Alleppey",
            country="India",
            is_verified=True,
        )
        self.list_url = reverse("listing-reviews", args=[self.listing.pk])

    def test_create_review(self) -> None:
        self.client.force_authenticate(self.author)

        response = self.client.post(self.list_url, {"rating": 5, "comment": "  Best trip!  "}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        review = Review.objects.get()
        self.assertEqual(review.author, self.author)
        self.assertEqual(review.listing, self.listing)
        self.assertEqual(review.comment, "Best trip!")
        self.assertEqual(list(self.listing.reviews.values_list("pk", flat=True)), [review.pk])

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(self.list_url, {"rating": 5, "comment": "Nice"}, format="json")
        self.assertIn(response.status_code, {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN})

    def test_rating_out_of_range_and_blank_comment(self) -> None:
        self.client.force_authenticate(self.author)

        response = self.client.post(self.list_url, {"rating": 6, "comment": "   "}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("rating", response.data)
        self.assertIn("comment", response.data)
        self.assertFalse(Review.objects.exists())

    def test_cannot_review_hidden_listing(self) -> None:
        self.listing.is_verified = False
        self.listing.save()
        self.client.force_authenticate(self.author)

        response = self.client.post(self.list_url, {"rating": 4, "comment": "Nice"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_reviews_of_listing(self) -> None:
        Review.objects.create(author=self.author, listing=self.listing, rating=4, comment="Calm")

        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["results"][0]["author_name"], "john")

    def test_author_can_delete(self) -> None:
        review = Review.objects.create(author=self.author, listing=self.listing, rating=4, comment="Calm")
        self.client.force_authenticate(self.author)

        response = self.client.delete(reverse("review-detail", args=[review.pk]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Review.objects.exists())
        self.assertTrue(Listing.objects.filter(pk=self.listing.pk).exists())

    def test_stranger_cannot_delete(self) -> None:
        review = Review.objects.create(author=self.author, listing=self.listing, rating=4, comment="Calm")
        self.client.force_authenticate(self.stranger)

        response = self.client.delete(reverse("review-detail", args=[review.pk]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Review.objects.filter(pk=review.pk).exists())

    def test_admin_can_delete(self) -> None:
        review = Review.objects.create(author=self.author, listing=self.listing, rating=4, comment="Calm")
        self.client.force_authenticate(self.admin)

        response = self.client.delete(reverse("review-detail", args=[review.pk]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Review.objects.exists())
