"""API tests for reservations."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.users.models import User


class ReservationAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = User.objects.create_user(username="host", email="host@example.com", password="secret1")
        self.guest = User.objects.create_user(username="guest", email="guest@example.com", password="secret1")
        self.other = User.objects.create_user(username="other", email="other@example.com", password="secret1")
        self.admin = User.objects.create_user(
            username="admin", email="admin@example.com", password="secret1", role=User.RoleChoices.ADMIN
        )
        self.listing = Listing.objects.create(
            owner=self.host,
            title="Royal Heritage Haveli",
            description="Restored haveli in the old city.",
            price=Decimal("1000"),
            cleaning_fee=Decimal("200"),
            location="Jaipur",
            country="India",
            guests=4,
            is_verified=True,
        )
        self.payload = {
            "listing": self.listing.pk,
            "check_in": "2024-01-01",
            "check_out": "2024-01-04",
            "adults": 2,
        }

    def _book(self) -> Reservation:
        self.client.force_authenticate(self.guest)
        response = self.client.post(reverse("reservation-list"), self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return Reservation.objects.get(pk=response.data["id"])

    def test_create_ignores_client_price(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("reservation-list"), {**self.payload, "price": "1.00"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Decimal(response.data["price"]), Decimal("3882"))
        reservation = Reservation.objects.get()
        self.assertEqual(reservation.price, Decimal("3882"))
        self.assertEqual(reservation.guest, self.guest)
        self.assertEqual(reservation.status, Reservation.Status.PENDING)

    def test_create_ignores_status_from_guest(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("reservation-list"), {**self.payload, "status": "Confirmed"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Reservation.objects.get().status, Reservation.Status.PENDING)

    def test_create_rejects_bad_dates(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("reservation-list"), {**self.payload, "check_out": "2024-01-01"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Reservation.objects.exists())

    def test_create_rejects_party_over_capacity(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("reservation-list"), {**self.payload, "adults": 3, "children": 2}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "capacity_exceeded")

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(reverse("reservation-list"), self.payload, format="json")
        self.assertIn(response.status_code, {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN})

    def test_guest_lists_only_own(self) -> None:
        self._book()
        self.client.force_authenticate(self.other)

        response = self.client.get(reverse("reservation-list"))
        self.assertEqual(response.data["count"], 0)

        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("reservation-list"))
        self.assertEqual(response.data["count"], 1)

    def test_partial_update_reprices_and_strips_status(self) -> None:
        reservation = self._book()

        response = self.client.patch(
            reverse("reservation-detail", args=[reservation.pk]),
            {"check_out": "2024-01-02", "status": "Confirmed", "price": "5"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        reservation.refresh_from_db()
        self.assertEqual(reservation.nights, 1)
        self.assertEqual(reservation.price, Decimal("1451"))
        self.assertEqual(reservation.status, Reservation.Status.PENDING)

    def test_other_user_update_looks_missing(self) -> None:
        reservation = self._book()
        self.client.force_authenticate(self.other)

        response = self.client.patch(
            reverse("reservation-detail", args=[reservation.pk]), {"adults": 1}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        response = self.client.get(reverse("reservation-detail", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        reservation.refresh_from_db()
        self.assertEqual(reservation.adults, 2)

    def test_malformed_id_is_not_found(self) -> None:
        self._book()

        response = self.client.patch(reverse("reservation-detail", args=["abc"]), {"adults": 1}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

        response = self.client.post(reverse("reservation-cancel", args=["abc"]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_cancel_then_update_is_locked(self) -> None:
        reservation = self._book()

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(reverse("reservation-cancel", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], Reservation.Status.CANCELLED)

        response = self.client.patch(
            reverse("reservation-detail", args=[reservation.pk]), {"adults": 1}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "reservation_locked")
        reservation.refresh_from_db()
        self.assertEqual(reservation.adults, 2)

        response = self.client.post(reverse("reservation-cancel", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_other_user_cancel_looks_missing(self) -> None:
        reservation = self._book()
        self.client.force_authenticate(self.other)

        response = self.client.post(reverse("reservation-cancel", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        reservation.refresh_from_db()
        self.assertEqual(reservation.status, Reservation.Status.PENDING)

    def test_only_admin_can_delete(self) -> None:
        reservation = self._book()

        response = self.client.delete(reverse("reservation-detail", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.admin)
        response = self.client.delete(reverse("reservation-detail", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Reservation.objects.exists())
        self.assertTrue(Listing.objects.filter(pk=self.listing.pk).exists())

        response = self.client.delete(reverse("reservation-detail", args=[reservation.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_quote_preview(self) -> None:
        response = self.client.get(
            reverse("reservation-quote"),
            {"listing": self.listing.pk, "check_in": "2024-01-01", "check_out": "2024-01-04"},
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(Decimal(response.data["total"]), Decimal("3882"))
        self.assertFalse(Reservation.objects.exists())

    def test_admin_status_endpoint(self) -> None:
        reservation = self._book()
        self.client.force_authenticate(self.admin)

        url = reverse("dashboard-reservation-status", args=[reservation.pk])
        response = self.client.post(url, {"status": "Confirmed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "Confirmed")

        response = self.client.post(url, {"status": "Archived"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
