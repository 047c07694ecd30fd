"""API tests for the listing endpoints."""

from __future__ import annotations

import uuid
from datetime import date

from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.favorites.models import Favorite
from apps.listings.models import Listing
from apps.reservations.models import Reservation

from .utils import listing_payload, make_listing, make_user


@override_settings(LISTINGS_BATCH=2)
class ListingReadAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.oldest = make_listing(self.host, age_minutes=30, room_count=1)
        self.middle = make_listing(self.host, age_minutes=20, room_count=4)
        self.newest = make_listing(self.host, age_minutes=10, room_count=5)

    def test_list_is_public_and_paginated(self) -> None:
        response = self.client.get(reverse("listing-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [item["id"] for item in response.data["listings"]]
        self.assertEqual(ids, [str(self.newest.pk), str(self.middle.pk)])
        self.assertEqual(response.data["next_cursor"], str(self.middle.pk))

        response = self.client.get(reverse("listing-list"), {"cursor": response.data["next_cursor"]})
        ids = [item["id"] for item in response.data["listings"]]
        self.assertEqual(ids, [str(self.oldest.pk)])
        self.assertIsNone(response.data["next_cursor"])

    def test_list_applies_query_filters(self) -> None:
        response = self.client.get(reverse("listing-list"), {"room_count": "4"})
        ids = {item["id"] for item in response.data["listings"]}
        self.assertEqual(ids, {str(self.newest.pk), str(self.middle.pk)})

    def test_list_marks_callers_favorites(self) -> None:
        guest = make_user()
        Favorite.objects.create(user=guest, listing=self.newest)
        self.client.force_authenticate(user=guest)

        response = self.client.get(reverse("listing-list"))
        flags = {item["id"]: item["is_favorite"] for item in response.data["listings"]}
        self.assertEqual(flags, {str(self.newest.pk): True, str(self.middle.pk): False})

    def test_detail_includes_host_and_reservations(self) -> None:
        Reservation.objects.create(
            listing=self.newest,
            user=make_user(),
            start_date=date(2024, 5, 1),
            end_date=date(2024, 5, 3),
            total_price=300,
        )
        response = self.client.get(reverse("listing-detail", args=[self.newest.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user_id"], self.host.pk)
        self.assertEqual(response.data["user"]["name"], self.host.name)
        self.assertEqual(
            response.data["reservations"], [{"start_date": "2024-05-01", "end_date": "2024-05-03"}]
        )

    def test_detail_of_unknown_listing_is_404(self) -> None:
        response = self.client.get(reverse("listing-detail", args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ListingWriteAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.stranger = make_user()

    def test_create_requires_login(self) -> None:
        response = self.client.post(reverse("listing-list"), listing_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(Listing.objects.exists())

    def test_create_listing(self) -> None:
        self.client.force_authenticate(user=self.host)
        response = self.client.post(reverse("listing-list"), listing_payload(price="310"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["price"], 310)
        self.assertEqual(response.data["country"], "Spain")
        self.assertEqual(Listing.objects.get().owner, self.host)

    def test_create_with_empty_field_is_bad_request(self) -> None:
        self.client.force_authenticate(user=self.host)
        response = self.client.post(reverse("listing-list"), listing_payload(title=""), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Invalid data", str(response.data))

    def test_negative_price_is_bad_request(self) -> None:
        self.client.force_authenticate(user=self.host)
        response = self.client.post(reverse("listing-list"), listing_payload(price="-5"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        listing = make_listing(self.host, price=90)
        response = self.client.patch(
            reverse("listing-detail", args=[listing.pk]), {"price": "-5"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        listing.refresh_from_db()
        self.assertEqual(listing.price, 90)

    def test_owner_can_patch(self) -> None:
        listing = make_listing(self.host, room_count=2)
        self.client.force_authenticate(user=self.host)

        response = self.client.patch(
            reverse("listing-detail", args=[listing.pk]), {"room_count": 0}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["room_count"], 0)

    def test_stranger_cannot_patch_or_delete(self) -> None:
        listing = make_listing(self.host, title="Mine")
        self.client.force_authenticate(user=self.stranger)

        response = self.client.patch(
            reverse("listing-detail", args=[listing.pk]), {"title": "Yours"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.delete(reverse("listing-detail", args=[listing.pk]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        listing.refresh_from_db()
        self.assertEqual(listing.title, "Mine")

    def test_owner_can_delete(self) -> None:
        listing = make_listing(self.host)
        self.client.force_authenticate(user=self.host)

        response = self.client.delete(reverse("listing-detail", args=[listing.pk]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Listing.objects.exists())

    def test_update_of_unknown_listing_is_404(self) -> None:
        self.client.force_authenticate(user=self.host)
        response = self.client.patch(
            reverse("listing-detail", args=[uuid.uuid4()]), {"title": "x"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
