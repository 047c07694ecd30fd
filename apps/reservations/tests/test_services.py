"""Tests for reservation services."""

from __future__ import annotations

import uuid
from datetime import date

import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from apps.listings.tests.utils import make_listing, make_user
from apps.reservations.models import Reservation
from apps.reservations.services import (
    create_reservation,
    delete_reservation,
    get_reservations,
    get_reservations_for,
)
from shared.domain.exceptions import (
    Forbidden,
    InvalidData,
    MissingId,
    NotFound,
    ReservationConflict,
    Unauthorized,
)


class CreateReservationTests(TestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.guest = make_user()
        self.listing = make_listing(self.host, price=100)
        self.existing = create_reservation(
            self.guest, self.listing.pk, date(2024, 7, 10), date(2024, 7, 15), 500
        )

    def test_reservation_is_created(self) -> None:
        self.assertEqual(self.existing.user, self.guest)
        self.assertEqual(self.existing.listing, self.listing)
        self.assertEqual(len(self.existing.date_range), 5)

    def test_overlapping_stay_conflicts(self) -> None:
        for start, end in ((12, 20), (5, 10), (15, 16), (11, 14)):
            with self.subTest(start=start, end=end), self.assertRaises(ReservationConflict):
                create_reservation(self.guest, self.listing.pk, date(2024, 7, start), date(2024, 7, end), 100)
        self.assertEqual(Reservation.objects.count(), 1)

    def test_disjoint_stay_is_accepted(self) -> None:
        create_reservation(self.guest, str(self.listing.pk), date(2024, 7, 16), date(2024, 7, 18), 200)
        self.assertEqual(Reservation.objects.count(), 2)

    def test_other_listing_is_not_affected(self) -> None:
        other = make_listing(self.host)
        create_reservation(self.guest, other.pk, date(2024, 7, 10), date(2024, 7, 15), 500)
        self.assertEqual(Reservation.objects.filter(listing=other).count(), 1)

    def test_guards(self) -> None:
        with self.assertRaises(MissingId):
            create_reservation(self.guest, None, date(2024, 8, 1), date(2024, 8, 2), 100)
        with self.assertRaises(Unauthorized):
            create_reservation(AnonymousUser(), self.listing.pk, date(2024, 8, 1), date(2024, 8, 2), 100)
        with self.assertRaises(NotFound):
            create_reservation(self.guest, uuid.uuid4(), date(2024, 8, 1), date(2024, 8, 2), 100)
        with self.assertRaises(InvalidData):
            create_reservation(self.guest, self.listing.pk, date(2024, 8, 5), date(2024, 8, 1), 100)


class DeleteReservationTests(TestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.guest = make_user()
        listing = make_listing(self.host)
        self.reservation = create_reservation(
            self.guest, listing.pk, date(2024, 9, 1), date(2024, 9, 3), 200
        )

    def test_guest_can_cancel(self) -> None:
        delete_reservation(self.guest, self.reservation.pk)
        self.assertFalse(Reservation.objects.exists())

    def test_host_can_cancel(self) -> None:
        delete_reservation(self.host, str(self.reservation.pk))
        self.assertFalse(Reservation.objects.exists())

    def test_stranger_cannot_cancel(self) -> None:
        with self.assertRaises(Forbidden):
            delete_reservation(make_user(), self.reservation.pk)
        self.assertTrue(Reservation.objects.exists())

    def test_guards(self) -> None:
        with self.assertRaises(MissingId):
            delete_reservation(self.guest, "")
        with self.assertRaises(Unauthorized):
            delete_reservation(None, self.reservation.pk)
        with self.assertRaises(NotFound):
            delete_reservation(self.guest, uuid.uuid4())


@pytest.mark.django_db
def test_get_reservations_filters() -> None:
    host = make_user()
    other_host = make_user()
    guest = make_user()
    listing = make_listing(host)
    other_listing = make_listing(other_host)
    trip = create_reservation(guest, listing.pk, date(2024, 10, 1), date(2024, 10, 2), 100)
    hosted = create_reservation(host, other_listing.pk, date(2024, 10, 1), date(2024, 10, 2), 100)

    assert list(get_reservations({"listing_id": str(listing.pk)})) == [trip]
    assert list(get_reservations({"user_id": str(guest.pk)})) == [trip]
    assert list(get_reservations({"author_id": str(other_host.pk)})) == [hosted]
    assert set(get_reservations({})) == {trip, hosted}


@pytest.mark.django_db
def test_get_reservations_with_malformed_ids_is_empty() -> None:
    guest = make_user()
    create_reservation(guest, make_listing(make_user()).pk, date(2024, 10, 1), date(2024, 10, 2), 100)

    assert not get_reservations({"listing_id": "nope"}).exists()
    assert not get_reservations({"user_id": "abc"}).exists()
    assert not get_reservations({"author_id": "1.5"}).exists()


class ReservationVisibilityTests(TestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.guest = make_user()
        self.stranger = make_user()
        self.listing = make_listing(self.host)
        self.trip = create_reservation(self.guest, self.listing.pk, date(2024, 12, 1), date(2024, 12, 3), 200)

    def test_default_is_own_trips(self) -> None:
        self.assertEqual(list(get_reservations_for(self.guest, {})), [self.trip])
        self.assertEqual(list(get_reservations_for(self.stranger, {})), [])

    def test_own_filters_are_allowed(self) -> None:
        self.assertEqual(list(get_reservations_for(self.guest, {"user_id": str(self.guest.pk)})), [self.trip])
        self.assertEqual(list(get_reservations_for(self.host, {"author_id": self.host.pk})), [self.trip])
        self.assertEqual(list(get_reservations_for(self.host, {"listing_id": str(self.listing.pk)})), [self.trip])

    def test_foreign_filters_are_forbidden(self) -> None:
        for params in (
            {"user_id": str(self.guest.pk)},
            {"author_id": str(self.host.pk)},
            {"listing_id": str(self.listing.pk)},
            {"listing_id": "not-a-uuid"},
        ):
            with self.subTest(params=params), self.assertRaises(Forbidden):
                get_reservations_for(self.stranger, params)

    def test_anonymous_caller_is_unauthorized(self) -> None:
        with self.assertRaises(Unauthorized):
            get_reservations_for(AnonymousUser(), {})
