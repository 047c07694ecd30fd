"""Tests for listing search filters."""

from __future__ import annotations

from datetime import date

from django.db.models import Q
from django.test import TestCase

from apps.listings.filters import ListingFilterSet, ListingQuery, build_listing_predicate
from apps.listings.models import Listing
from apps.reservations.models import Reservation

from .utils import make_listing, make_user


def _filtered(params) -> set:  # type: ignore
    return set(ListingFilterSet(params, queryset=Listing.objects.all()).qs.values_list("pk", flat=True))


class ListingQueryTests(TestCase):
    def test_empty_query_is_unconstrained(self) -> None:
        self.assertEqual(build_listing_predicate(ListingQuery()), Q())

    def test_parsing_keeps_only_recognised_values(self) -> None:
        query = ListingFilterSet({"room_count": "3", "category": "", "country": "Spain", "foo": "bar"}).get_query()
        self.assertEqual(query, ListingQuery(room_count=3, country="Spain"))

    def test_malformed_count_is_dropped(self) -> None:
        query = ListingFilterSet({"room_count": "abc", "guest_count": "2"}).get_query()
        self.assertIsNone(query.room_count)
        self.assertEqual(query.guest_count, 2)

    def test_fractional_count_rounds_up(self) -> None:
        query = ListingFilterSet({"bathroom_count": "1.5"}).get_query()
        self.assertEqual(query.bathroom_count, 2)

    def test_fractional_user_id_is_dropped(self) -> None:
        query = ListingFilterSet({"user_id": "1.5"}).get_query()
        self.assertIsNone(query.user_id)
        self.assertEqual(ListingFilterSet({"user_id": "2.0"}).get_query().user_id, 2)

    def test_list_values_use_first_item(self) -> None:
        query = ListingFilterSet({"category": ["Beach", "Lake"]}).get_query()
        self.assertEqual(query.category, "Beach")

    def test_dates_accept_iso_timestamps(self) -> None:
        query = ListingFilterSet(
            {"start_date": "2024-01-12T00:00:00.000Z", "end_date": "2024-01-20"}
        ).get_query()
        self.assertEqual(query.start_date, date(2024, 1, 12))
        self.assertEqual(query.end_date, date(2024, 1, 20))
        self.assertTrue(query.has_dates)


class ListingFilterTests(TestCase):
    def setUp(self) -> None:
        self.host = make_user()
        self.other_host = make_user()
        self.small = make_listing(self.host, room_count=1, guest_count=2, bathroom_count=1)
        self.large = make_listing(
            self.other_host,
            room_count=4,
            guest_count=8,
            bathroom_count=3,
            category="Mountain",
            country="Austria",
        )
        self.empty_rooms = make_listing(self.host, room_count=0)

    def test_no_filters_match_everything(self) -> None:
        self.assertEqual(_filtered({}), {self.small.pk, self.large.pk, self.empty_rooms.pk})

    def test_room_count_is_a_minimum(self) -> None:
        self.assertEqual(_filtered({"room_count": "3"}), {self.large.pk})
        self.assertEqual(_filtered({"room_count": "1"}), {self.small.pk, self.large.pk})

    def test_zero_threshold_is_applied(self) -> None:
        self.assertEqual(
            _filtered({"room_count": "0"}), {self.small.pk, self.large.pk, self.empty_rooms.pk}
        )

    def test_guest_and_bathroom_thresholds_combine(self) -> None:
        self.assertEqual(_filtered({"guest_count": "3", "bathroom_count": "2"}), {self.large.pk})

    def test_malformed_threshold_is_ignored(self) -> None:
        self.assertEqual(
            _filtered({"room_count": "abc"}), {self.small.pk, self.large.pk, self.empty_rooms.pk}
        )

    def test_equality_filters(self) -> None:
        self.assertEqual(_filtered({"category": "Mountain"}), {self.large.pk})
        self.assertEqual(_filtered({"country": "Portugal"}), {self.small.pk, self.empty_rooms.pk})
        self.assertEqual(_filtered({"user_id": str(self.other_host.pk)}), {self.large.pk})

    def test_fractional_user_id_matches_no_owner_filter(self) -> None:
        everything = {self.small.pk, self.large.pk, self.empty_rooms.pk}
        self.assertEqual(_filtered({"user_id": f"{self.host.pk}.5"}), everything)


class DateExclusionTests(TestCase):
    def setUp(self) -> None:
        host = make_user()
        guest = make_user()
        self.booked = make_listing(host)
        self.free = make_listing(host)
        Reservation.objects.create(
            listing=self.booked,
            user=guest,
            start_date=date(2024, 1, 10),
            end_date=date(2024, 1, 15),
            total_price=500,
        )

    def _search(self, start: str, end: str) -> set:  # type: ignore
        return _filtered({"start_date": start, "end_date": end})

    def test_reservation_covering_requested_start_excludes_listing(self) -> None:
        self.assertEqual(self._search("2024-01-12", "2024-01-20"), {self.free.pk})

    def test_reservation_covering_requested_end_excludes_listing(self) -> None:
        self.assertEqual(self._search("2024-01-05", "2024-01-12"), {self.free.pk})

    def test_boundaries_are_inclusive(self) -> None:
        self.assertEqual(self._search("2024-01-15", "2024-01-18"), {self.free.pk})
        self.assertEqual(self._search("2024-01-01", "2024-01-10"), {self.free.pk})

    def test_disjoint_range_keeps_listing(self) -> None:
        self.assertEqual(self._search("2024-01-01", "2024-01-05"), {self.booked.pk, self.free.pk})

    def test_reservation_inside_requested_range_is_not_detected(self) -> None:
        # neither endpoint of the request falls inside [10, 15]
        self.assertEqual(self._search("2024-01-08", "2024-01-20"), {self.booked.pk, self.free.pk})

    def test_single_date_does_not_filter(self) -> None:
        self.assertEqual(_filtered({"start_date": "2024-01-12"}), {self.booked.pk, self.free.pk})
