"""Listing search filters.

``ListingFilterSet`` parses the flat query string, ``ListingQuery`` holds
the recognised options with explicit presence (``None`` means absent) and
``build_listing_predicate`` turns them into a single ``Q`` for the ORM.
Malformed values fail form validation and are left out of the predicate,
so filtering never raises.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from apps.reservations.models import Reservation

from .models import Listing

# Accepts plain dates as well as the ISO timestamps browsers send.
DATE_INPUT_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
]

THRESHOLD_FIELDS = ("room_count", "guest_count", "bathroom_count")


@dataclass(frozen=True)
class ListingQuery:
    """Recognised listing filters, each either present or ``None``."""

    user_id: int | None = None
    category: str | None = None
    country: str | None = None
    room_count: int | None = None
    guest_count: int | None = None
    bathroom_count: int | None = None
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def from_cleaned_data(cls, cleaned: Mapping[str, Any]) -> "ListingQuery":
        def text(name: str) -> str | None:
            return cleaned.get(name) or None

        def number(name: str) -> int | None:
            value = cleaned.get(name)
            if value is None:
                return None
            # counts are integers: "at least 2.5 rooms" means at least 3
            return math.ceil(value)

        def identity(name: str) -> int | None:
            value = cleaned.get(name)
            if value is None or value != int(value):
                return None
            return int(value)

        return cls(
            user_id=identity("user_id"),
            category=text("category"),
            country=text("country"),
            room_count=number("room_count"),
            guest_count=number("guest_count"),
            bathroom_count=number("bathroom_count"),
            start_date=cleaned.get("start_date"),
            end_date=cleaned.get("end_date"),
        )

    @property
    def has_dates(self) -> bool:
        return self.start_date is not None and self.end_date is not None


def build_listing_predicate(query: ListingQuery) -> Q:
    """Build the ``Q`` selecting listings that match ``query``.

    An empty query yields ``Q()``, which matches every listing.
    """
    predicate = Q()

    if query.user_id is not None:
        predicate &= Q(owner_id=query.user_id)
    if query.category:
        predicate &= Q(category=query.category)
    if query.country:
        predicate &= Q(country=query.country)

    for field in THRESHOLD_FIELDS:
        requested = getattr(query, field)
        if requested is not None:
            predicate &= Q(**{f"{field}__gte": requested})

    if query.has_dates:
        busy_listings = Reservation.objects.conflicting_with(
            query.start_date, query.end_date
        ).values("listing_id")
        predicate &= ~Q(pk__in=busy_listings)

    return predicate


def normalize_params(params: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Reduce multi-valued entries of a plain mapping to their first value."""
    if params is None:
        return {}
    if hasattr(params, "getlist"):
        return params
    normalized: dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        normalized[key] = value
    return normalized


class ListingFilterSet(django_filters.FilterSet):
    """FilterSet parsing the listing query string into a ``ListingQuery``."""

    user_id = django_filters.NumberFilter(field_name="owner_id")
    category = django_filters.CharFilter(field_name="category")
    country = django_filters.CharFilter(field_name="country")

    room_count = django_filters.NumberFilter(field_name="room_count", lookup_expr="gte")
    guest_count = django_filters.NumberFilter(field_name="guest_count", lookup_expr="gte")
    bathroom_count = django_filters.NumberFilter(field_name="bathroom_count", lookup_expr="gte")

    start_date = django_filters.DateFilter(input_formats=DATE_INPUT_FORMATS)
    end_date = django_filters.DateFilter(input_formats=DATE_INPUT_FORMATS)

    class Meta:
        model = Listing
        fields: list[str] = []

    def __init__(self, data=None, *args, **kwargs):  # type: ignore
        super().__init__(normalize_params(data), *args, **kwargs)

    def get_query(self) -> ListingQuery:
        # invalid fields are absent from cleaned_data
        self.form.is_valid()
        return ListingQuery.from_cleaned_data(self.form.cleaned_data)

    def filter_queryset(self, queryset):  # type: ignore
        return queryset.filter(build_listing_predicate(self.get_query()))
