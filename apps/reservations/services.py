"""Domain services for reservation workflows."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any

from django.db import transaction  # type: ignore
from django.db.models import QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.domain.exceptions import (
    Forbidden,
    InvalidData,
    MissingId,
    NotFound,
    ReservationConflict,
    Unauthorized,
)
from shared.domain.value_objects import DateRange

from .models import Reservation

if TYPE_CHECKING:
    from django.contrib.auth.models import AnonymousUser  # type: ignore

    from apps.listings.models import Listing
    from apps.users.models import User

logger = logging.getLogger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def _as_uuid(value: uuid.UUID | str | None) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _require_user(user: User | AnonymousUser | None) -> None:
    if user is None or not user.is_authenticated:
        raise Unauthorized()


def ensure_listing_is_available(listing: Listing, stay: DateRange) -> None:
    """Raise ``ReservationConflict`` when ``stay`` collides with a booking."""
    conflicts = Reservation.objects.filter(listing=listing).conflicting_with(
        stay.start_date, stay.end_date
    )
    conflicts = _lock_queryset_if_possible(conflicts)
    if conflicts.exists():
        raise ReservationConflict()


@transaction.atomic
def create_reservation(
    user: User | AnonymousUser | None,
    listing_id: uuid.UUID | str | None,
    start_date: date,
    end_date: date,
    total_price: int,
) -> Reservation:
    """Reserve ``[start_date, end_date]`` of a listing for ``user``."""
    from apps.listings.models import Listing  # Local import to prevent circular dependency

    if not listing_id:
        raise MissingId("Listing ID is required")
    _require_user(user)

    key = _as_uuid(listing_id)
    listing = Listing.objects.filter(pk=key).first() if key is not None else None
    if listing is None:
        raise NotFound("Listing not found")

    try:
        stay = DateRange(start_date, end_date)
    except ValueError as exc:
        raise InvalidData(str(exc)) from exc

    ensure_listing_is_available(listing, stay)

    reservation = Reservation.objects.create(
        listing=listing,
        user=user,
        start_date=stay.start_date,
        end_date=stay.end_date,
        total_price=total_price,
    )
    logger.info("Reservation %s created for listing %s by user %s", reservation.pk, listing.pk, user.pk)
    return reservation


def get_reservations_for(
    user: User | AnonymousUser | None,
    params: Mapping[str, Any] | None = None,
) -> QuerySet:
    """Reservations ``user`` may see: own trips, or bookings on own listings.

    Without filters the caller's trips are returned. ``user_id`` and
    ``author_id`` must name the caller and ``listing_id`` must be one of the
    caller's listings, otherwise ``Forbidden`` is raised.
    """
    from apps.listings.models import Listing  # Local import to prevent circular dependency

    _require_user(user)
    params = params or {}
    if not any(params.get(key) for key in ("listing_id", "user_id", "author_id")):
        return get_reservations({"user_id": str(user.pk)})

    for key in ("user_id", "author_id"):
        value = params.get(key)
        if value and str(value) != str(user.pk):
            logger.warning("User %s tried to read reservations with %s=%s", user.pk, key, value)
            raise Forbidden("You are not authorized to view these reservations")

    listing_id = params.get("listing_id")
    if listing_id:
        key = _as_uuid(listing_id)
        if key is None or not Listing.objects.filter(pk=key, owner_id=user.pk).exists():
            logger.warning("User %s tried to read reservations of listing %s", user.pk, listing_id)
            raise Forbidden("You are not authorized to view these reservations")

    return get_reservations(params)


def get_reservations(params: Mapping[str, Any] | None = None) -> QuerySet:
    """Reservations filtered by listing, guest (trips) or host (author)."""
    params = params or {}
    qs = Reservation.objects.select_related("listing", "user").order_by("-created_at")

    listing_id = params.get("listing_id")
    user_id = params.get("user_id")
    author_id = params.get("author_id")

    if listing_id:
        key = _as_uuid(listing_id)
        if key is None:
            return qs.none()
        qs = qs.filter(listing_id=key)
    if user_id:
        if not str(user_id).isdigit():
            return qs.none()
        qs = qs.filter(user_id=int(user_id))
    if author_id:
        if not str(author_id).isdigit():
            return qs.none()
        qs = qs.filter(listing__owner_id=int(author_id))
    return qs


def delete_reservation(user: User | AnonymousUser | None, reservation_id: uuid.UUID | str | None) -> None:
    """Cancel a reservation; allowed for its guest and for the listing host."""
    if not reservation_id:
        raise MissingId("Reservation ID is required")
    _require_user(user)

    key = _as_uuid(reservation_id)
    reservation = (
        Reservation.objects.select_related("listing").filter(pk=key).first()
        if key is not None
        else None
    )
    if reservation is None:
        raise NotFound("Reservation not found")

    if user.pk not in (reservation.user_id, reservation.listing.owner_id):
        logger.warning("User %s tried to cancel reservation %s", user.pk, reservation.pk)
        raise Forbidden("You are not authorized to cancel this reservation")

    reservation.delete()
    logger.info("Reservation %s cancelled by user %s", key, user.pk)
