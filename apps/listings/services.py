"""Domain services for listing reads and owner-guarded mutations."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from django.contrib.auth.models import AnonymousUser  # type: ignore
from django.db.models import Prefetch, QuerySet  # type: ignore

from apps.reservations.models import Reservation
from apps.users.models import User
from shared.domain.exceptions import Forbidden, MissingId, NotFound, Unauthorized

from .filters import ListingFilterSet, normalize_params
from .models import Listing
from .pagination import ListingPage, paginate, resolve_batch_size
from .payloads import ListingChanges

logger = logging.getLogger(__name__)

Caller = Union[User, AnonymousUser, None]
ListingId = Union[uuid.UUID, str, None]


@dataclass(frozen=True)
class ListingsResult:
    """Outcome of a listing read: a page, or the reason it failed."""

    page: ListingPage | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, page: ListingPage) -> "ListingsResult":
        return cls(page=page)

    @classmethod
    def failure(cls, reason: str) -> "ListingsResult":
        return cls(error=reason)


def fetch_listings(
    params: Mapping[str, Any] | None = None,
    *,
    batch_size: int | None = None,
) -> ListingsResult:
    """Filter and paginate listings, reporting storage failures explicitly."""
    batch_size = resolve_batch_size(batch_size)
    params = normalize_params(params)

    try:
        filterset = ListingFilterSet(params, queryset=Listing.objects.all())
        page = paginate(filterset.qs, params.get("cursor"), batch_size)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Listing query failed: %s", exc)
        return ListingsResult.failure(str(exc) or type(exc).__name__)

    return ListingsResult.success(page)


def get_listings(
    params: Mapping[str, Any] | None = None,
    *,
    batch_size: int | None = None,
) -> ListingPage:
    """Return one page of listings; failures degrade to an empty page."""
    result = fetch_listings(params, batch_size=batch_size)
    if not result.ok:
        return ListingPage.empty()
    return result.page  # type: ignore[return-value]


def _lookup(listing_id: ListingId, queryset: QuerySet | None = None) -> Listing | None:
    queryset = queryset if queryset is not None else Listing.objects.all()
    try:
        key = listing_id if isinstance(listing_id, uuid.UUID) else uuid.UUID(str(listing_id))
    except ValueError:
        return None
    return queryset.filter(pk=key).first()


def get_listing_by_id(listing_id: ListingId) -> Listing | None:
    """Return a listing with its host and reservation dates attached."""
    queryset = Listing.objects.select_related("owner").prefetch_related(
        Prefetch("reservations", queryset=Reservation.objects.order_by("start_date"))
    )
    return _lookup(listing_id, queryset)


def _require_user(user: Caller) -> None:
    if user is None or not user.is_authenticated:
        raise Unauthorized()


def _get_owned_listing(user: Caller, listing_id: ListingId, verb: str) -> Listing:
    if not listing_id:
        raise MissingId("Listing ID is required")
    _require_user(user)

    listing = _lookup(listing_id)
    if listing is None:
        raise NotFound("Listing not found")
    if listing.owner_id != user.pk:
        logger.warning("User %s tried to %s listing %s owned by %s", user.pk, verb, listing.pk, listing.owner_id)
        raise Forbidden(f"You are not authorized to {verb} this listing")
    return listing


def create_listing(user: Caller, data: Mapping[str, Any]) -> Listing:
    """Publish a new listing owned by ``user``."""
    changes = ListingChanges.for_create(data)
    _require_user(user)

    listing = Listing.objects.create(owner=user, **changes.as_fields())
    logger.info("Listing %s created by user %s", listing.pk, user.pk)
    return listing


def update_listing(user: Caller, listing_id: ListingId, data: Mapping[str, Any]) -> Listing:
    """Merge ``data`` into a listing owned by ``user`` and return it."""
    listing = _get_owned_listing(user, listing_id, "update")

    changed = ListingChanges.for_update(data or {}).apply(listing)
    if changed:
        listing.save(update_fields=changed)
    logger.info("Listing %s updated by user %s: %s", listing.pk, user.pk, ", ".join(changed) or "no changes")
    return listing


def delete_listing(user: Caller, listing_id: ListingId) -> None:
    """Delete a listing owned by ``user`` together with its reservations."""
    listing = _get_owned_listing(user, listing_id, "delete")
    pk = listing.pk
    listing.delete()
    logger.info("Listing %s deleted by user %s", pk, user.pk)
