"""Domain services for favorites."""

from __future__ import annotations

import logging
import uuid

from django.db.models import QuerySet  # type: ignore

from apps.listings.models import Listing
from shared.domain.exceptions import MissingId, NotFound, Unauthorized

from .models import Favorite

logger = logging.getLogger(__name__)


def _is_anonymous(user) -> bool:  # type: ignore
    return user is None or not user.is_authenticated


def update_favorite(user, listing_id, favorite: bool) -> bool:  # type: ignore
    """Make ``listing_id`` a favorite of ``user`` (or not) and return the new state.

    Idempotent: favoriting twice keeps one row, unfavoriting a listing that
    is not a favorite is a no-op.
    """
    if not listing_id:
        raise MissingId("Listing ID is required")
    if _is_anonymous(user):
        raise Unauthorized()

    try:
        key = listing_id if isinstance(listing_id, uuid.UUID) else uuid.UUID(str(listing_id))
    except ValueError:
        raise NotFound("Listing not found")
    if not Listing.objects.filter(pk=key).exists():
        raise NotFound("Listing not found")

    if favorite:
        _, created = Favorite.objects.get_or_create(user=user, listing_id=key)
        if created:
            logger.info("User %s favorited listing %s", user.pk, key)
    else:
        deleted, _ = Favorite.objects.filter(user=user, listing_id=key).delete()
        if deleted:
            logger.info("User %s unfavorited listing %s", user.pk, key)
    return bool(favorite)


def get_favorite_listings(user) -> QuerySet:  # type: ignore
    """Listings favorited by ``user``, most recently favorited first."""
    if _is_anonymous(user):
        raise Unauthorized()
    return Listing.objects.filter(favorited_by__user=user).order_by("-favorited_by__created_at")


def get_favorite_ids(user) -> set[uuid.UUID]:  # type: ignore
    """Ids of the listings ``user`` favorited; empty for anonymous callers."""
    if _is_anonymous(user):
        return set()
    return set(Favorite.objects.filter(user=user).values_list("listing_id", flat=True))


def is_favorite(user, listing_id) -> bool:  # type: ignore
    if _is_anonymous(user):
        return False
    try:
        key = listing_id if isinstance(listing_id, uuid.UUID) else uuid.UUID(str(listing_id))
    except ValueError:
        return False
    return Favorite.objects.filter(user=user, listing_id=key).exists()
