"""Cursor pagination for listing reads.

Listings are served newest first in fixed-size batches. The cursor is the
id of the last listing of the previous batch; the next batch starts
strictly after it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from django.conf import settings  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore

from .models import Listing

ORDERING = ("-created_at", "-id")


@dataclass(frozen=True)
class ListingPage:
    listings: list[Listing] = field(default_factory=list)
    next_cursor: str | None = None

    @classmethod
    def empty(cls) -> "ListingPage":
        return cls()


def resolve_batch_size(batch_size: int | None = None) -> int:
    """Return ``batch_size`` or the configured ``LISTINGS_BATCH``."""
    if batch_size is None:
        batch_size = settings.LISTINGS_BATCH
    if batch_size < 1:
        raise ValueError(f"Batch size must be positive, got {batch_size}")
    return batch_size


def _parse_cursor(cursor: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(cursor, uuid.UUID):
        return cursor
    try:
        return uuid.UUID(str(cursor))
    except ValueError:
        return None


def paginate(
    queryset: QuerySet,
    cursor: str | uuid.UUID | None = None,
    batch_size: int | None = None,
) -> ListingPage:
    """Take one batch of ``queryset`` after ``cursor``.

    ``next_cursor`` is only emitted for a full batch; a short batch is
    taken to mean the results are exhausted.
    """
    batch_size = resolve_batch_size(batch_size)
    queryset = queryset.order_by(*ORDERING)

    if cursor:
        cursor_id = _parse_cursor(cursor)
        anchor = (
            Listing.objects.filter(pk=cursor_id).values("created_at", "id").first()
            if cursor_id is not None
            else None
        )
        if anchor is None:
            return ListingPage.empty()
        queryset = queryset.filter(
            Q(created_at__lt=anchor["created_at"])
            | Q(created_at=anchor["created_at"], id__lt=anchor["id"])
        )

    listings = list(queryset[:batch_size])
    next_cursor = str(listings[-1].pk) if len(listings) == batch_size else None
    return ListingPage(listings=listings, next_cursor=next_cursor)
