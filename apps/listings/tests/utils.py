"""Helpers shared by the listing, reservation and favorite tests."""

from __future__ import annotations

from datetime import timedelta
from itertools import count
from typing import Any

from django.utils import timezone

from apps.listings.models import Listing
from apps.users.models import User

_sequence = count(1)


def make_user(**extra: Any) -> User:
    n = next(_sequence)
    extra.setdefault("name", f"User {n}")
    return User.objects.create_user(email=f"user{n}@example.com", password="StrongPass123", **extra)


def make_listing(owner: User, *, age_minutes: int | None = None, **fields: Any) -> Listing:
    defaults: dict[str, Any] = {
        "title": "Cozy flat",
        "description": "Two rooms near the old town.",
        "image_src": "https://img.example.com/flat.jpg",
        "category": "Beach",
        "room_count": 2,
        "bathroom_count": 1,
        "guest_count": 3,
        "country": "Portugal",
        "region": "Europe",
        "latlng": [38.7, -9.1],
        "price": 120,
    }
    defaults.update(fields)
    listing = Listing.objects.create(owner=owner, **defaults)
    if age_minutes is not None:
        created_at = timezone.now() - timedelta(minutes=age_minutes)
        Listing.objects.filter(pk=listing.pk).update(created_at=created_at)
        listing.refresh_from_db()
    return listing


def listing_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "title": "Sea view loft",
        "description": "Bright loft with a terrace.",
        "image": "https://img.example.com/loft.jpg",
        "category": "Beach",
        "room_count": 3,
        "bathroom_count": 2,
        "guest_count": 4,
        "location": {"label": "Spain", "region": "Europe", "latlng": [41.4, 2.2]},
        "price": "250",
    }
    payload.update(overrides)
    return payload
