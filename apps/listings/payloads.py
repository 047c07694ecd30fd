"""Normalisation of listing payloads coming from the listing forms.

Payload shape::

    {
        "title": str, "description": str, "image": url, "category": str,
        "room_count": int, "bathroom_count": int, "guest_count": int,
        "location": {"label": country, "region": str, "latlng": [lat, lng]},
        "price": int | numeric str,
    }
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from shared.domain.exceptions import InvalidData

if TYPE_CHECKING:
    from .models import Listing

REQUIRED_KEYS = (
    "title",
    "description",
    "image",
    "category",
    "room_count",
    "bathroom_count",
    "guest_count",
    "location",
    "price",
)

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def parse_price(value: Any) -> int:
    """Coerce a price to a positive integer, keeping the leading digits of strings."""
    price = _leading_int(value)
    if price < 1:
        raise InvalidData("Invalid price")
    return price


def _leading_int(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidData("Invalid price")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidData("Invalid price")
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise InvalidData("Invalid price")
    return int(match.group())


def parse_count(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidData(f"Invalid {name}")
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidData(f"Invalid {name}")
    if count < 0:
        raise InvalidData(f"Invalid {name}")
    return count


def _location(data: Mapping[str, Any]) -> Mapping[str, Any]:
    location = data.get("location") or {}
    if not isinstance(location, Mapping):
        raise InvalidData("Invalid location")
    return location


@dataclass(frozen=True)
class ListingChanges:
    """Field values to write on a listing; ``None`` means "leave as is"."""

    title: str | None = None
    description: str | None = None
    image_src: str | None = None
    category: str | None = None
    room_count: int | None = None
    bathroom_count: int | None = None
    guest_count: int | None = None
    country: str | None = None
    region: str | None = None
    latlng: list | None = None
    price: int | None = None

    @classmethod
    def for_create(cls, data: Mapping[str, Any]) -> "ListingChanges":
        """Validate a creation payload: every key must carry a truthy value."""
        for key, value in data.items():
            if not value:
                raise InvalidData("Invalid data")
        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise InvalidData(f"Invalid data: missing {', '.join(missing)}")

        location = _location(data)
        if not location.get("label"):
            raise InvalidData("Invalid data: missing location label")

        return cls(
            title=data["title"],
            description=data["description"],
            image_src=data["image"],
            category=data["category"],
            room_count=parse_count("room_count", data["room_count"]),
            bathroom_count=parse_count("bathroom_count", data["bathroom_count"]),
            guest_count=parse_count("guest_count", data["guest_count"]),
            country=location["label"],
            region=location.get("region") or "",
            latlng=list(location.get("latlng") or []),
            price=parse_price(data["price"]),
        )

    @classmethod
    def for_update(cls, data: Mapping[str, Any]) -> "ListingChanges":
        """Pick the fields an update applies.

        Null values are dropped first. Text, location and price fields apply
        only when truthy; the three counts apply whenever present, so zero
        is a legal update.
        """
        data = {key: value for key, value in data.items() if value is not None}
        location = _location(data)

        def counted(name: str) -> int | None:
            if name not in data:
                return None
            return parse_count(name, data[name])

        latlng = location.get("latlng")
        return cls(
            title=data.get("title") or None,
            description=data.get("description") or None,
            image_src=data.get("image") or None,
            category=data.get("category") or None,
            room_count=counted("room_count"),
            bathroom_count=counted("bathroom_count"),
            guest_count=counted("guest_count"),
            country=location.get("label") or None,
            region=location.get("region") or None,
            latlng=list(latlng) if latlng else None,
            price=parse_price(data["price"]) if data.get("price") else None,
        )

    def as_fields(self) -> dict[str, Any]:
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def apply(self, instance: Listing) -> list[str]:
        """Set present values on ``instance`` and return the touched fields."""
        changed = self.as_fields()
        for name, value in changed.items():
            setattr(instance, name, value)
        return list(changed)
