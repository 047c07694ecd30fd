"""Serializers for the listings domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.reservations.serializers import ReservationRangeSerializer
from apps.users.serializers import UserShortSerializer

from .models import Listing

LISTING_FIELDS = [
    "id",
    "user_id",
    "title",
    "description",
    "image_src",
    "category",
    "room_count",
    "bathroom_count",
    "guest_count",
    "country",
    "region",
    "latlng",
    "price",
    "created_at",
    "is_favorite",
]


class ListingSerializer(serializers.ModelSerializer):
    """Listing card; ``favorite_ids`` in the context marks the caller's favorites."""

    user_id = serializers.ReadOnlyField(source="owner_id")
    is_favorite = serializers.SerializerMethodField()

    class Meta:
        model = Listing
        fields = LISTING_FIELDS
        read_only_fields = LISTING_FIELDS

    def get_is_favorite(self, obj: Listing) -> bool:
        return obj.pk in self.context.get("favorite_ids", ())


class ListingDetailSerializer(ListingSerializer):
    """Listing page: host display fields and booked date ranges."""

    user = UserShortSerializer(source="owner", read_only=True)
    reservations = ReservationRangeSerializer(many=True, read_only=True)

    class Meta(ListingSerializer.Meta):
        fields = LISTING_FIELDS + ["user", "reservations"]
        read_only_fields = fields
