"""Serializers for the reservations domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Reservation


class ReservationRangeSerializer(serializers.ModelSerializer):
    """Only the booked dates, for availability calendars."""

    class Meta:
        model = Reservation
        fields = ["start_date", "end_date"]


class ReservationSerializer(serializers.ModelSerializer):
    listing_id = serializers.ReadOnlyField(source="listing.id")
    listing_title = serializers.ReadOnlyField(source="listing.title")
    user_id = serializers.ReadOnlyField(source="user.id")

    class Meta:
        model = Reservation
        fields = [
            "id",
            "listing_id",
            "listing_title",
            "user_id",
            "start_date",
            "end_date",
            "total_price",
            "created_at",
        ]


class ReservationCreateSerializer(serializers.Serializer):
    listing_id = serializers.UUIDField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total_price = serializers.IntegerField(min_value=0)
