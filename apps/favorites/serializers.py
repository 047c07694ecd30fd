"""Serializers for the favorites domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class FavoriteUpdateSerializer(serializers.Serializer):
    """Serializer for setting the favorite state of a listing."""

    listing_id = serializers.UUIDField(required=True)
    favorite = serializers.BooleanField(required=True)
