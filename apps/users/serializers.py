"""Serializers for user profiles and host cards."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Профиль текущего пользователя; email меняется только через поддержку."""

    class Meta:
        model = User
        fields = ["id", "email", "name", "image", "created_at", "updated_at"]
        read_only_fields = ["id", "email", "created_at", "updated_at"]


class UserShortSerializer(serializers.ModelSerializer):
    """Host display fields attached to a listing."""

    class Meta:
        model = User
        fields = ["name", "image"]
