"""Serializers for sign-up and sign-in."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import authenticate  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import User

INVALID_CREDENTIALS = "Invalid credentials"


class RegisterSerializer(serializers.ModelSerializer):
    """Sign-up with email, display name and an optional avatar."""

    password = serializers.CharField(min_length=8, write_only=True)
    password_confirm = serializers.CharField(write_only=True)

    class Meta:
        model = User
        fields = ["email", "name", "image", "password", "password_confirm"]

    def validate_email(self, value: str) -> str:
        value = User.objects.normalize_email(value)
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("This email is already registered.")
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if attrs["password"] != attrs.pop("password_confirm"):
            raise serializers.ValidationError({"password_confirm": "Passwords do not match."})
        return attrs

    def create(self, validated_data: dict[str, Any]) -> User:  # type: ignore
        return User.objects.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    """Email/password sign-in; resolves ``user`` on success."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = authenticate(
            self.context.get("request"),
            email=User.objects.normalize_email(attrs["email"]),
            password=attrs["password"],
        )
        if user is None:
            raise serializers.ValidationError({"email": INVALID_CREDENTIALS})
        attrs["user"] = user
        return attrs
