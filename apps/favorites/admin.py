"""Admin registrations for favorites."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Favorite


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ("user", "listing", "created_at")
    search_fields = ("user__email", "listing__title")
    raw_id_fields = ("user", "listing")
