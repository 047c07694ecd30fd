"""Admin registrations for listings."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ("title", "owner", "category", "country", "price", "created_at")
    list_filter = ("category", "country")
    search_fields = ("title", "description", "owner__email")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at",)
    ordering = ("-created_at",)
