"""Admin registrations for reservations."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "listing", "user", "start_date", "end_date", "total_price", "created_at")
    list_filter = ("start_date",)
    search_fields = ("listing__title", "user__email")
    raw_id_fields = ("listing", "user")
    readonly_fields = ("created_at",)
