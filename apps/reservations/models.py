"""Reservation domain model."""

from __future__ import annotations

import uuid
from datetime import date

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange


class ReservationQuerySet(models.QuerySet):
    def conflicting_with(self, start_date: date, end_date: date) -> "ReservationQuerySet":
        """Reservations covering the start or the end of ``[start_date, end_date]``.

        SQL twin of ``DateRange.conflicts_with``; boundaries are inclusive.
        """
        covers_start = Q(end_date__gte=start_date, start_date__lte=start_date)
        covers_end = Q(start_date__lte=end_date, end_date__gte=end_date)
        return self.filter(covers_start | covers_end)


class Reservation(models.Model):
    """Бронирование объекта на период дат."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    total_price = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = ReservationQuerySet.as_manager()

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="reservation_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["listing", "start_date", "end_date"], name="reservation_listing_4d2b8f_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation {self.pk} for {self.listing_id} ({self.date_range})"

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)
