"""Listing domain model.

A listing is a rentable property published by exactly one user. Only its
owner may change or delete it; see ``apps.listings.services``.
"""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Listing(models.Model):
    """Объект, выставленный на посуточную аренду."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="listings",
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    image_src = models.URLField(max_length=500)
    category = models.CharField(max_length=100)
    room_count = models.PositiveSmallIntegerField(default=1)
    bathroom_count = models.PositiveSmallIntegerField(default=1)
    guest_count = models.PositiveSmallIntegerField(default=1)
    country = models.CharField(max_length=100)
    region = models.CharField(max_length=100, blank=True)
    latlng = models.JSONField(
        default=list,
        blank=True,
        help_text=_("Coordinate pair [latitude, longitude]."),
    )
    price = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="listings_li_owner_i_5c1f0e_idx"),
            models.Index(fields=["category"], name="listings_li_categor_3b7a2d_idx"),
            models.Index(fields=["country"], name="listings_li_country_9e4c61_idx"),
        ]

    def __str__(self) -> str:
        return self.title
