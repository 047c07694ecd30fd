"""Model definition for favorites.

A row exists while the user keeps the listing as a favorite: favoriting
creates it, unfavoriting deletes it. One row per (user, listing).
"""

from __future__ import annotations

from django.db import models  # type: ignore


class Favorite(models.Model):
    """A user's favorite listing."""

    user = models.ForeignKey(
        "users.CustomUser", on_delete=models.CASCADE, related_name="favorites"
    )
    listing = models.ForeignKey(
        "listings.Listing", on_delete=models.CASCADE, related_name="favorited_by"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "listing"], name="favorite_unique_user_listing"),
        ]

    def __str__(self) -> str:
        return f"Favorite listing {self.listing_id} of user {self.user_id}"
