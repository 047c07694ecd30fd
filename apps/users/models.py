"""User domain models.

Hosts and guests share one account type: any authenticated user can
publish listings, reserve dates and keep favorites. Listing cards show
the host's display name and avatar, so both live on the user row.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """Accounts are keyed by email; staff accounts only exist for the admin site."""

    use_in_migrations = True

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        user = self.model(email=self.normalize_email(email), **extra_fields)
        # set_password(None) leaves the account without a usable password
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.update(is_staff=True, is_superuser=True)
        return self.create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Marketplace account: host of listings and guest of reservations."""

    username = models.CharField(_("Username"), max_length=150, blank=True)
    email = models.EmailField(_("Email"), unique=True)
    name = models.CharField(
        _("Display name"),
        max_length=150,
        blank=True,
        help_text=_("Shown on listing cards and reservation pages."),
    )
    image = models.URLField(_("Avatar"), max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name or self.email


User = CustomUser
