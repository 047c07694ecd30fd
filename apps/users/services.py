"""Identity helpers: resolve the caller of a request."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .models import CustomUser


def get_current_user(request) -> "CustomUser | None":
    """Return the authenticated user behind ``request`` or ``None``."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return user
