"""Favorites routes: list, set/unset and check."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter  # type: ignore

from .views import FavoriteViewSet

router = SimpleRouter()
router.register(r"", FavoriteViewSet, basename="favorite")

urlpatterns = router.urls
