"""API views for favorites management."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.listings.serializers import ListingSerializer
from apps.users.services import get_current_user
from shared.infrastructure.api import DomainErrorMixin

from .serializers import FavoriteUpdateSerializer
from .services import get_favorite_listings, is_favorite, update_favorite

UNAUTHORIZED_STATE = {"title": "Unauthorized", "subtitle": "Please login"}
EMPTY_STATE = {
    "title": "No Favorites found",
    "subtitle": "Looks like you have no favorite listings.",
}


class FavoriteViewSet(DomainErrorMixin, viewsets.ViewSet):
    """
    Viewset to list favorites and set the favorite state of a listing.

    Endpoints:
    - GET /api/v1/favorites/ - список избранных
    - POST /api/v1/favorites/ - {"listing_id": ..., "favorite": true|false}
    - GET /api/v1/favorites/check/{listing_id}/ - проверить наличие в избранном
    """

    permission_classes = [permissions.AllowAny]

    def list(self, request):  # type: ignore
        """Гостям без входа отдаём пустое состояние "Unauthorized"."""
        user = get_current_user(request)
        if user is None:
            return Response(
                {"results": [], "empty_state": UNAUTHORIZED_STATE},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        listings = list(get_favorite_listings(user))
        favorite_ids = {listing.pk for listing in listings}
        data = ListingSerializer(listings, many=True, context={"favorite_ids": favorite_ids}).data
        return Response(
            {"results": data, "empty_state": None if listings else EMPTY_STATE},
            status=status.HTTP_200_OK,
        )

    def create(self, request):  # type: ignore
        serializer = FavoriteUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        listing_id = serializer.validated_data["listing_id"]
        favorite = update_favorite(
            get_current_user(request),
            listing_id,
            serializer.validated_data["favorite"],
        )
        return Response(
            {"listing_id": str(listing_id), "favorite": favorite},
            status=status.HTTP_200_OK,
        )

    @action(detail=False, methods=['get'], url_path='check/(?P<listing_id>[0-9a-f-]+)')
    def check(self, request, listing_id=None):  # type: ignore
        """
        Проверка наличия объявления в избранном.

        Returns:
            {"is_favorite": true/false}
        """
        return Response(
            {"listing_id": listing_id, "is_favorite": is_favorite(get_current_user(request), listing_id)},
            status=status.HTTP_200_OK,
        )
