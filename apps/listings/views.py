"""Listing API views."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.favorites.services import get_favorite_ids
from apps.users.services import get_current_user
from shared.infrastructure.api import DomainErrorMixin

from .serializers import ListingDetailSerializer, ListingSerializer
from .services import create_listing, delete_listing, get_listing_by_id, get_listings, update_listing


class ListingViewSet(DomainErrorMixin, viewsets.ViewSet):
    """Viewset для просмотра и управления объявлениями.

    Reads are public. Mutations are guarded in ``apps.listings.services``:
    the caller must be signed in, and must own the listing to change it.
    """

    permission_classes = [permissions.AllowAny]

    def _context(self, request) -> dict:  # type: ignore
        return {
            "request": request,
            "favorite_ids": get_favorite_ids(get_current_user(request)),
        }

    def list(self, request):  # type: ignore
        page = get_listings(request.query_params)
        serializer = ListingSerializer(page.listings, many=True, context=self._context(request))
        return Response({"listings": serializer.data, "next_cursor": page.next_cursor})

    def retrieve(self, request, pk=None):  # type: ignore
        listing = get_listing_by_id(pk)
        if listing is None:
            return Response({"detail": "Listing not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(ListingDetailSerializer(listing, context=self._context(request)).data)

    def create(self, request):  # type: ignore
        listing = create_listing(get_current_user(request), request.data)
        return Response(
            ListingSerializer(listing, context=self._context(request)).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):  # type: ignore
        listing = update_listing(get_current_user(request), pk, request.data)
        return Response(ListingSerializer(listing, context=self._context(request)).data)

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):  # type: ignore
        delete_listing(get_current_user(request), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
