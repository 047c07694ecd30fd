"""API views for the reservations domain."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.services import get_current_user
from shared.infrastructure.api import DomainErrorMixin

from .serializers import ReservationCreateSerializer, ReservationSerializer
from .services import create_reservation, delete_reservation, get_reservations_for


class ReservationViewSet(DomainErrorMixin, viewsets.ViewSet):
    """Создание, просмотр и отмена бронирований.

    - GET /api/v1/reservations/?listing_id=&user_id=&author_id= (только свои поездки или брони на свои объекты; по умолчанию поездки)
    - POST /api/v1/reservations/
    - DELETE /api/v1/reservations/{id}/ (гость или хозяин объекта)
    """

    permission_classes = [permissions.IsAuthenticated]

    def list(self, request):  # type: ignore
        reservations = get_reservations_for(get_current_user(request), request.query_params)
        return Response(ReservationSerializer(reservations, many=True).data)

    def create(self, request):  # type: ignore
        serializer = ReservationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = create_reservation(get_current_user(request), **serializer.validated_data)
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        delete_reservation(get_current_user(request), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
