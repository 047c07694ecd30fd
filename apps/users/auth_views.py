"""Sign-up and sign-in endpoints issuing JWT pairs."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from .auth_serializers import LoginSerializer, RegisterSerializer
from .serializers import UserSerializer

logger = logging.getLogger(__name__)


class SessionResponseMixin:
    """Answer with the user profile plus a fresh access/refresh pair."""

    def session_response(self, user, status_code: int = status.HTTP_200_OK) -> Response:  # type: ignore
        refresh = RefreshToken.for_user(user)
        payload = {
            "user": UserSerializer(user).data,
            "tokens": {"refresh": str(refresh), "access": str(refresh.access_token)},
        }
        return Response(payload, status=status_code)


class RegisterView(SessionResponseMixin, APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered user %s", user.pk)
        return self.session_response(user, status.HTTP_201_CREATED)


class LoginView(SessionResponseMixin, APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data, context={"request": request})
        if not serializer.is_valid():
            logger.warning("Failed sign-in for %s", request.data.get("email"))
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        return self.session_response(serializer.validated_data["user"])
