# merchants/views/auth.py

"""
MERCHANT AUTH VIEWS

- POST /api/auth/signup/  -> 201 {token, user}
- POST /api/auth/login/   -> 200 {token, user}

Both are anonymous endpoints (no authentication classes) with anon throttling.
Business rules live in merchants.services.auth; errors surface through
common.exception_handler (409 duplicate email, 401 bad credentials).
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from merchants.serializers import (
    AuthResponseSerializer,
    LoginSerializer,
    MerchantSerializer,
    SignupSerializer,
)
from merchants.services import auth as auth_service


class AuthAnonThrottle(AnonRateThrottle):
    """
    Anonymous signup/login throttling.
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['anon'].
    """
    scope = "anon"


class SignupView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [AuthAnonThrottle]

    @extend_schema(
        tags=["Auth"],
        request=SignupSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(description="Validation error"),
            409: OpenApiResponse(description="Email already in use"),
        },
        description="Create a merchant account and return a bearer token.",
    )
    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        token, merchant = auth_service.register(
            name=data["name"],
            email=data["email"],
            password=data["password"],
        )

        return Response(
            {"token": token, "user": MerchantSerializer(merchant).data},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [AuthAnonThrottle]

    @extend_schema(
        tags=["Auth"],
        request=LoginSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(description="Invalid email or password"),
        },
        description="Authenticate a merchant with email and password.",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        token, merchant = auth_service.authenticate(
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
            request=request,
        )

        return Response(
            {"token": token, "user": MerchantSerializer(merchant).data},
            status=status.HTTP_200_OK,
        )
