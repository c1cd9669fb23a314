# storefront/views.py

"""
STOREFRONT ENDPOINTS

PUBLIC (no credential, public_catalog throttle):
- GET /api/stores/check-availability/?name=<slug>   -> {"available": bool}
- GET /api/stores/<store_name>/                     -> {"store", "products"}
- GET /api/public/stores/<store_name>/              (alias)

MERCHANT (JWT):
- PUT /api/stores/update-name/  {"store_name": "..."} -> {"message", "user"}
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from common.exceptions import ValidationError
from merchants.serializers import MerchantSerializer
from products.serializers import ProductSerializer
from storefront.services import storefront


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class StoreNameSerializer(serializers.Serializer):
    store_name = serializers.CharField(required=False, allow_blank=True, default="")


class StoreDetailView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Storefront"],
        responses={
            200: inline_serializer(
                "PublicStoreResponse",
                {
                    "store": MerchantSerializer(),
                    "products": ProductSerializer(many=True),
                },
            ),
            404: OpenApiResponse(description="Store not found"),
        },
        description="Public store page: merchant profile + products, newest first.",
    )
    def get(self, request, store_name: str):
        merchant, products = storefront.resolve_store(store_name)
        return Response(
            {
                "store": MerchantSerializer(merchant).data,
                "products": ProductSerializer(
                    products, many=True, context={"request": request}
                ).data,
            }
        )


class StoreNameAvailabilityView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Storefront"],
        parameters=[
            OpenApiParameter(
                name="name",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Candidate store slug.",
            ),
        ],
        responses={
            200: inline_serializer(
                "StoreNameAvailability", {"available": serializers.BooleanField()}
            ),
            400: OpenApiResponse(description="Store name is required"),
        },
    )
    def get(self, request):
        name = (request.query_params.get("name") or "").strip()
        if not name:
            raise ValidationError("Store name is required", field="name")

        return Response({"available": storefront.check_store_name_available(name)})


class StoreNameUpdateView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Storefront"],
        request=StoreNameSerializer,
        responses={
            200: inline_serializer(
                "StoreNameUpdateResponse",
                {"message": serializers.CharField(), "user": MerchantSerializer()},
            ),
            400: OpenApiResponse(description="Invalid store name"),
            409: OpenApiResponse(description="Store name is already taken"),
        },
    )
    def put(self, request):
        s = StoreNameSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        merchant = storefront.claim_store_name(request.user, s.validated_data["store_name"])

        return Response(
            {
                "message": "Store name updated successfully",
                "user": MerchantSerializer(merchant).data,
            },
            status=status.HTTP_200_OK,
        )
