# products/views/product.py

"""
PRODUCT VIEWSET

Merchant catalog management (JWT required):
- GET    /api/products/         newest first, {"count", "results"}
- POST   /api/products/         multipart (with optional "image") or JSON
- GET    /api/products/<id>/
- PUT    /api/products/<id>/    full update (name + price required)
- PATCH  /api/products/<id>/    partial update
- DELETE /api/products/<id>/

Everything is scoped to request.user through products.services.catalog;
another merchant's product id answers 404, never 403.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from products.serializers import ProductInputSerializer, ProductSerializer
from products.services import catalog


class ProductViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    lookup_value_regex = "[^/]+"

    def _serialize(self, product, status_code=status.HTTP_200_OK):
        data = ProductSerializer(product, context={"request": self.request}).data
        return Response(data, status=status_code)

    @extend_schema(
        tags=["Products"],
        responses={200: ProductSerializer(many=True)},
        description="List the authenticated merchant's products, newest first.",
    )
    def list(self, request):
        qs = catalog.list_products(request.user)
        data = ProductSerializer(qs, many=True, context={"request": request}).data
        return Response({"count": len(data), "results": data})

    @extend_schema(
        tags=["Products"],
        request={
            "multipart/form-data": ProductInputSerializer,
            "application/json": ProductInputSerializer,
        },
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Missing or invalid field"),
        },
    )
    def create(self, request):
        product = catalog.create_product(
            request.user,
            request.data,
            image=request.FILES.get("image"),
        )
        return self._serialize(product, status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Products"],
        responses={200: ProductSerializer, 404: OpenApiResponse(description="Not found")},
    )
    def retrieve(self, request, pk=None):
        return self._serialize(catalog.get_product(request.user, pk))

    @extend_schema(
        tags=["Products"],
        request={
            "multipart/form-data": ProductInputSerializer,
            "application/json": ProductInputSerializer,
        },
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(description="Missing or invalid field"),
            404: OpenApiResponse(description="Not found"),
        },
    )
    def update(self, request, pk=None):
        product = catalog.update_product(
            request.user,
            pk,
            request.data,
            image=request.FILES.get("image"),
        )
        return self._serialize(product)

    @extend_schema(
        tags=["Products"],
        request={
            "multipart/form-data": ProductInputSerializer,
            "application/json": ProductInputSerializer,
        },
        responses={200: ProductSerializer, 404: OpenApiResponse(description="Not found")},
    )
    def partial_update(self, request, pk=None):
        product = catalog.update_product(
            request.user,
            pk,
            request.data,
            image=request.FILES.get("image"),
            partial=True,
        )
        return self._serialize(product)

    @extend_schema(
        tags=["Products"],
        responses={204: None, 404: OpenApiResponse(description="Not found")},
    )
    def destroy(self, request, pk=None):
        catalog.delete_product(request.user, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
