# quotes/views/quote_request.py

"""
QUOTE REQUEST ENDPOINTS

PUBLIC (no credential, public_write throttle):
- POST /api/quote-requests/
    {
      "merchant_id": "<uuid>",
      "customer_name": "Jane Doe",
      "customer_email": "jane@example.com",
      "customer_phone": "080...",
      "message": "Need these by Friday",
      "items": [{"product_id": "<uuid>", "quantity": 3}, ...]
    }
  -> 201 {"message", "request_id"}

MERCHANT (JWT):
- GET       /api/quote-requests/?status=pending|processed|rejected|all
- GET       /api/quote-requests/<id>/       items + live pricing + total
- PUT|PATCH /api/quote-requests/<id>/       {"status": "..."}

Ownership: another merchant's request id answers 404.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    inline_serializer,
)
from rest_framework import serializers, status, viewsets
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from quotes.serializers import (
    QuoteRequestDetailSerializer,
    QuoteRequestSerializer,
    QuoteStatusUpdateSerializer,
    QuoteSubmitSerializer,
)
from quotes.services import quote_workflow


class PublicWriteThrottle(AnonRateThrottle):
    """
    Public quote submission throttling.
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_write'].
    """
    scope = "public_write"


class QuoteRequestViewSet(viewsets.ViewSet):
    parser_classes = [JSONParser]
    lookup_value_regex = "[^/]+"

    # -----------------------------
    # Public submit vs merchant actions
    # -----------------------------
    def _is_public_submit(self) -> bool:
        return self.request.method == "POST"

    def get_authenticators(self):
        if self._is_public_submit():
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self._is_public_submit():
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_throttles(self):
        if self._is_public_submit():
            return [PublicWriteThrottle()]
        return super().get_throttles()

    # -----------------------------
    # Public submit
    # -----------------------------
    @extend_schema(
        tags=["Quote requests"],
        request=QuoteSubmitSerializer,
        responses={
            201: inline_serializer(
                "QuoteSubmitResponse",
                {
                    "message": serializers.CharField(),
                    "request_id": serializers.UUIDField(),
                },
            ),
            400: OpenApiResponse(description="Missing customer fields, no items, or invalid product"),
            404: OpenApiResponse(description="Merchant not found"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Public quote submission (AllowAny). All-or-nothing.",
    )
    def create(self, request):
        s = QuoteSubmitSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        quote_request = quote_workflow.submit_quote_request(
            data["merchant_id"],
            {
                "name": data.get("customer_name"),
                "email": data.get("customer_email"),
                "phone": data.get("customer_phone"),
                "message": data.get("message"),
            },
            [dict(item) for item in data.get("items") or []],
        )

        return Response(
            {
                "message": "Quote request created successfully",
                "request_id": str(quote_request.id),
            },
            status=status.HTTP_201_CREATED,
        )

    # -----------------------------
    # Merchant views
    # -----------------------------
    @extend_schema(
        tags=["Quote requests"],
        parameters=[
            OpenApiParameter(
                name="status",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="pending | processed | rejected | all (default all)",
            ),
        ],
        responses={
            200: QuoteRequestSerializer(many=True),
            400: OpenApiResponse(description="Unknown status filter"),
        },
    )
    def list(self, request):
        qs = quote_workflow.list_quote_requests(
            request.user, request.query_params.get("status")
        )
        data = QuoteRequestSerializer(qs, many=True).data
        return Response({"count": len(data), "results": data})

    @extend_schema(
        tags=["Quote requests"],
        responses={
            200: QuoteRequestDetailSerializer,
            404: OpenApiResponse(description="Not found"),
        },
    )
    def retrieve(self, request, pk=None):
        detail = quote_workflow.get_quote_request_detail(request.user, pk)
        return Response(
            QuoteRequestDetailSerializer(detail, context={"request": request}).data
        )

    @extend_schema(
        tags=["Quote requests"],
        request=QuoteStatusUpdateSerializer,
        responses={
            200: inline_serializer(
                "QuoteStatusUpdateResponse",
                {
                    "message": serializers.CharField(),
                    "request": QuoteRequestSerializer(),
                },
            ),
            400: OpenApiResponse(description="Invalid status"),
            404: OpenApiResponse(description="Not found"),
        },
    )
    def update(self, request, pk=None):
        s = QuoteStatusUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        quote_request = quote_workflow.update_status(
            request.user, pk, s.validated_data["status"]
        )

        return Response(
            {
                "message": "Quote request updated successfully",
                "request": QuoteRequestSerializer(quote_request).data,
            }
        )

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)
