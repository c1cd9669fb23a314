from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from merchants.serializers import MerchantSerializer


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Auth"],
        responses={
            200: inline_serializer("MeResponse", {"user": MerchantSerializer()}),
        },
        description="Get the authenticated merchant's profile",
    )
    def get(self, request):
        return Response({"user": MerchantSerializer(request.user).data})
