# quotes/views/dashboard.py

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from quotes.serializers import DashboardStatsSerializer
from quotes.services.stats import dashboard_stats


class DashboardStatsView(APIView):
    """
    GET /api/dashboard/stats/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Dashboard"],
        responses={200: DashboardStatsSerializer},
        description="Product and quote request counts for the merchant dashboard.",
    )
    def get(self, request):
        return Response(DashboardStatsSerializer(dashboard_stats(request.user)).data)
