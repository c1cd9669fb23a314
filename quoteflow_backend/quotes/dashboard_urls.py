# quotes/dashboard_urls.py

from django.urls import path

from quotes.views import DashboardStatsView

urlpatterns = [
    path("stats/", DashboardStatsView.as_view(), name="dashboard-stats"),
]
