# merchants/urls.py

from django.urls import path

from .views import LoginView, MeView, SignupView

app_name = "merchants"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("signup/", SignupView.as_view(), name="signup"),
    path("login/", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("me/", MeView.as_view(), name="me"),
]
