# apps/core/urls.py

from django.urls import path

from rest_framework_simplejwt.views import TokenRefreshView

from apps.api.common.auth_jwt import NationalIdTokenObtainPairView
from apps.core.views import MeView, RegisterView, UpdateProfileView

urlpatterns = [
    path("login", NationalIdTokenObtainPairView.as_view(), name="auth-login"),
    path("token/refresh", TokenRefreshView.as_view(), name="auth-token-refresh"),
    path("register", RegisterView.as_view(), name="auth-register"),
    path("me", MeView.as_view(), name="auth-me"),
    path("update-profile", UpdateProfileView.as_view(), name="auth-update-profile"),
]
