# Login by national id; tokens issued by simplejwt.
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView

from apps.core.serializers import UserSerializer


class NationalIdTokenObtainPairSerializer(TokenObtainPairSerializer):
    """national_id + password -> {user, access, refresh}"""

    username_field = "national_id"

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.effective_role
        return token

    def validate(self, attrs):
        national_id = str(attrs.get("national_id") or "").strip()
        password = attrs.get("password") or ""

        if not national_id or not password:
            raise serializers.ValidationError(
                {"detail": "national_id and password are required."}
            )

        User = get_user_model()
        user = User.objects.filter(national_id=national_id).first()
        if not user or not user.check_password(password):
            raise AuthenticationFailed("Invalid login credentials.")
        if not user.is_active:
            raise AuthenticationFailed("This account is disabled.")

        refresh = self.get_token(user)
        return {
            "user": UserSerializer(user).data,
            "refresh": str(refresh),
            "access": str(refresh.access_token),
        }


class NationalIdTokenObtainPairView(TokenObtainPairView):
    serializer_class = NationalIdTokenObtainPairSerializer
