# apps/core/views.py

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.core.serializers import (
    UserSerializer,
    RegisterSerializer,
    ProfileUpdateSerializer,
)
from apps.core.services.accounts import register_student, update_profile


# --------------------------------------------------
# Auth: /auth/register
# --------------------------------------------------

class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=RegisterSerializer)
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = register_student(serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


# --------------------------------------------------
# Auth: /auth/me
# --------------------------------------------------

class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


# --------------------------------------------------
# Auth: /auth/update-profile
# --------------------------------------------------

class UpdateProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=ProfileUpdateSerializer)
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = update_profile(request.user, serializer.validated_data)
        return Response(UserSerializer(user).data)
