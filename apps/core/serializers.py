# apps/core/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    role = serializers.CharField(source="effective_role", read_only=True)
    student = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "national_id",
            "name",
            "role",
            "student",
        ]

    def get_student(self, obj):
        profile = getattr(obj, "student_profile", None)
        if profile is None:
            return None
        return {
            "id": profile.id,
            "full_name": profile.full_name,
            "student_number": profile.student_number,
            "section_id": profile.section_id,
            "section_name": profile.section.name if profile.section_id else None,
        }


# ------------------------------------
# Register / Profile
# ------------------------------------

class RegisterSerializer(serializers.Serializer):
    national_id = serializers.CharField(max_length=32)
    username = serializers.CharField(max_length=150, required=False, allow_blank=True)
    password = serializers.CharField(min_length=4, write_only=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    full_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    student_number = serializers.CharField(max_length=50, required=False, allow_blank=True)


class ProfileUpdateSerializer(serializers.Serializer):
    national_id = serializers.CharField(max_length=32, required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
