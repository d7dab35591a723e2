from rest_framework import serializers

from apps.domains.students.models import StudentProfile


# -------------------------------
# Student
# -------------------------------

class StudentSerializer(serializers.ModelSerializer):
    section_name = serializers.CharField(source="section.name", read_only=True, default=None)
    national_id = serializers.CharField(source="user.national_id", read_only=True, default=None)
    email = serializers.CharField(source="user.email", read_only=True, default=None)
    username = serializers.CharField(source="user.username", read_only=True, default=None)

    class Meta:
        model = StudentProfile
        fields = [
            "id",
            "full_name",
            "student_number",
            "section",
            "section_name",
            "national_id",
            "email",
            "username",
            "created_at",
            "updated_at",
        ]


class StudentCreateSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=200)
    national_id = serializers.CharField(max_length=32)
    student_number = serializers.CharField(max_length=50, required=False, allow_blank=True)
    section_id = serializers.IntegerField(required=False, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)


class StudentUpdateSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=200, required=False)
    national_id = serializers.CharField(max_length=32, required=False, allow_blank=True)
    student_number = serializers.CharField(max_length=50, required=False, allow_blank=True)
    section_id = serializers.IntegerField(required=False, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)


class StudentImportSerializer(serializers.Serializer):
    file = serializers.FileField()
    section_id = serializers.IntegerField(required=False, allow_null=True)
