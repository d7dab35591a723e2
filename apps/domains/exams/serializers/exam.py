from rest_framework import serializers

from apps.domains.exams.models import ExamTemplate
from apps.domains.subjects.serializers import SubjectSerializer
from .question import QuestionSerializer


class ExamSerializer(serializers.ModelSerializer):
    subject = SubjectSerializer(read_only=True)
    subject_name = serializers.CharField(source="subject.name", read_only=True)

    class Meta:
        model = ExamTemplate
        fields = [
            "id",
            "name",
            "subject",
            "subject_name",
            "duration_minutes",
            "allow_reattempt",
            "is_active",
            "created_at",
            "updated_at",
        ]


class ExamDetailSerializer(ExamSerializer):
    """Template + ordered questions + ordered answers."""

    questions = QuestionSerializer(many=True, read_only=True)

    class Meta(ExamSerializer.Meta):
        fields = ExamSerializer.Meta.fields + ["questions"]


class ExamWriteSerializer(serializers.Serializer):
    """
    create: subject_id + name required
    PUT: same as create / PATCH: every field optional
    """

    subject_id = serializers.IntegerField()
    name = serializers.CharField(max_length=255)
    duration_minutes = serializers.IntegerField(min_value=1, required=False)
    allow_reattempt = serializers.BooleanField(required=False)
    is_active = serializers.BooleanField(required=False)


class ExamStartSerializer(serializers.Serializer):
    """Payload returned by the start endpoints."""

    exam = serializers.SerializerMethodField()
    questions = QuestionSerializer(many=True, read_only=True, source="questions.all")

    def get_exam(self, obj):
        return {
            "id": obj.id,
            "name": obj.name,
            "duration_minutes": obj.duration_minutes,
            "subject_name": obj.subject.name if obj.subject_id else None,
        }
