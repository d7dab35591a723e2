from rest_framework import serializers

from apps.domains.results.models import Result


class ResultSerializer(serializers.ModelSerializer):
    exam_id = serializers.IntegerField(read_only=True)
    exam_name = serializers.CharField(source="exam.name", read_only=True)
    student_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Result
        fields = [
            "id",
            "exam_id",
            "exam_name",
            "student_id",
            "score",
            "total_questions",
            "percentage",
            "is_guest",
            "guest_name",
            "started_at",
            "completed_at",
        ]
        read_only_fields = fields


class MyResultSerializer(serializers.ModelSerializer):
    exam_id = serializers.IntegerField(read_only=True)
    exam_name = serializers.CharField(source="exam.name", read_only=True)
    subject_name = serializers.CharField(source="exam.subject.name", read_only=True)

    class Meta:
        model = Result
        fields = [
            "id",
            "exam_id",
            "exam_name",
            "subject_name",
            "score",
            "total_questions",
            "percentage",
            "completed_at",
        ]
        read_only_fields = fields


class ReportRowSerializer(serializers.Serializer):
    """Shape of student_report_rows() (swagger + response rendering)."""

    result_id = serializers.IntegerField()
    student_name = serializers.CharField()
    student_number = serializers.CharField()
    section_name = serializers.CharField()
    subject_name = serializers.CharField()
    exam_name = serializers.CharField()
    score = serializers.IntegerField()
    total_questions = serializers.IntegerField()
    percentage = serializers.DecimalField(max_digits=5, decimal_places=2)
    completed_at = serializers.DateTimeField()
