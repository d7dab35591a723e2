from rest_framework import serializers
from apps.domains.exams.models import Question, AnswerChoice


class AnswerChoiceSerializer(serializers.ModelSerializer):
    """
    context["hide_correct"] -> is_correct is dropped (students / guests).
    """

    answer_text = serializers.CharField(source="text")

    class Meta:
        model = AnswerChoice
        fields = [
            "id",
            "answer_text",
            "is_correct",
            "sort_order",
        ]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if self.context.get("hide_correct"):
            data.pop("is_correct", None)
        return data


class QuestionSerializer(serializers.ModelSerializer):
    question_text = serializers.CharField(source="text")
    answers = AnswerChoiceSerializer(many=True, read_only=True)

    class Meta:
        model = Question
        fields = [
            "id",
            "question_text",
            "sort_order",
            "answers",
        ]


# -------------------------------
# write side
# -------------------------------

class AnswerChoiceInputSerializer(serializers.Serializer):
    answer_text = serializers.CharField()
    is_correct = serializers.BooleanField(default=False)


class QuestionWriteSerializer(serializers.Serializer):
    question_text = serializers.CharField()
    answers = AnswerChoiceInputSerializer(many=True)


class QuestionImportSerializer(serializers.Serializer):
    file = serializers.FileField()
    replace = serializers.BooleanField(default=False)


class QuestionReportCreateSerializer(serializers.Serializer):
    message = serializers.CharField(required=False, allow_blank=True)
