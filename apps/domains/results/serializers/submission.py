from rest_framework import serializers


class SubmittedAnswerSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    answer_id = serializers.IntegerField(required=False, allow_null=True)


class ExamSubmitSerializer(serializers.Serializer):
    """
    {answers: [{question_id, answer_id}], started_at?}
    - empty list is a valid (zero score) submission
    - one entry per question_id
    """

    answers = SubmittedAnswerSerializer(many=True, allow_empty=True)
    started_at = serializers.DateTimeField(required=False, allow_null=True)

    def validate_answers(self, value):
        seen = set()
        for item in value:
            qid = item["question_id"]
            if qid in seen:
                raise serializers.ValidationError(
                    f"Duplicate answer for question {qid}."
                )
            seen.add(qid)
        return value


class GuestExamSubmitSerializer(ExamSubmitSerializer):
    guest_name = serializers.CharField(max_length=200)

    def validate_guest_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Guest name is required.")
        return value
