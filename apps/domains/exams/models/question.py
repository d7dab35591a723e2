from django.db import models
from apps.api.common.models import BaseModel


class Question(BaseModel):
    """
    Single-correct-answer multiple choice question.
    """

    exam = models.ForeignKey(
        "exams.ExamTemplate",
        on_delete=models.CASCADE,
        related_name="questions",
    )

    text = models.TextField()
    sort_order = models.IntegerField(default=0)

    class Meta:
        db_table = "exams_question"
        ordering = ["sort_order", "id"]

    def __str__(self):
        return f"{self.exam_id} Q{self.sort_order}"


class AnswerChoice(BaseModel):
    """
    One option of a Question. Exactly one option per question carries
    is_correct=True (checked at write time by question_factory).
    """

    question = models.ForeignKey(
        Question,
        on_delete=models.CASCADE,
        related_name="answers",
    )

    text = models.TextField()
    is_correct = models.BooleanField(default=False)
    sort_order = models.IntegerField(default=0)

    class Meta:
        db_table = "exams_answer_choice"
        ordering = ["sort_order", "id"]

    def __str__(self):
        return f"Q{self.question_id}:{self.sort_order}"
