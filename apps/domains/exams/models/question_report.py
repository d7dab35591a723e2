# PATH: apps/domains/exams/models/question_report.py
from __future__ import annotations

from django.db import models


class QuestionReport(models.Model):
    """
    Free-text flag raised by a student against a question.
    Informational only: never touches scoring.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        RESOLVED = "resolved", "Resolved"

    exam = models.ForeignKey(
        "exams.ExamTemplate",
        on_delete=models.CASCADE,
        related_name="question_reports",
    )
    question = models.ForeignKey(
        "exams.Question",
        on_delete=models.CASCADE,
        related_name="reports",
    )
    student = models.ForeignKey(
        "students.StudentProfile",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="question_reports",
    )

    message = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "exams_question_report"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"QuestionReport(exam={self.exam_id}, question={self.question_id}, status={self.status})"
