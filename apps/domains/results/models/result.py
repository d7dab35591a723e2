from django.db import models
from django.utils import timezone

from apps.core.exceptions import ConflictError


class Result(models.Model):
    """
    Immutable record of one completed attempt.

    - student is null for guests (is_guest=True + guest_name)
    - percentage = score / total_questions * 100, 2 decimals
    - completed_at: server clock at submission
    """

    exam = models.ForeignKey(
        "exams.ExamTemplate",
        on_delete=models.CASCADE,
        related_name="results",
    )
    student = models.ForeignKey(
        "students.StudentProfile",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="results",
    )

    score = models.PositiveIntegerField(default=0)
    total_questions = models.PositiveIntegerField(default=0)
    percentage = models.DecimalField(max_digits=5, decimal_places=2, default=0)

    is_guest = models.BooleanField(default=False)
    guest_name = models.CharField(max_length=200, blank=True, default="")

    started_at = models.DateTimeField(default=timezone.now)
    completed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "results_result"
        ordering = ["-completed_at", "-id"]
        indexes = [
            models.Index(fields=["exam", "student"], name="results_exam_student_idx"),
            models.Index(fields=["is_guest"], name="results_is_guest_idx"),
        ]

    def save(self, *args, **kwargs):
        # append-only
        if not self._state.adding:
            raise ConflictError("Results cannot be modified once recorded.")
        super().save(*args, **kwargs)

    def __str__(self):
        who = self.guest_name if self.is_guest else f"student={self.student_id}"
        return f"Result(exam={self.exam_id}, {who}, {self.score}/{self.total_questions})"
