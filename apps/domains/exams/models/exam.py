from django.conf import settings
from django.db import models
from apps.api.common.models import BaseModel


def _default_duration() -> int:
    return int(getattr(settings, "EXAM_DEFAULT_DURATION_MINUTES", 30))


class ExamTemplate(BaseModel):
    """
    Reusable timed multiple-choice exam for one Subject.

    - subject: PROTECT (delete templates before their subject)
    - allow_reattempt=False: at most one Result per (template, student)
    - duration is enforced by the client countdown only
    """

    subject = models.ForeignKey(
        "subjects.Subject",
        on_delete=models.PROTECT,
        related_name="exams",
    )

    name = models.CharField(max_length=255)
    duration_minutes = models.PositiveIntegerField(default=_default_duration)

    allow_reattempt = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "exams_exam_template"
        ordering = ["-id"]

    def __str__(self):
        return self.name
