from django.db import models
from apps.api.common.models import BaseModel


class Subject(BaseModel):
    """
    School subject. Owns ExamTemplates (delete restricted while any exist).
    """

    name = models.CharField(max_length=150, unique=True)
    description = models.TextField(blank=True, null=True)

    class Meta:
        db_table = "subjects_subject"
        ordering = ["id"]

    def __str__(self):
        return self.name
