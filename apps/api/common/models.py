# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    Abstract model recording creation / modification time.
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    Common base for catalog models (subjects, sections, exam templates,
    questions, answer choices).
    """
    class Meta:
        abstract = True
