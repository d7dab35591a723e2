from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class StudentProfile(TimestampModel):
    # =========================
    # 🔐 login identity link
    # =========================
    # - registered students submit scored attempts through this link
    # - guests never get a profile
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="student_profile",
    )

    # =========================
    # basic info
    # =========================
    full_name = models.CharField(max_length=200)
    student_number = models.CharField(
        max_length=50,
        unique=True,
        null=True,
        blank=True,
    )

    section = models.ForeignKey(
        "sections.Section",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="students",
    )

    class Meta:
        db_table = "students_student"
        ordering = ["-id"]

    def __str__(self):
        return self.full_name
