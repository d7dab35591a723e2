from django.db import models
from django.contrib.auth.models import AbstractUser


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Login identity.

    - AUTH_USER_MODEL = core.User
    - role drives route access (supervisor / manager / student)
    - a student user owns at most one StudentProfile (students.StudentProfile.user)
    """

    class Role(models.TextChoices):
        SUPERVISOR = "supervisor", "Supervisor"
        MANAGER = "manager", "Manager"
        STUDENT = "student", "Student"

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
    )

    # login key used by the SPA (national id card number)
    national_id = models.CharField(
        max_length=32,
        unique=True,
        null=True,
        blank=True,
    )

    name = models.CharField(max_length=150, blank=True, null=True)

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username

    @property
    def effective_role(self) -> str:
        if self.is_superuser:
            return self.Role.SUPERVISOR
        return self.role
