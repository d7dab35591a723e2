# PATH: apps/core/services/accounts.py
# Self-registration and profile edits. Password hashing / token issuance stay in
# Django auth + simplejwt.
from __future__ import annotations

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Q

from apps.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from apps.core.permissions import is_student_user
from apps.domains.students.models import StudentProfile

logger = logging.getLogger(__name__)


def _email_domain() -> str:
    return getattr(settings, "STUDENT_EMAIL_DOMAIN", "sems.local")


@transaction.atomic
def register_student(data: dict):
    """
    Public registration always yields a student user + StudentProfile.
    """
    User = get_user_model()

    national_id = str(data["national_id"]).strip()
    username = (data.get("username") or "").strip() or national_id
    email = (data.get("email") or "").strip() or f"{national_id}@{_email_domain()}"
    student_number = (data.get("student_number") or "").strip() or None

    dup = Q(national_id=national_id) | Q(username=username) | Q(email=email)
    if User.objects.filter(dup).exists():
        raise ConflictError("National id, email or username is already registered.")
    if student_number and StudentProfile.objects.filter(student_number=student_number).exists():
        raise ConflictError("Student number is already registered.")

    user = User(
        username=username,
        email=email,
        national_id=national_id,
        role=User.Role.STUDENT,
        name=(data.get("full_name") or "").strip() or username,
    )
    user.set_password(data["password"])
    user.save()

    StudentProfile.objects.create(
        user=user,
        full_name=user.name,
        student_number=student_number,
    )

    logger.info("registered student user id=%s", user.id)
    return user


def update_profile(user, data: dict):
    """
    Staff accounts may change their national id / password.
    Student accounts are managed by supervisors only.
    """
    User = get_user_model()

    user = User.objects.filter(id=user.id).first()
    if user is None:
        raise NotFoundError("User not found.")
    if is_student_user(user):
        raise ForbiddenError("Students cannot edit account data.")

    national_id = (data.get("national_id") or "").strip()
    if national_id and national_id != user.national_id:
        if User.objects.filter(national_id=national_id).exclude(id=user.id).exists():
            raise ConflictError("National id is already registered to another user.")
        user.national_id = national_id

    password = data.get("password") or ""
    if password.strip():
        user.set_password(password)

    user.save()
    return user
