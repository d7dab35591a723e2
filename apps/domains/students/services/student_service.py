# PATH: apps/domains/students/services/student_service.py
# Supervisor-side student management: every profile gets a login user (role=student).
from __future__ import annotations

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Q

from apps.core.exceptions import ConflictError, ValidationError
from apps.domains.sections.models import Section
from apps.domains.students.models import StudentProfile


def _default_password() -> str:
    return str(getattr(settings, "STUDENT_DEFAULT_PASSWORD", "123456"))


def _email_for(national_id: str) -> str:
    domain = getattr(settings, "STUDENT_EMAIL_DOMAIN", "sems.local")
    return f"{national_id}@{domain}"


def resolve_section(section_id) -> Section | None:
    if section_id in (None, ""):
        return None
    section = Section.objects.filter(id=int(section_id)).first()
    if section is None:
        raise ValidationError("Section does not exist.")
    return section


def ensure_identity_free(*, national_id: str, username: str, student_number: str | None) -> None:
    User = get_user_model()
    if User.objects.filter(Q(national_id=national_id) | Q(username=username)).exists():
        raise ConflictError(f"National id {national_id} is already registered.")
    if student_number and StudentProfile.objects.filter(student_number=student_number).exists():
        raise ConflictError(f"Student number {student_number} is already registered.")


@transaction.atomic
def create_student(
    *,
    full_name: str,
    national_id: str,
    student_number: str | None = None,
    section: Section | None = None,
    email: str | None = None,
    password: str | None = None,
) -> StudentProfile:
    """
    User(role=student) + StudentProfile in one transaction.

    - username = student_number, falling back to national_id
    - password defaults to STUDENT_DEFAULT_PASSWORD
    """
    User = get_user_model()

    national_id = str(national_id).strip()
    student_number = (student_number or "").strip() or national_id
    username = student_number

    ensure_identity_free(
        national_id=national_id,
        username=username,
        student_number=student_number,
    )

    user = User(
        username=username,
        national_id=national_id,
        email=(email or "").strip() or _email_for(national_id),
        name=full_name,
        role=User.Role.STUDENT,
    )
    user.set_password((password or "").strip() or _default_password())
    user.save()

    return StudentProfile.objects.create(
        user=user,
        full_name=full_name,
        student_number=student_number,
        section=section,
    )


@transaction.atomic
def update_student(profile: StudentProfile, data: dict) -> StudentProfile:
    User = get_user_model()
    user = profile.user

    # 1) linked login user
    if user is not None:
        update_fields = []
        national_id = (data.get("national_id") or "").strip()
        if national_id and national_id != user.national_id:
            if User.objects.filter(national_id=national_id).exclude(id=user.id).exists():
                raise ConflictError(f"National id {national_id} is already registered.")
            user.national_id = national_id
            update_fields.append("national_id")

        email = (data.get("email") or "").strip()
        if email and email != user.email:
            user.email = email
            update_fields.append("email")

        password = data.get("password") or ""
        if password.strip():
            user.set_password(password)
            update_fields.append("password")

        if update_fields:
            user.save(update_fields=update_fields)

    # 2) profile
    if "section_id" in data:
        profile.section = resolve_section(data.get("section_id"))

    full_name = (data.get("full_name") or "").strip()
    if full_name:
        profile.full_name = full_name

    student_number = (data.get("student_number") or "").strip()
    if student_number and student_number != profile.student_number:
        taken = StudentProfile.objects.filter(student_number=student_number).exclude(id=profile.id)
        if taken.exists():
            raise ConflictError(f"Student number {student_number} is already registered.")
        profile.student_number = student_number

    profile.save()
    return profile


@transaction.atomic
def delete_student(profile: StudentProfile) -> None:
    """Remove the profile and its login user (no orphan users)."""
    user = profile.user
    profile.delete()
    if user is not None:
        user.delete()
