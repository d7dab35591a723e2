# apps/domains/results/services/eligibility.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from apps.core.exceptions import ForbiddenError
from apps.domains.results.models import Result
from apps.domains.students.models import StudentProfile

REATTEMPT_DENIED = "Reattempt is not permitted for this exam."


@dataclass(frozen=True)
class Eligibility:
    allowed: bool
    reason: str = ""


def get_student_profile(user) -> Optional[StudentProfile]:
    if not user or not getattr(user, "is_authenticated", False):
        return None
    return StudentProfile.objects.filter(user=user).first()


def has_prior_result(exam, student: StudentProfile) -> bool:
    return Result.objects.filter(exam=exam, student=student).exists()


def check_eligibility(exam, user) -> Eligibility:
    """
    Pre-check for registered students (guests never go through here).

    - allow_reattempt -> allowed
    - no linked profile -> allowed (submit fails closed later)
    - prior result -> denied
    """
    if exam.allow_reattempt:
        return Eligibility(allowed=True)

    profile = get_student_profile(user)
    if profile is None:
        return Eligibility(allowed=True)

    if has_prior_result(exam, profile):
        return Eligibility(allowed=False, reason=REATTEMPT_DENIED)

    return Eligibility(allowed=True)


def ensure_eligible(exam, user) -> None:
    verdict = check_eligibility(exam, user)
    if not verdict.allowed:
        raise ForbiddenError(verdict.reason, code="reattempt_denied")
