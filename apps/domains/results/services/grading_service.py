# apps/domains/results/services/grading_service.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from apps.core.exceptions import ForbiddenError
from apps.core.permissions import is_student_user
from apps.domains.exams.models import ExamTemplate
from apps.domains.exams.services.exam_service import get_exam
from apps.domains.results.models import Result
from apps.domains.results.services.attempt_service import ExamAttemptService
from apps.domains.results.services.eligibility import ensure_eligible
from apps.domains.results.services.grader import build_answer_key, score_submission

EXAM_UNAVAILABLE = "This exam is not currently available."


def _ensure_active(exam: ExamTemplate) -> None:
    if not exam.is_active:
        raise ForbiddenError(EXAM_UNAVAILABLE, code="exam_inactive")


# ======================================================
# start
# ======================================================

def start_exam(*, exam_id: int, user) -> ExamTemplate:
    """
    Registered caller.
    Students: template must be active + eligibility check.
    Staff: preview, no checks.
    """
    exam = get_exam(exam_id)
    if is_student_user(user):
        _ensure_active(exam)
        ensure_eligible(exam, user)
    return exam


def start_guest_exam(*, exam_id: int) -> ExamTemplate:
    exam = get_exam(exam_id)
    _ensure_active(exam)
    return exam


# ======================================================
# submit (score -> record)
# ======================================================

def submit_exam(
    *,
    exam_id: int,
    user,
    answers: List[Dict[str, Any]],
    started_at: Optional[datetime] = None,
) -> Result:
    exam = get_exam(exam_id)
    if is_student_user(user):
        _ensure_active(exam)

    outcome = score_submission(build_answer_key(exam), answers)
    return ExamAttemptService.record_student_attempt(
        exam=exam,
        user=user,
        outcome=outcome,
        started_at=started_at,
    )


def submit_guest_exam(
    *,
    exam_id: int,
    guest_name: str,
    answers: List[Dict[str, Any]],
    started_at: Optional[datetime] = None,
) -> Result:
    exam = get_exam(exam_id)
    _ensure_active(exam)

    outcome = score_submission(build_answer_key(exam), answers)
    return ExamAttemptService.record_guest_attempt(
        exam=exam,
        guest_name=guest_name,
        outcome=outcome,
        started_at=started_at,
    )
