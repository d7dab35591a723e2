# apps/domains/results/services/attempt_service.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from django.db import transaction
from django.utils import timezone

from apps.core.exceptions import ForbiddenError, NotFoundError
from apps.domains.results.models import Result
from apps.domains.results.services.eligibility import REATTEMPT_DENIED, has_prior_result
from apps.domains.results.services.grader import ScoreOutcome
from apps.domains.students.models import StudentProfile

logger = logging.getLogger(__name__)


class ExamAttemptService:
    """
    Result write path (the only side effect of a submission)

    🔥 reattempt rule is re-checked here, inside the transaction:
    - the student profile row is locked (select_for_update)
    - concurrent submits for the same student serialize, second one -> 403
    """

    @staticmethod
    @transaction.atomic
    def record_student_attempt(
        *,
        exam,
        user,
        outcome: ScoreOutcome,
        started_at: Optional[datetime] = None,
    ) -> Result:

        # -------------------------------------------------
        # 1️⃣ profile (fail closed, never score as guest)
        # -------------------------------------------------
        profile = (
            StudentProfile.objects
            .select_for_update()
            .filter(user=user)
            .first()
        )
        if profile is None:
            raise NotFoundError("Student profile not found for this account.")

        # -------------------------------------------------
        # 2️⃣ reattempt policy (authoritative)
        # -------------------------------------------------
        if not exam.allow_reattempt and has_prior_result(exam, profile):
            logger.warning(
                "reattempt denied exam=%s student=%s", exam.id, profile.id
            )
            raise ForbiddenError(REATTEMPT_DENIED, code="reattempt_denied")

        # -------------------------------------------------
        # 3️⃣ write
        # -------------------------------------------------
        now = timezone.now()
        result = Result.objects.create(
            exam=exam,
            student=profile,
            score=outcome.score,
            total_questions=outcome.total_questions,
            percentage=outcome.percentage,
            is_guest=False,
            started_at=started_at or now,
            completed_at=now,
        )

        logger.info(
            "attempt recorded exam=%s student=%s score=%s/%s",
            exam.id, profile.id, outcome.score, outcome.total_questions,
        )
        return result

    @staticmethod
    @transaction.atomic
    def record_guest_attempt(
        *,
        exam,
        guest_name: str,
        outcome: ScoreOutcome,
        started_at: Optional[datetime] = None,
    ) -> Result:
        # guests: no uniqueness, no profile
        now = timezone.now()
        result = Result.objects.create(
            exam=exam,
            student=None,
            score=outcome.score,
            total_questions=outcome.total_questions,
            percentage=outcome.percentage,
            is_guest=True,
            guest_name=guest_name,
            started_at=started_at or now,
            completed_at=now,
        )

        logger.info(
            "guest attempt recorded exam=%s guest=%r score=%s/%s",
            exam.id, guest_name, outcome.score, outcome.total_questions,
        )
        return result
