# apps/domains/exams/services/question_report_service.py
from __future__ import annotations

from django.conf import settings

from apps.core.exceptions import NotFoundError
from apps.domains.exams.models import Question, QuestionReport
from apps.domains.students.models import StudentProfile


def report_question(*, exam_id: int, question_id: int, user, message: str = "") -> QuestionReport:
    question = (
        Question.objects
        .select_related("exam")
        .filter(id=int(question_id), exam_id=int(exam_id))
        .first()
    )
    if question is None:
        raise NotFoundError("Question does not belong to this exam.")

    default_message = getattr(
        settings,
        "QUESTION_REPORT_DEFAULT_MESSAGE",
        "An error was reported in this question.",
    )

    return QuestionReport.objects.create(
        exam=question.exam,
        question=question,
        student=StudentProfile.objects.filter(user=user).first(),
        message=(message or "").strip() or default_message,
        status=QuestionReport.Status.PENDING,
    )
