# apps/domains/exams/services/exam_service.py
from __future__ import annotations

from django.db.models import Prefetch

from apps.core.exceptions import NotFoundError, ValidationError
from apps.domains.exams.models import ExamTemplate, Question, AnswerChoice
from apps.domains.subjects.models import Subject


def exam_queryset_with_questions():
    """Template + subject + questions(sort_order) + answers(sort_order) in 3 queries."""
    return ExamTemplate.objects.select_related("subject").prefetch_related(
        Prefetch(
            "questions",
            queryset=Question.objects.order_by("sort_order", "id").prefetch_related(
                Prefetch("answers", queryset=AnswerChoice.objects.order_by("sort_order", "id"))
            ),
        )
    )


def get_exam(exam_id: int, *, with_questions: bool = True) -> ExamTemplate:
    qs = exam_queryset_with_questions() if with_questions else ExamTemplate.objects.select_related("subject")
    try:
        exam = qs.filter(id=int(exam_id)).first()
    except (TypeError, ValueError):
        exam = None
    if exam is None:
        raise NotFoundError("Exam template not found.")
    return exam


def _resolve_subject(subject_id) -> Subject:
    subject = Subject.objects.filter(id=int(subject_id)).first()
    if subject is None:
        raise ValidationError("Subject does not exist.")
    return subject


def create_exam(data: dict) -> ExamTemplate:
    exam = ExamTemplate(
        subject=_resolve_subject(data["subject_id"]),
        name=data["name"],
        allow_reattempt=bool(data.get("allow_reattempt", False)),
        is_active=bool(data.get("is_active", True)),
    )
    if data.get("duration_minutes"):
        exam.duration_minutes = int(data["duration_minutes"])
    exam.save()
    return exam


def update_exam(exam: ExamTemplate, data: dict) -> ExamTemplate:
    if data.get("subject_id"):
        exam.subject = _resolve_subject(data["subject_id"])

    for field in ("name", "duration_minutes", "allow_reattempt", "is_active"):
        if field in data:
            setattr(exam, field, data[field])

    exam.save()
    return exam
