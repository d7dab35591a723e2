# apps/domains/exams/services/question_factory.py
from __future__ import annotations

from typing import Iterable

from django.db import transaction
from django.db.models import Max

from apps.core.exceptions import ValidationError
from apps.domains.exams.models import ExamTemplate, Question, AnswerChoice

MIN_CHOICES = 2


def validate_answer_set(answers: Iterable[dict]) -> list[dict]:
    """
    Write-time guard for the scoring key.

    Rules:
    - at least MIN_CHOICES non-blank choices
    - exactly one choice with is_correct=True
    """
    cleaned = []
    for a in answers or []:
        text = str(a.get("answer_text") or "").strip()
        if not text:
            raise ValidationError("Answer text must not be empty.")
        cleaned.append({"answer_text": text, "is_correct": bool(a.get("is_correct"))})

    if len(cleaned) < MIN_CHOICES:
        raise ValidationError(f"A question needs at least {MIN_CHOICES} answer choices.")

    correct = sum(1 for a in cleaned if a["is_correct"])
    if correct != 1:
        raise ValidationError("A question must have exactly one correct answer.")

    return cleaned


def next_sort_order(exam: ExamTemplate) -> int:
    last = Question.objects.filter(exam=exam).aggregate(m=Max("sort_order"))["m"]
    return 0 if last is None else int(last) + 1


def _create_choices(question: Question, answers: list[dict]) -> None:
    AnswerChoice.objects.bulk_create([
        AnswerChoice(
            question=question,
            text=a["answer_text"],
            is_correct=a["is_correct"],
            sort_order=idx,
        )
        for idx, a in enumerate(answers)
    ])


@transaction.atomic
def create_question(*, exam: ExamTemplate, question_text: str, answers: list[dict]) -> Question:
    cleaned = validate_answer_set(answers)

    question = Question.objects.create(
        exam=exam,
        text=question_text.strip(),
        sort_order=next_sort_order(exam),
    )
    _create_choices(question, cleaned)
    return question


@transaction.atomic
def replace_question(*, question: Question, question_text: str, answers: list[dict]) -> Question:
    """Text update + answer set swap; all or nothing."""
    cleaned = validate_answer_set(answers)

    question.text = question_text.strip()
    question.save(update_fields=["text", "updated_at"])

    AnswerChoice.objects.filter(question=question).delete()
    _create_choices(question, cleaned)
    return question


def get_exam_question(exam_id: int, question_id: int) -> Question | None:
    return (
        Question.objects
        .filter(id=int(question_id), exam_id=int(exam_id))
        .prefetch_related("answers")
        .first()
    )
