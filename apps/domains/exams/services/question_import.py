# PATH: apps/domains/exams/services/question_import.py
# Excel -> questions for one template.
# Accepted layouts (header row, any order):
#   question_text, answer1..answer4, correct_answer (1-4)
#   السؤال, A, B, C, D, الإجابة الصحيحه (A-D / أ ب ج د)
from __future__ import annotations

import logging

from django.db import transaction

from apps.api.common.tabular import HeaderAliases, read_xlsx_rows
from apps.domains.exams.models import ExamTemplate, Question, AnswerChoice
from .question_factory import MIN_CHOICES, next_sort_order

logger = logging.getLogger(__name__)

QUESTION_HEADER_ALIASES: HeaderAliases = {
    "question_text": ("question_text", "question", "السؤال"),
    "choice_1": ("answer1", "it1", "a"),
    "choice_2": ("answer2", "it2", "b"),
    "choice_3": ("answer3", "it3", "c"),
    "choice_4": ("answer4", "it4", "d"),
    "correct": ("correct_answer", "correct", "الإجابة الصحيحه", "الإجابة الصحيحة"),
}

CHOICE_FIELDS = ("choice_1", "choice_2", "choice_3", "choice_4")

# marker -> 0-based choice position
CORRECT_MARKERS = {
    "A": 0, "1": 0, "أ": 0,
    "B": 1, "2": 1, "ب": 1,
    "C": 2, "3": 2, "ج": 2,
    "D": 3, "4": 3, "د": 3,
}


def parse_correct_marker(raw: str) -> int:
    """A/1/أ -> 0 ... ; other integers -> n-1 ; unknown -> -1"""
    value = (raw or "").strip().upper()
    if value in CORRECT_MARKERS:
        return CORRECT_MARKERS[value]
    try:
        return int(float(value)) - 1
    except (ValueError, OverflowError):
        return -1


def parse_question_row(row: dict) -> tuple[str, list[dict]]:
    """
    -> (question_text, [{answer_text, is_correct}])

    Empty / "0" choices are dropped after the correct position is resolved
    against the original column, so dropping never shifts the key.
    """
    question_text = (row.get("question_text") or "").strip()
    if not question_text:
        raise ValueError("Missing question text.")

    correct_index = parse_correct_marker(row.get("correct") or "")

    choices = []
    for idx, field in enumerate(CHOICE_FIELDS):
        text = (row.get(field) or "").strip()
        if text == "" or text == "0":
            continue
        choices.append({"answer_text": text, "is_correct": idx == correct_index})

    if len(choices) < MIN_CHOICES:
        raise ValueError(f"At least {MIN_CHOICES} answer choices are required.")
    if sum(1 for c in choices if c["is_correct"]) != 1:
        raise ValueError("Correct answer is missing or points to an empty choice.")

    return question_text, choices


@transaction.atomic
def import_questions_from_rows(
    *,
    exam: ExamTemplate,
    rows: list[dict],
    replace: bool = False,
) -> dict:
    """
    Returns: { "success": True, "created": int, "errors": [{ "row", "error" }] }

    replace=True clears the template's questions first (same transaction).
    """
    if replace:
        Question.objects.filter(exam=exam).delete()

    order = next_sort_order(exam)
    created = 0
    errors: list[dict] = []

    for row_index, row in enumerate(rows, start=2):
        try:
            question_text, choices = parse_question_row(row)
        except ValueError as e:
            logger.warning("question import exam=%s row=%s skipped: %s", exam.id, row_index, e)
            errors.append({"row": row_index, "error": str(e)})
            continue

        question = Question.objects.create(exam=exam, text=question_text, sort_order=order)
        AnswerChoice.objects.bulk_create([
            AnswerChoice(
                question=question,
                text=c["answer_text"],
                is_correct=c["is_correct"],
                sort_order=idx,
            )
            for idx, c in enumerate(choices)
        ])
        order += 1
        created += 1

    return {"success": True, "created": created, "errors": errors}


def import_questions_from_excel(*, exam: ExamTemplate, fileobj, replace: bool = False) -> dict:
    rows = read_xlsx_rows(fileobj, QUESTION_HEADER_ALIASES)
    result = import_questions_from_rows(exam=exam, rows=rows, replace=replace)
    logger.info(
        "question excel import exam=%s rows=%s created=%s errors=%s",
        exam.id,
        len(rows),
        result["created"],
        len(result["errors"]),
    )
    return result
