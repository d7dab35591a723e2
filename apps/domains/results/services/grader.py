# apps/domains/results/services/grader.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Mapping, Optional

# ============================================================
# Scoring v1
# - single correct choice per question
# - no partial credit / negative marking
# - pure: no DB access beyond build_answer_key()
# ============================================================

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class QuestionKey:
    question_id: int
    correct_answer_id: Optional[int]


@dataclass(frozen=True)
class ScoreOutcome:
    score: int
    total_questions: int
    percentage: Decimal


def _as_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def build_answer_key(exam) -> List[QuestionKey]:
    """
    Canonical key in question order.
    Expects exam.questions / answers to be prefetched (exam_queryset_with_questions).
    """
    keys: List[QuestionKey] = []
    for q in exam.questions.all():
        correct = next((a for a in q.answers.all() if a.is_correct), None)
        keys.append(
            QuestionKey(
                question_id=int(q.id),
                correct_answer_id=int(correct.id) if correct else None,
            )
        )
    return keys


def compute_percentage(score: int, total_questions: int) -> Decimal:
    if total_questions <= 0:
        return Decimal("0.00")
    return (Decimal(score) * 100 / Decimal(total_questions)).quantize(
        TWO_PLACES, rounding=ROUND_HALF_UP
    )


def _first_answer_per_question(submitted: Iterable[Mapping[str, Any]]) -> Dict[int, Optional[int]]:
    chosen: Dict[int, Optional[int]] = {}
    for item in submitted or []:
        qid = _as_int(item.get("question_id"))
        if qid is None or qid in chosen:
            continue
        chosen[qid] = _as_int(item.get("answer_id"))
    return chosen


def score_submission(
    keys: List[QuestionKey],
    submitted: Iterable[Mapping[str, Any]],
) -> ScoreOutcome:
    """
    - total = number of canonical questions (not submitted entries)
    - unknown question ids are ignored
    - duplicated question ids: first entry in array order
    - question without a correct choice never scores
    """
    chosen = _first_answer_per_question(submitted)

    score = 0
    for key in keys:
        if key.correct_answer_id is None:
            continue
        if key.question_id not in chosen:
            continue
        if chosen[key.question_id] == key.correct_answer_id:
            score += 1

    total = len(keys)
    return ScoreOutcome(
        score=score,
        total_questions=total,
        percentage=compute_percentage(score, total),
    )
