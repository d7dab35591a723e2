from decimal import Decimal

import pytest

from apps.domains.results.services.grader import (
    QuestionKey,
    build_answer_key,
    compute_percentage,
    score_submission,
)

KEYS = [
    QuestionKey(question_id=1, correct_answer_id=11),
    QuestionKey(question_id=2, correct_answer_id=21),
]


def test_all_correct_scores_full_marks():
    outcome = score_submission(KEYS, [
        {"question_id": 1, "answer_id": 11},
        {"question_id": 2, "answer_id": 21},
    ])
    assert outcome.score == 2
    assert outcome.total_questions == 2
    assert outcome.percentage == Decimal("100.00")


def test_empty_submission_scores_zero():
    outcome = score_submission(KEYS, [])
    assert outcome.score == 0
    assert outcome.total_questions == 2
    assert outcome.percentage == Decimal("0.00")


def test_one_right_one_wrong_is_fifty_percent():
    outcome = score_submission(KEYS, [
        {"question_id": 1, "answer_id": 11},
        {"question_id": 2, "answer_id": 22},
    ])
    assert (outcome.score, outcome.total_questions, outcome.percentage) == (1, 2, Decimal("50.00"))


def test_unknown_question_id_is_ignored():
    outcome = score_submission(KEYS, [
        {"question_id": 1, "answer_id": 11},
        {"question_id": 2, "answer_id": 22},
        {"question_id": 999, "answer_id": 11},
    ])
    assert (outcome.score, outcome.total_questions, outcome.percentage) == (1, 2, Decimal("50.00"))


def test_omitted_question_counts_as_wrong():
    outcome = score_submission(KEYS, [{"question_id": 1, "answer_id": 11}])
    assert outcome.score == 1
    assert outcome.total_questions == 2


def test_duplicate_question_id_first_entry_wins():
    first_right = score_submission(KEYS, [
        {"question_id": 1, "answer_id": 11},
        {"question_id": 1, "answer_id": 12},
    ])
    first_wrong = score_submission(KEYS, [
        {"question_id": 1, "answer_id": 12},
        {"question_id": 1, "answer_id": 11},
    ])
    assert first_right.score == 1
    assert first_wrong.score == 0


def test_question_without_correct_choice_never_scores():
    keys = [QuestionKey(question_id=1, correct_answer_id=None)]
    outcome = score_submission(keys, [{"question_id": 1, "answer_id": None}])
    assert outcome.score == 0
    assert outcome.total_questions == 1


def test_null_answer_is_wrong():
    outcome = score_submission(KEYS, [{"question_id": 1, "answer_id": None}])
    assert outcome.score == 0


def test_template_without_questions():
    outcome = score_submission([], [{"question_id": 1, "answer_id": 11}])
    assert (outcome.score, outcome.total_questions, outcome.percentage) == (0, 0, Decimal("0.00"))


@pytest.mark.parametrize(
    "score,total,expected",
    [(1, 3, "33.33"), (2, 3, "66.67"), (1, 8, "12.50"), (0, 5, "0.00")],
)
def test_percentage_two_decimals(score, total, expected):
    assert compute_percentage(score, total) == Decimal(expected)


def test_scoring_is_deterministic():
    submission = [{"question_id": 2, "answer_id": 21}, {"question_id": 1, "answer_id": 12}]
    assert score_submission(KEYS, submission) == score_submission(KEYS, submission)


@pytest.mark.django_db
def test_build_answer_key_follows_question_order(make_exam):
    exam, items = make_exam(n_questions=3)
    keys = build_answer_key(exam)
    assert [k.question_id for k in keys] == [q.id for q, _, _ in items]
    assert [k.correct_answer_id for k in keys] == [c.id for _, c, _ in items]
