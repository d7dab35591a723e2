from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from apps.domains.results.models import Result
from apps.domains.results.services.attempt_service import ExamAttemptService
from apps.domains.results.services.grader import ScoreOutcome

pytestmark = pytest.mark.django_db


def _answers(items, correct_count):
    out = []
    for idx, (q, right, wrong) in enumerate(items):
        out.append({"question_id": q.id, "answer_id": (right if idx < correct_count else wrong).id})
    return out


# ==================================================
# recorder
# ==================================================

OUTCOME = ScoreOutcome(score=1, total_questions=2, percentage=Decimal("50.00"))


def test_recorder_writes_student_result(make_exam, student):
    exam, _ = make_exam()
    result = ExamAttemptService.record_student_attempt(exam=exam, user=student.user, outcome=OUTCOME)

    assert result.student_id == student.id
    assert not result.is_guest
    assert result.percentage == Decimal("50.00")
    assert result.completed_at is not None
    assert result.started_at == result.completed_at


def test_recorder_rejects_second_attempt(make_exam, student):
    exam, _ = make_exam()
    ExamAttemptService.record_student_attempt(exam=exam, user=student.user, outcome=OUTCOME)

    with pytest.raises(ForbiddenError):
        ExamAttemptService.record_student_attempt(exam=exam, user=student.user, outcome=OUTCOME)
    assert Result.objects.filter(exam=exam).count() == 1


def test_recorder_requires_profile(make_exam, make_user):
    exam, _ = make_exam()
    with pytest.raises(NotFoundError):
        ExamAttemptService.record_student_attempt(exam=exam, user=make_user("student"), outcome=OUTCOME)
    assert not Result.objects.exists()


def test_recorder_keeps_client_started_at(make_exam, student):
    exam, _ = make_exam()
    started = timezone.now() - timedelta(minutes=12)
    result = ExamAttemptService.record_student_attempt(
        exam=exam, user=student.user, outcome=OUTCOME, started_at=started,
    )
    assert result.started_at == started
    assert result.completed_at > started


def test_guest_recorder_never_blocks(make_exam):
    exam, _ = make_exam()
    for _ in range(3):
        r = ExamAttemptService.record_guest_attempt(exam=exam, guest_name="Visitor", outcome=OUTCOME)
        assert r.is_guest and r.student_id is None and r.guest_name == "Visitor"
    assert Result.objects.filter(exam=exam, is_guest=True).count() == 3


def test_results_are_append_only(make_exam, make_result, student):
    exam, _ = make_exam()
    result = make_result(exam, student, percentage="50.00", score=1)
    result.score = 2
    with pytest.raises(ConflictError):
        result.save()


# ==================================================
# API: start / submit / my results
# ==================================================

def test_start_strips_correctness_for_students(api_client, make_exam, student):
    exam, _ = make_exam()
    api_client.force_authenticate(student.user)

    res = api_client.post(f"/api/exams/{exam.id}/start")

    assert res.status_code == 200
    assert res.data["exam"] == {
        "id": exam.id,
        "name": "Math-1",
        "duration_minutes": 20,
        "subject_name": "Math",
    }
    answers = [a for q in res.data["questions"] for a in q["answers"]]
    assert answers and all("is_correct" not in a for a in answers)


def test_start_keeps_correctness_for_supervisor_preview(api_client, make_exam, supervisor):
    exam, _ = make_exam(is_active=False)
    api_client.force_authenticate(supervisor)

    res = api_client.post(f"/api/exams/{exam.id}/start")

    assert res.status_code == 200
    assert all("is_correct" in a for q in res.data["questions"] for a in q["answers"])


def test_start_inactive_exam_forbidden_for_student(api_client, make_exam, student):
    exam, _ = make_exam(is_active=False)
    api_client.force_authenticate(student.user)
    res = api_client.post(f"/api/exams/{exam.id}/start")
    assert res.status_code == 403
    assert "error" in res.data


def test_start_unknown_exam_is_404(api_client, student):
    api_client.force_authenticate(student.user)
    res = api_client.post("/api/exams/4242/start")
    assert res.status_code == 404


def test_submit_scores_and_records(api_client, make_exam, student):
    exam, items = make_exam()
    api_client.force_authenticate(student.user)

    res = api_client.post(
        f"/api/exams/{exam.id}/submit",
        {"answers": _answers(items, correct_count=1)},
        format="json",
    )

    assert res.status_code == 201
    result = res.data["result"]
    assert result["score"] == 1
    assert result["total_questions"] == 2
    assert float(result["percentage"]) == 50.0
    assert result["is_guest"] is False
    assert Result.objects.get(id=result["id"]).student_id == student.id


def test_second_submit_is_forbidden_without_reattempt(api_client, make_exam, student):
    exam, items = make_exam()
    api_client.force_authenticate(student.user)
    url = f"/api/exams/{exam.id}/submit"

    assert api_client.post(url, {"answers": _answers(items, 2)}, format="json").status_code == 201
    res = api_client.post(url, {"answers": _answers(items, 2)}, format="json")

    assert res.status_code == 403
    assert Result.objects.filter(exam=exam, student=student).count() == 1

    # start is also blocked now
    assert api_client.post(f"/api/exams/{exam.id}/start").status_code == 403


def test_reattempt_allowed_creates_independent_results(api_client, make_exam, student):
    exam, items = make_exam(allow_reattempt=True)
    api_client.force_authenticate(student.user)
    url = f"/api/exams/{exam.id}/submit"

    scores = []
    for correct in (0, 1, 2):
        res = api_client.post(url, {"answers": _answers(items, correct)}, format="json")
        assert res.status_code == 201
        scores.append(res.data["result"]["score"])

    assert scores == [0, 1, 2]
    assert Result.objects.filter(exam=exam, student=student).count() == 3


def test_submit_without_profile_fails_closed(api_client, make_exam, supervisor):
    exam, items = make_exam()
    api_client.force_authenticate(supervisor)

    res = api_client.post(f"/api/exams/{exam.id}/submit", {"answers": _answers(items, 2)}, format="json")

    assert res.status_code == 404
    assert not Result.objects.exists()


def test_submit_rejects_duplicate_question_ids(api_client, make_exam, student):
    exam, items = make_exam()
    q, right, wrong = items[0]
    api_client.force_authenticate(student.user)

    res = api_client.post(
        f"/api/exams/{exam.id}/submit",
        {"answers": [
            {"question_id": q.id, "answer_id": right.id},
            {"question_id": q.id, "answer_id": wrong.id},
        ]},
        format="json",
    )

    assert res.status_code == 400
    assert not Result.objects.exists()


def test_submit_empty_answers_scores_zero(api_client, make_exam, student):
    exam, _ = make_exam()
    api_client.force_authenticate(student.user)

    res = api_client.post(f"/api/exams/{exam.id}/submit", {"answers": []}, format="json")

    assert res.status_code == 201
    assert res.data["result"]["score"] == 0
    assert float(res.data["result"]["percentage"]) == 0.0


def test_submit_requires_authentication(api_client, make_exam):
    exam, items = make_exam()
    res = api_client.post(f"/api/exams/{exam.id}/submit", {"answers": []}, format="json")
    assert res.status_code == 401
    assert "error" in res.data


def test_my_results_lists_only_own_results(api_client, make_exam, make_result, make_student, student):
    exam, _ = make_exam()
    other = make_student("Other")
    make_result(exam, student, percentage="100.00", score=2)
    make_result(exam, other, percentage="50.00", score=1)
    make_result(exam, None, guest_name="Visitor")

    api_client.force_authenticate(student.user)
    res = api_client.get("/api/exams/my/results")

    assert res.status_code == 200
    assert len(res.data) == 1
    row = res.data[0]
    assert row["exam_id"] == exam.id
    assert row["exam_name"] == "Math-1"
    assert row["subject_name"] == "Math"
    assert row["score"] == 2
