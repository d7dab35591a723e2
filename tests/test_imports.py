import pytest
from django.contrib.auth import get_user_model

from apps.api.common.tabular import build_header_map, cell_str, normalize_header
from apps.domains.exams.models import Question
from apps.domains.exams.services.question_import import (
    QUESTION_HEADER_ALIASES,
    import_questions_from_rows,
    parse_correct_marker,
    parse_question_row,
)
from apps.domains.students.models import StudentProfile
from apps.domains.students.services.bulk_from_excel import STUDENT_HEADER_ALIASES

User = get_user_model()


# ==================================================
# header aliases
# ==================================================

def test_normalize_header_ignores_case_and_spaces():
    assert normalize_header("  Question Text ") == "questiontext"
    assert normalize_header(None) == ""


def test_header_map_first_alias_wins():
    header = ["Name", "Full_Name", "National_ID"]
    mapping = build_header_map(header, STUDENT_HEADER_ALIASES)
    # "full_name" is listed before "name"
    assert mapping["full_name"] == 1
    assert mapping["national_id"] == 2
    assert "student_number" not in mapping


def test_header_map_accepts_arabic_headers():
    header = ["السؤال", "A", "B", "C", "D", "الإجابة الصحيحه"]
    mapping = build_header_map(header, QUESTION_HEADER_ALIASES)
    assert mapping == {
        "question_text": 0,
        "choice_1": 1,
        "choice_2": 2,
        "choice_3": 3,
        "choice_4": 4,
        "correct": 5,
    }


def test_numeric_cells_lose_trailing_zero():
    assert cell_str(29801011234567.0) == "29801011234567"
    assert cell_str(None) == ""
    assert cell_str(" x ") == "x"


# ==================================================
# question rows
# ==================================================

@pytest.mark.parametrize(
    "marker,expected",
    [("A", 0), ("b", 1), ("3", 2), ("د", 3), ("4.0", 3), ("?", -1), ("inf", -1), ("1e400", -1)],
)
def test_parse_correct_marker(marker, expected):
    assert parse_correct_marker(marker) == expected


def test_parse_row_keeps_correct_choice_after_dropping_blanks():
    text, choices = parse_question_row({
        "question_text": "Capital of France?",
        "choice_1": "",
        "choice_2": "Paris",
        "choice_3": "0",
        "choice_4": "Rome",
        "correct": "B",
    })
    assert text == "Capital of France?"
    assert choices == [
        {"answer_text": "Paris", "is_correct": True},
        {"answer_text": "Rome", "is_correct": False},
    ]


@pytest.mark.parametrize(
    "row",
    [
        {"question_text": "", "choice_1": "a", "choice_2": "b", "correct": "A"},
        {"question_text": "Q", "choice_1": "a", "correct": "A"},
        {"question_text": "Q", "choice_1": "a", "choice_2": "b", "correct": "C"},
        {"question_text": "Q", "choice_1": "a", "choice_2": "b", "correct": ""},
        {"question_text": "Q", "choice_1": "a", "choice_2": "b", "correct": "inf"},
    ],
)
def test_parse_row_rejects_unusable_rows(row):
    with pytest.raises(ValueError):
        parse_question_row(row)


# ==================================================
# question import endpoint
# ==================================================

@pytest.mark.django_db
def test_import_questions_collects_row_errors(api_client, supervisor, make_exam, xlsx_upload):
    exam, _ = make_exam(n_questions=1)
    upload = xlsx_upload([
        ["question_text", "answer1", "answer2", "answer3", "answer4", "correct_answer"],
        ["2+2?", "3", "4", "5", "", 2],
        ["", "x", "y", "", "", 1],
        ["Sky colour?", "Blue", "Green", "", "", "A"],
        ["Broken", "only", "", "", "", 1],
    ])
    api_client.force_authenticate(supervisor)

    res = api_client.post(f"/api/exams/{exam.id}/import-questions", {"file": upload}, format="multipart")

    assert res.status_code == 200
    assert res.data["success"] is True
    assert res.data["created"] == 2
    assert [e["row"] for e in res.data["errors"]] == [3, 5]

    questions = list(Question.objects.filter(exam=exam).order_by("sort_order"))
    assert [q.text for q in questions] == ["Q1", "2+2?", "Sky colour?"]
    correct = [a.text for a in questions[1].answers.all() if a.is_correct]
    assert correct == ["4"]


@pytest.mark.django_db
def test_import_questions_replace_clears_existing(api_client, supervisor, make_exam, xlsx_upload):
    exam, _ = make_exam(n_questions=3)
    upload = xlsx_upload([
        ["السؤال", "A", "B", "C", "D", "الإجابة الصحيحة"],
        ["سؤال", "نعم", "لا", "", "", "ب"],
    ])
    api_client.force_authenticate(supervisor)

    res = api_client.post(
        f"/api/exams/{exam.id}/import-questions",
        {"file": upload, "replace": "true"},
        format="multipart",
    )

    assert res.status_code == 200
    questions = list(Question.objects.filter(exam=exam))
    assert len(questions) == 1
    assert questions[0].sort_order == 0
    assert [a.text for a in questions[0].answers.all() if a.is_correct] == ["لا"]


@pytest.mark.django_db
def test_import_questions_rejects_non_excel(api_client, supervisor, make_exam):
    from django.core.files.uploadedfile import SimpleUploadedFile

    exam, _ = make_exam()
    api_client.force_authenticate(supervisor)
    bogus = SimpleUploadedFile("notes.xlsx", b"not a workbook")

    res = api_client.post(f"/api/exams/{exam.id}/import-questions", {"file": bogus}, format="multipart")

    assert res.status_code == 400
    assert Question.objects.filter(exam=exam).count() == 2


# ==================================================
# student import endpoint
# ==================================================

@pytest.mark.django_db
def test_import_students(api_client, supervisor, section, make_user, xlsx_upload):
    make_user("student", national_id="30000000000001")
    upload = xlsx_upload([
        ["الاسم", "الرقم القومي", "رقم الطالب"],
        ["Huda", 30000000000002.0, "S-10"],
        ["", "30000000000003", "S-11"],
        ["Taken", "30000000000001", "S-12"],
        ["Amal", "30000000000004", ""],
    ])
    api_client.force_authenticate(supervisor)

    res = api_client.post(
        "/api/students/import",
        {"file": upload, "section_id": section.id},
        format="multipart",
    )

    assert res.status_code == 200
    assert res.data["success"] == 2
    assert [e["row"] for e in res.data["errors"]] == [3, 4]

    huda = StudentProfile.objects.get(user__national_id="30000000000002")
    assert huda.section_id == section.id
    assert huda.user.role == "student"
    # student number is the initial password
    assert huda.user.check_password("S-10")

    amal = StudentProfile.objects.get(user__national_id="30000000000004")
    assert amal.user.check_password("30000000000004")


@pytest.mark.django_db
def test_import_rows_skips_unparseable_correct_marker(make_exam):
    exam, _ = make_exam(n_questions=0)
    rows = [
        {"question_text": "Q ok", "choice_1": "a", "choice_2": "b", "correct": "A"},
        {"question_text": "Q inf", "choice_1": "a", "choice_2": "b", "correct": "inf"},
    ]

    out = import_questions_from_rows(exam=exam, rows=rows)

    assert out["created"] == 1
    assert [e["row"] for e in out["errors"]] == [3]
    assert list(Question.objects.filter(exam=exam).values_list("text", flat=True)) == ["Q ok"]
