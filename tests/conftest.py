from decimal import Decimal
from io import BytesIO

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from openpyxl import Workbook
from rest_framework.test import APIClient

from apps.domains.exams.models import ExamTemplate, Question, AnswerChoice
from apps.domains.results.models import Result
from apps.domains.sections.models import Section
from apps.domains.students.models import StudentProfile
from apps.domains.subjects.models import Subject

User = get_user_model()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role="student", **kwargs):
        counter["n"] += 1
        n = counter["n"]
        user = User(
            username=kwargs.pop("username", f"{role}{n}"),
            national_id=kwargs.pop("national_id", f"{role}-{n:04d}"),
            role=role,
            **kwargs,
        )
        user.set_password("secret123")
        user.save()
        return user

    return _make


@pytest.fixture
def supervisor(make_user):
    return make_user("supervisor")


@pytest.fixture
def manager(make_user):
    return make_user("manager")


@pytest.fixture
def section(db):
    return Section.objects.create(name="Section A")


@pytest.fixture
def make_student(make_user):
    def _make(full_name="Student", section=None, student_number=None):
        user = make_user("student")
        return StudentProfile.objects.create(
            user=user,
            full_name=full_name,
            student_number=student_number or user.national_id,
            section=section,
        )

    return _make


@pytest.fixture
def student(make_student, section):
    return make_student("Sara", section=section, student_number="S-001")


@pytest.fixture
def subject(db):
    return Subject.objects.create(name="Math")


@pytest.fixture
def make_exam(db, subject):
    """
    make_exam(n_questions=2) -> (exam, [(question, correct_choice, wrong_choice), ...])
    each question has 4 choices, the first one correct
    """

    def _make(name="Math-1", n_questions=2, allow_reattempt=False, is_active=True, subject_obj=None):
        exam = ExamTemplate.objects.create(
            subject=subject_obj or subject,
            name=name,
            duration_minutes=20,
            allow_reattempt=allow_reattempt,
            is_active=is_active,
        )
        items = []
        for qi in range(n_questions):
            q = Question.objects.create(exam=exam, text=f"Q{qi + 1}", sort_order=qi)
            choices = [
                AnswerChoice.objects.create(
                    question=q,
                    text=f"Q{qi + 1}-{ci}",
                    is_correct=(ci == 0),
                    sort_order=ci,
                )
                for ci in range(4)
            ]
            items.append((q, choices[0], choices[1]))
        return exam, items

    return _make


@pytest.fixture
def make_result(db):
    def _make(exam, student=None, percentage="0.00", score=0, total=2, guest_name=""):
        return Result.objects.create(
            exam=exam,
            student=student,
            score=score,
            total_questions=total,
            percentage=Decimal(str(percentage)),
            is_guest=student is None,
            guest_name=guest_name if student is None else "",
        )

    return _make


@pytest.fixture
def xlsx_upload():
    def _build(rows, name="upload.xlsx"):
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        buf = BytesIO()
        wb.save(buf)
        return SimpleUploadedFile(
            name,
            buf.getvalue(),
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    return _build
