from decimal import Decimal
from io import BytesIO

import pytest
from openpyxl import load_workbook

from apps.domains.results.aggregations import overall_stats, section_ranking, student_report_rows
from apps.domains.sections.models import Section
from apps.domains.subjects.models import Subject

pytestmark = pytest.mark.django_db


@pytest.fixture
def graded(make_exam, make_result, make_student, section):
    """
    Math: Sara 100 + Omar 50, guest 0 (ignored)
    Science: Sara 80
    Section B: Lina 90 (Math)
    """
    science = Subject.objects.create(name="Science")
    section_b = Section.objects.create(name="Section B")

    math_exam, _ = make_exam(name="Math-1")
    sci_exam, _ = make_exam(name="Sci-1", subject_obj=science)

    sara = make_student("Sara", section=section, student_number="S-001")
    omar = make_student("Omar", section=section, student_number="S-002")
    lina = make_student("Lina", section=section_b, student_number="S-003")

    make_result(math_exam, sara, percentage="100.00", score=2)
    make_result(math_exam, omar, percentage="50.00", score=1)
    make_result(math_exam, lina, percentage="90.00", score=2)
    make_result(sci_exam, sara, percentage="80.00", score=2)
    make_result(math_exam, None, percentage="0.00", guest_name="Visitor")
    make_result(sci_exam, None, percentage="0.00", guest_name="Visitor")

    return {
        "math": math_exam,
        "science": science,
        "section_a": section,
        "section_b": section_b,
        "sara": sara,
    }


def test_overall_stats_excludes_guests(graded):
    stats = overall_stats()

    assert [s["subject_name"] for s in stats] == ["Math", "Science"]
    math, science = stats
    assert math["total_attempts"] == 3
    assert math["avg_percentage"] == Decimal("80.00")
    assert science["total_attempts"] == 1
    assert science["avg_percentage"] == Decimal("80.00")


def test_overall_stats_filters(graded):
    by_section = overall_stats({"section_id": graded["section_b"].id})
    assert by_section == [{
        "subject_id": graded["math"].subject_id,
        "subject_name": "Math",
        "total_attempts": 1,
        "avg_percentage": Decimal("90.00"),
    }]

    by_subject = overall_stats({"subject_id": graded["science"].id})
    assert [s["subject_name"] for s in by_subject] == ["Science"]


def test_section_ranking_orders_by_average(graded):
    ranking = section_ranking()

    assert [r["section_name"] for r in ranking] == ["Section B", "Section A"]
    b, a = ranking
    assert b["avg_percentage"] == Decimal("90.00")
    assert (b["total_students"], b["total_exams"]) == (1, 1)
    # (100 + 50 + 80) / 3
    assert a["avg_percentage"] == Decimal("76.67")
    assert (a["total_students"], a["total_exams"]) == (2, 3)


def test_student_rows_exclude_guests(graded):
    rows = student_report_rows()
    assert len(rows) == 4
    assert all(r["student_name"] for r in rows)

    sara_rows = student_report_rows({"student_id": graded["sara"].id})
    assert {r["exam_name"] for r in sara_rows} == {"Math-1", "Sci-1"}
    assert all(r["section_name"] == "Section A" for r in sara_rows)


def test_reports_only_for_supervisor_and_manager(api_client, graded, supervisor, manager, make_user):
    for user, expected in ((supervisor, 200), (manager, 200), (make_user("student"), 403)):
        api_client.force_authenticate(user)
        assert api_client.get("/api/reports/performance").status_code == expected
        assert api_client.get("/api/reports/sections").status_code == expected
        assert api_client.get("/api/reports/students").status_code == expected


def test_students_report_endpoint_shape(api_client, graded, manager):
    api_client.force_authenticate(manager)
    res = api_client.get("/api/reports/students", {"section_id": graded["section_b"].id})

    assert res.status_code == 200
    assert len(res.data) == 1
    row = res.data[0]
    assert row["student_name"] == "Lina"
    assert row["subject_name"] == "Math"
    assert float(row["percentage"]) == 90.0


def test_invalid_filter_is_400(api_client, graded, manager):
    api_client.force_authenticate(manager)
    res = api_client.get("/api/reports/performance", {"section_id": "abc"})
    assert res.status_code == 400


def test_excel_export(api_client, graded, supervisor):
    api_client.force_authenticate(supervisor)
    res = api_client.get("/api/reports/export/excel")

    assert res.status_code == 200
    assert res["Content-Type"].startswith("application/vnd.openxmlformats")
    assert 'filename="sems-report.xlsx"' in res["Content-Disposition"]

    ws = load_workbook(BytesIO(res.content)).active
    rows = list(ws.iter_rows(values_only=True))
    assert rows[0][0] == "Student"
    assert ws["A1"].font.bold
    assert ws.freeze_panes == "A2"
    assert len(rows) == 1 + 4


def test_pdf_export(api_client, graded, supervisor):
    api_client.force_authenticate(supervisor)
    res = api_client.get("/api/reports/export/pdf")

    assert res.status_code == 200
    assert res["Content-Type"] == "application/pdf"
    assert 'filename="sems-report.pdf"' in res["Content-Disposition"]
    assert res.content.startswith(b"%PDF")


def test_pdf_export_uses_configured_ttf(graded, settings):
    import reportlab
    from pathlib import Path

    from reportlab.pdfbase import pdfmetrics

    from apps.domains.results.services.report_pdf import REPORT_FONT_NAME, build_report_pdf

    settings.REPORT_PDF_FONT_PATH = str(Path(reportlab.__file__).parent / "fonts" / "Vera.ttf")
    rows = student_report_rows({})
    rows[0]["student_name"] = "سارة"

    content, filename = build_report_pdf(rows)

    assert content.startswith(b"%PDF")
    assert filename == "sems-report.pdf"
    assert REPORT_FONT_NAME in pdfmetrics.getRegisteredFontNames()
