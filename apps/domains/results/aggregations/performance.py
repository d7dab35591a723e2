# PATH: apps/domains/results/aggregations/performance.py
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional

from django.db.models import Avg, Count

from apps.core.exceptions import ValidationError
from apps.domains.results.filters import ResultReportFilter
from apps.domains.results.models import Result


def _round2(v: Any) -> Decimal:
    if v is None:
        return Decimal("0.00")
    return Decimal(str(v)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def report_queryset(params: Optional[Mapping[str, Any]] = None):
    """
    Non-guest results + optional section_id / subject_id / student_id.
    Guests never reach any report.
    """
    qs = Result.objects.filter(is_guest=False)
    if not params:
        return qs

    f = ResultReportFilter(params, queryset=qs)
    if not f.is_valid():
        field, errors = next(iter(f.errors.items()))
        raise ValidationError(f"{field}: {errors[0]}")
    return f.qs


def overall_stats(params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Per subject:
      {subject_id, subject_name, total_attempts, avg_percentage}
    ordered by total_attempts desc (subject id for ties)
    """
    rows = (
        report_queryset(params)
        .values("exam__subject_id", "exam__subject__name")
        .annotate(total_attempts=Count("id"), avg_percentage=Avg("percentage"))
        .order_by("-total_attempts", "exam__subject_id")
    )
    return [
        {
            "subject_id": r["exam__subject_id"],
            "subject_name": r["exam__subject__name"],
            "total_attempts": int(r["total_attempts"] or 0),
            "avg_percentage": _round2(r["avg_percentage"]),
        }
        for r in rows
    ]


def section_ranking() -> List[Dict[str, Any]]:
    """
    Per section (students without a section are left out):
      {section_id, section_name, avg_percentage, total_students, total_exams}
    """
    rows = (
        report_queryset()
        .filter(student__section__isnull=False)
        .values("student__section_id", "student__section__name")
        .annotate(
            avg_percentage=Avg("percentage"),
            total_students=Count("student", distinct=True),
            total_exams=Count("id"),
        )
        .order_by("-avg_percentage", "student__section_id")
    )
    return [
        {
            "section_id": r["student__section_id"],
            "section_name": r["student__section__name"],
            "avg_percentage": _round2(r["avg_percentage"]),
            "total_students": int(r["total_students"] or 0),
            "total_exams": int(r["total_exams"] or 0),
        }
        for r in rows
    ]


def student_report_rows(params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """Flat rows for the table / exports, newest first."""
    qs = (
        report_queryset(params)
        .select_related("student", "student__section", "exam", "exam__subject")
        .order_by("-completed_at", "-id")
    )

    rows: List[Dict[str, Any]] = []
    for r in qs:
        student = r.student
        section = student.section if student else None
        rows.append({
            "result_id": r.id,
            "student_name": student.full_name if student else "",
            "student_number": (student.student_number or "") if student else "",
            "section_name": section.name if section else "",
            "subject_name": r.exam.subject.name,
            "exam_name": r.exam.name,
            "score": r.score,
            "total_questions": r.total_questions,
            "percentage": _round2(r.percentage),
            "completed_at": r.completed_at,
        })
    return rows
