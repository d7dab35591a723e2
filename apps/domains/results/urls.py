# PATH: apps/domains/results/urls.py

from django.urls import path

# ======================================================
# Student attempts
# ======================================================
from apps.domains.results.views.exam_attempt_view import (
    ExamStartView,
    ExamSubmitView,
    MyResultsView,
)

# ======================================================
# Guest
# ======================================================
from apps.domains.results.views.guest_view import (
    GuestExamListView,
    GuestExamStartView,
    GuestExamSubmitView,
)

# ======================================================
# Reports (supervisor / manager)
# ======================================================
from apps.domains.results.views.report_view import (
    PerformanceReportView,
    SectionRankingView,
    StudentReportView,
    ExcelExportView,
    PdfExportView,
)

urlpatterns = [
    # must precede the exams router ("exams/<pk>")
    path("exams/my/results", MyResultsView.as_view(), name="my-results"),
    path("exams/<int:exam_id>/start", ExamStartView.as_view(), name="exam-start"),
    path("exams/<int:exam_id>/submit", ExamSubmitView.as_view(), name="exam-submit"),

    path("guest/exams", GuestExamListView.as_view(), name="guest-exam-list"),
    path("guest/exams/<int:exam_id>/start", GuestExamStartView.as_view(), name="guest-exam-start"),
    path("guest/exams/<int:exam_id>/submit", GuestExamSubmitView.as_view(), name="guest-exam-submit"),

    path("reports/performance", PerformanceReportView.as_view(), name="report-performance"),
    path("reports/sections", SectionRankingView.as_view(), name="report-sections"),
    path("reports/students", StudentReportView.as_view(), name="report-students"),
    path("reports/export/excel", ExcelExportView.as_view(), name="report-export-excel"),
    path("reports/export/pdf", PdfExportView.as_view(), name="report-export-pdf"),
]
