# apps/domains/results/views/report_view.py
from __future__ import annotations

from io import BytesIO

from django.http import HttpResponse
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsSupervisorOrManager
from apps.domains.results.aggregations import (
    overall_stats,
    section_ranking,
    student_report_rows,
)
from apps.domains.results.serializers import ReportRowSerializer
from apps.domains.results.services.report_pdf import build_report_pdf
from apps.domains.results.utils.excel import build_report_excel

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ReportView(APIView):
    permission_classes = [IsAuthenticated, IsSupervisorOrManager]


class PerformanceReportView(ReportView):
    """GET /api/reports/performance?section_id=&subject_id="""

    def get(self, request):
        return Response(overall_stats(request.query_params))


class SectionRankingView(ReportView):
    """GET /api/reports/sections"""

    def get(self, request):
        return Response(section_ranking())


class StudentReportView(ReportView):
    """GET /api/reports/students?section_id=&subject_id=&student_id="""

    def get(self, request):
        rows = student_report_rows(request.query_params)
        return Response(ReportRowSerializer(rows, many=True).data)


class ExcelExportView(ReportView):
    """GET /api/reports/export/excel"""

    def get(self, request):
        wb, filename = build_report_excel(student_report_rows(request.query_params))

        buf = BytesIO()
        wb.save(buf)

        response = HttpResponse(buf.getvalue(), content_type=XLSX_CONTENT_TYPE)
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response


class PdfExportView(ReportView):
    """GET /api/reports/export/pdf"""

    def get(self, request):
        content, filename = build_report_pdf(student_report_rows(request.query_params))

        response = HttpResponse(content, content_type="application/pdf")
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response
