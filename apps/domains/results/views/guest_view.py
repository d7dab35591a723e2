# apps/domains/results/views/guest_view.py
from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.domains.exams.models import ExamTemplate
from apps.domains.exams.serializers import ExamSerializer, ExamStartSerializer
from apps.domains.results.serializers import GuestExamSubmitSerializer, ResultSerializer
from apps.domains.results.services.grading_service import start_guest_exam, submit_guest_exam


class GuestView(APIView):
    """No login. Results are flagged is_guest and stay out of reports."""

    authentication_classes = []
    permission_classes = [AllowAny]


class GuestExamListView(GuestView):
    """GET /api/guest/exams (active only)"""

    def get(self, request):
        qs = ExamTemplate.objects.select_related("subject").filter(is_active=True).order_by("-id")
        return Response(ExamSerializer(qs, many=True).data)


class GuestExamStartView(GuestView):
    """GET /api/guest/exams/<exam_id>/start"""

    def get(self, request, exam_id: int):
        exam = start_guest_exam(exam_id=exam_id)
        return Response(ExamStartSerializer(exam, context={"hide_correct": True}).data)


class GuestExamSubmitView(GuestView):
    """POST /api/guest/exams/<exam_id>/submit (+ guest_name)"""

    @swagger_auto_schema(request_body=GuestExamSubmitSerializer)
    def post(self, request, exam_id: int):
        serializer = GuestExamSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = submit_guest_exam(
            exam_id=exam_id,
            guest_name=serializer.validated_data["guest_name"],
            answers=serializer.validated_data["answers"],
            started_at=serializer.validated_data.get("started_at"),
        )
        return Response(
            {"result": ResultSerializer(result).data},
            status=status.HTTP_201_CREATED,
        )
