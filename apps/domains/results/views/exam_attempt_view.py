# apps/domains/results/views/exam_attempt_view.py
from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.core.permissions import is_student_user
from apps.domains.exams.serializers import ExamStartSerializer
from apps.domains.results.serializers import (
    ExamSubmitSerializer,
    MyResultSerializer,
    ResultSerializer,
)
from apps.domains.results.services.grading_service import start_exam, submit_exam
from apps.domains.results.services.student_result_service import list_results_for_user


class ExamStartView(APIView):
    """
    POST /api/exams/<exam_id>/start

    - students: active template + eligibility, correctness stripped
    - staff: preview with is_correct
    """

    permission_classes = [IsAuthenticated]

    def post(self, request, exam_id: int):
        exam = start_exam(exam_id=exam_id, user=request.user)
        data = ExamStartSerializer(
            exam,
            context={"hide_correct": is_student_user(request.user)},
        ).data
        return Response(data)


class ExamSubmitView(APIView):
    """
    POST /api/exams/<exam_id>/submit
    body: {answers:[{question_id, answer_id}], started_at?}
    -> 201 {result}
    """

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=ExamSubmitSerializer)
    def post(self, request, exam_id: int):
        serializer = ExamSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = submit_exam(
            exam_id=exam_id,
            user=request.user,
            answers=serializer.validated_data["answers"],
            started_at=serializer.validated_data.get("started_at"),
        )
        return Response(
            {"result": ResultSerializer(result).data},
            status=status.HTTP_201_CREATED,
        )


class MyResultsView(APIView):
    """GET /api/exams/my/results"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        qs = list_results_for_user(request.user)
        return Response(MyResultSerializer(qs, many=True).data)
