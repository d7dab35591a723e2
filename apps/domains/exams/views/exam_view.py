# PATH: apps/domains/exams/views/exam_view.py
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from drf_yasg.utils import swagger_auto_schema

from apps.core.exceptions import NotFoundError
from apps.core.permissions import IsStudent, IsSupervisor, is_student_user
from apps.domains.exams.models import ExamTemplate
from apps.domains.exams.serializers import (
    ExamSerializer,
    ExamDetailSerializer,
    ExamWriteSerializer,
    QuestionSerializer,
    QuestionWriteSerializer,
    QuestionImportSerializer,
    QuestionReportCreateSerializer,
)
from apps.domains.exams.services.exam_service import (
    create_exam,
    exam_queryset_with_questions,
    get_exam,
    update_exam,
)
from apps.domains.exams.services.question_factory import (
    create_question,
    get_exam_question,
    replace_question,
)
from apps.domains.exams.services.question_import import import_questions_from_excel
from apps.domains.exams.services.question_report_service import report_question


class ExamViewSet(ModelViewSet):
    """
    Exam templates + their questions

    - read (list / detail / questions): any authenticated user
      -> students never see is_correct
    - write: supervisor
    - question report: student
    """

    parser_classes = [JSONParser, MultiPartParser, FormParser]
    lookup_value_regex = r"\d+"

    # ------------------------------
    # permissions / queryset / serializer
    # ------------------------------
    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [IsAuthenticated()]
        if self.action == "questions" and self.request.method == "GET":
            return [IsAuthenticated()]
        if self.action == "report":
            return [IsAuthenticated(), IsStudent()]
        return [IsAuthenticated(), IsSupervisor()]

    def get_queryset(self):
        if self.action == "retrieve":
            return exam_queryset_with_questions()
        return ExamTemplate.objects.select_related("subject").order_by("-id")

    def get_serializer_class(self):
        if self.action == "retrieve":
            return ExamDetailSerializer
        return ExamSerializer

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        ctx["hide_correct"] = is_student_user(self.request.user)
        return ctx

    # ------------------------------
    # template CRUD
    # ------------------------------
    @swagger_auto_schema(request_body=ExamWriteSerializer)
    def create(self, request, *args, **kwargs):
        serializer = ExamWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        exam = create_exam(serializer.validated_data)
        return Response(ExamSerializer(exam).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=ExamWriteSerializer)
    def update(self, request, *args, **kwargs):
        exam = self.get_object()
        serializer = ExamWriteSerializer(data=request.data, partial=kwargs.get("partial", False))
        serializer.is_valid(raise_exception=True)
        exam = update_exam(exam, serializer.validated_data)
        return Response(ExamSerializer(exam).data)

    def destroy(self, request, *args, **kwargs):
        # cascades: questions -> answers, results, question reports
        self.get_object().delete()
        return Response({"message": "Exam template deleted."}, status=status.HTTP_200_OK)

    # =========================================================
    # GET  /exams/{id}/questions
    # POST /exams/{id}/questions
    # =========================================================
    @swagger_auto_schema(method="post", request_body=QuestionWriteSerializer)
    @action(detail=True, methods=["get", "post"], url_path="questions")
    def questions(self, request, pk=None):
        exam = get_exam(pk)

        if request.method == "GET":
            return Response(
                QuestionSerializer(
                    exam.questions.all(),
                    many=True,
                    context=self.get_serializer_context(),
                ).data
            )

        serializer = QuestionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        question = create_question(
            exam=exam,
            question_text=serializer.validated_data["question_text"],
            answers=serializer.validated_data["answers"],
        )
        return Response(QuestionSerializer(question).data, status=status.HTTP_201_CREATED)

    # =========================================================
    # PUT / DELETE /exams/{id}/questions/{question_id}
    # =========================================================
    @swagger_auto_schema(method="put", request_body=QuestionWriteSerializer)
    @action(
        detail=True,
        methods=["put", "delete"],
        url_path=r"questions/(?P<question_id>\d+)",
    )
    def question_detail(self, request, pk=None, question_id=None):
        question = get_exam_question(pk, question_id)
        if question is None:
            raise NotFoundError("Question not found in this exam.")

        if request.method == "DELETE":
            question.delete()
            return Response({"message": "Question deleted."}, status=status.HTTP_200_OK)

        serializer = QuestionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        question = replace_question(
            question=question,
            question_text=serializer.validated_data["question_text"],
            answers=serializer.validated_data["answers"],
        )
        question = get_exam_question(pk, question.id)
        return Response({"question": QuestionSerializer(question).data})

    # =========================================================
    # POST /exams/{id}/questions/{question_id}/report  (student)
    # =========================================================
    @swagger_auto_schema(request_body=QuestionReportCreateSerializer)
    @action(
        detail=True,
        methods=["post"],
        url_path=r"questions/(?P<question_id>\d+)/report",
    )
    def report(self, request, pk=None, question_id=None):
        serializer = QuestionReportCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        report_question(
            exam_id=pk,
            question_id=question_id,
            user=request.user,
            message=serializer.validated_data.get("message", ""),
        )
        return Response({"success": True}, status=status.HTTP_201_CREATED)

    # =========================================================
    # POST /exams/{id}/import-questions  (multipart file)
    # =========================================================
    @swagger_auto_schema(request_body=QuestionImportSerializer)
    @action(detail=True, methods=["post"], url_path="import-questions")
    def import_questions(self, request, pk=None):
        exam = get_exam(pk, with_questions=False)
        serializer = QuestionImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = import_questions_from_excel(
            exam=exam,
            fileobj=serializer.validated_data["file"],
            replace=serializer.validated_data["replace"],
        )
        return Response(result, status=status.HTTP_200_OK)
