# PATH: apps/domains/students/views.py

from rest_framework import status
from rest_framework.viewsets import ModelViewSet
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.pagination import PageNumberPagination
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema

from apps.core.permissions import IsSupervisor
from .models import StudentProfile
from .filters import StudentFilter
from .serializers import (
    StudentSerializer,
    StudentCreateSerializer,
    StudentUpdateSerializer,
    StudentImportSerializer,
)
from .services import (
    create_student,
    update_student,
    delete_student,
    resolve_section,
    import_students_from_excel,
)


class StudentListPagination(PageNumberPagination):
    """The SPA expects the total alongside the page of students."""
    page_size = 20
    page_size_query_param = "limit"
    max_page_size = 200

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        return Response({
            "students": data,
            "pagination": {
                "total": paginator.count,
                "page": self.page.number,
                "limit": paginator.per_page,
                "pages": paginator.num_pages,
            },
        })


class StudentViewSet(ModelViewSet):
    """
    Student management (supervisor only)

    ✔ creating a student also creates its login user (role=student)
    ✔ deleting a student deletes the login user
    ✔ search: full name / student number / national id
    """

    permission_classes = [IsAuthenticated, IsSupervisor]
    pagination_class = StudentListPagination
    serializer_class = StudentSerializer
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    filter_backends = [DjangoFilterBackend]
    filterset_class = StudentFilter

    def get_queryset(self):
        return StudentProfile.objects.select_related("section", "user").order_by("-id")

    @swagger_auto_schema(request_body=StudentCreateSerializer)
    def create(self, request, *args, **kwargs):
        serializer = StudentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        profile = create_student(
            full_name=data["full_name"],
            national_id=data["national_id"],
            student_number=data.get("student_number"),
            section=resolve_section(data.get("section_id")),
            email=data.get("email"),
            password=data.get("password"),
        )
        return Response(StudentSerializer(profile).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=StudentUpdateSerializer)
    def update(self, request, *args, **kwargs):
        profile = self.get_object()
        serializer = StudentUpdateSerializer(data=request.data, partial=kwargs.get("partial", False))
        serializer.is_valid(raise_exception=True)
        profile = update_student(profile, serializer.validated_data)
        return Response(StudentSerializer(profile).data)

    def destroy(self, request, *args, **kwargs):
        delete_student(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # --------------------------------------------------
    # Excel import: POST /students/import (multipart file)
    # --------------------------------------------------
    @swagger_auto_schema(request_body=StudentImportSerializer)
    @action(detail=False, methods=["post"], url_path="import")
    def import_excel(self, request):
        serializer = StudentImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        section = resolve_section(serializer.validated_data.get("section_id"))

        result = import_students_from_excel(
            serializer.validated_data["file"],
            section=section,
        )
        return Response(result, status=status.HTTP_200_OK)
