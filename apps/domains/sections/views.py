from django.db.models import Count

from rest_framework.viewsets import ModelViewSet
from rest_framework.permissions import IsAuthenticated

from apps.core.permissions import IsSupervisor, IsSupervisorOrManager
from apps.domains.sections.models import Section
from apps.domains.sections.serializers import SectionSerializer


class SectionViewSet(ModelViewSet):
    """
    Sections
    - read: supervisor / manager
    - write: supervisor
    - delete detaches students (StudentProfile.section SET_NULL)
    """

    serializer_class = SectionSerializer

    def get_queryset(self):
        return Section.objects.annotate(student_count=Count("students"))

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [IsAuthenticated(), IsSupervisorOrManager()]
        return [IsAuthenticated(), IsSupervisor()]
