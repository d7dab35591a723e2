from rest_framework.viewsets import ModelViewSet
from rest_framework.permissions import IsAuthenticated

from apps.core.permissions import IsSupervisor
from apps.domains.subjects.models import Subject
from apps.domains.subjects.serializers import SubjectSerializer


class SubjectViewSet(ModelViewSet):
    """
    Subjects
    - read: any authenticated user (student dashboard lists them)
    - write: supervisor
    - delete: ProtectedError while templates exist -> 409
    """

    queryset = Subject.objects.all()
    serializer_class = SubjectSerializer

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsSupervisor()]
