from rest_framework import serializers

from apps.core.exceptions import ConflictError
from apps.domains.sections.models import Section


class SectionSerializer(serializers.ModelSerializer):
    student_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Section
        fields = [
            "id",
            "name",
            "description",
            "student_count",
            "created_at",
            "updated_at",
        ]
        extra_kwargs = {"name": {"validators": []}}

    def validate_name(self, value):
        value = value.strip()
        qs = Section.objects.filter(name=value)
        if self.instance is not None:
            qs = qs.exclude(id=self.instance.id)
        if qs.exists():
            raise ConflictError("A section with this name already exists.")
        return value
