from rest_framework import serializers

from apps.core.exceptions import ConflictError
from apps.domains.subjects.models import Subject


class SubjectSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subject
        fields = [
            "id",
            "name",
            "description",
            "created_at",
            "updated_at",
        ]
        # duplicate names -> 409 (validate_name), not the default 400
        extra_kwargs = {"name": {"validators": []}}

    def validate_name(self, value):
        value = value.strip()
        qs = Subject.objects.filter(name=value)
        if self.instance is not None:
            qs = qs.exclude(id=self.instance.id)
        if qs.exists():
            raise ConflictError("A subject with this name already exists.")
        return value
