import django_filters
from django.db.models import Q

from .models import StudentProfile


class StudentFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method="filter_search")
    section_id = django_filters.NumberFilter(field_name="section_id")

    class Meta:
        model = StudentProfile
        fields = [
            "search",
            "section_id",
        ]

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(full_name__icontains=value)
            | Q(student_number__icontains=value)
            | Q(user__national_id__icontains=value)
        )
