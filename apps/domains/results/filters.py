import django_filters

from .models import Result


class ResultReportFilter(django_filters.FilterSet):
    section_id = django_filters.NumberFilter(field_name="student__section_id")
    subject_id = django_filters.NumberFilter(field_name="exam__subject_id")
    student_id = django_filters.NumberFilter(field_name="student_id")

    class Meta:
        model = Result
        fields = ["section_id", "subject_id", "student_id"]
