from .performance import (
    report_queryset,
    overall_stats,
    section_ranking,
    student_report_rows,
)

__all__ = [
    "report_queryset",
    "overall_stats",
    "section_ranking",
    "student_report_rows",
]
