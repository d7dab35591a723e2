# PATH: apps/domains/students/services/__init__.py
from .student_service import create_student, update_student, delete_student, resolve_section
from .bulk_from_excel import bulk_create_students_from_rows, import_students_from_excel

__all__ = [
    "create_student",
    "update_student",
    "delete_student",
    "resolve_section",
    "bulk_create_students_from_rows",
    "import_students_from_excel",
]
