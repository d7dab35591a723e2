# PATH: apps/domains/students/services/bulk_from_excel.py
# Spreadsheet rows -> students. Per-row failures are collected, the batch continues.

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model

from apps.api.common.tabular import HeaderAliases, read_xlsx_rows
from apps.core.exceptions import DomainError
from apps.domains.sections.models import Section
from .student_service import create_student

logger = logging.getLogger(__name__)

# canonical field -> accepted headers, highest priority first
STUDENT_HEADER_ALIASES: HeaderAliases = {
    "national_id": (
        "national_id", "nationalid", "national id", "id_number",
        "الرقم القومي", "الرقم_القومي", "رقم الهوية", "الهوية",
    ),
    "full_name": (
        "full_name", "fullname", "name", "student_name",
        "الاسم", "اسم الطالب", "الاسم الكامل",
    ),
    "student_number": (
        "student_number", "studentnumber", "student_no", "number",
        "رقم الطالب", "رقم الجلوس",
    ),
}


def bulk_create_students_from_rows(
    *,
    rows: list[dict],
    section: Section | None = None,
) -> dict:
    """
    Returns: { "success": int, "errors": [{ "row", "name", "error" }] }

    - row numbers are spreadsheet rows (header = 1)
    - password for imported students = student number (falls back to national id)
    """
    User = get_user_model()

    success = 0
    errors: list[dict] = []

    for row_index, item in enumerate(rows, start=2):
        national_id = (item.get("national_id") or "").strip()
        full_name = (item.get("full_name") or "").strip()
        student_number = (item.get("student_number") or "").strip()

        if not national_id or not full_name:
            errors.append({
                "row": row_index,
                "name": full_name or "(no name)",
                "error": "Missing national id or full name.",
            })
            continue

        if User.objects.filter(national_id=national_id).exists():
            errors.append({
                "row": row_index,
                "name": full_name,
                "error": f"National id {national_id} is already registered.",
            })
            continue

        try:
            create_student(
                full_name=full_name,
                national_id=national_id,
                student_number=student_number or None,
                section=section,
                password=student_number or national_id,
            )
            success += 1
        except DomainError as e:
            errors.append({"row": row_index, "name": full_name, "error": e.message})
        except Exception as e:
            logger.warning(
                "bulk_create_students row=%s name=%r: %s",
                row_index,
                full_name,
                e,
                exc_info=True,
            )
            errors.append({"row": row_index, "name": full_name, "error": str(e)[:500]})

    return {"success": success, "errors": errors}


def import_students_from_excel(fileobj, *, section: Section | None = None) -> dict:
    rows = read_xlsx_rows(fileobj, STUDENT_HEADER_ALIASES)
    result = bulk_create_students_from_rows(rows=rows, section=section)
    logger.info(
        "student excel import: rows=%s success=%s errors=%s",
        len(rows),
        result["success"],
        len(result["errors"]),
    )
    return result
