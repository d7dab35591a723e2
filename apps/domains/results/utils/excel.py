# apps/domains/results/utils/excel.py
from django.conf import settings
from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

REPORT_COLUMNS = [
    ("student_name", "Student", 24),
    ("student_number", "Student No.", 16),
    ("section_name", "Section", 16),
    ("subject_name", "Subject", 20),
    ("exam_name", "Exam", 24),
    ("score", "Score", 10),
    ("total_questions", "Questions", 12),
    ("percentage", "Percentage", 12),
    ("completed_at", "Date", 14),
]


def _cell_value(key, value):
    if value is None:
        return ""
    if key == "percentage":
        return f"{value:.2f}%"
    if key == "completed_at":
        return timezone.localtime(value).date().isoformat()
    return value


def build_report_excel(rows):
    wb = Workbook()
    ws = wb.active
    ws.title = "Reports"

    # Header
    ws.append([label for _, label, _ in REPORT_COLUMNS])

    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)

    for col, (_, _, width) in enumerate(REPORT_COLUMNS, start=1):
        cell = ws.cell(row=1, column=col)
        cell.font = header_font
        cell.alignment = center
        ws.column_dimensions[get_column_letter(col)].width = width

    ws.freeze_panes = "A2"

    for row in rows:
        ws.append([_cell_value(key, row.get(key)) for key, _, _ in REPORT_COLUMNS])

    basename = getattr(settings, "REPORT_EXPORT_BASENAME", "sems-report")
    return wb, f"{basename}.xlsx"
