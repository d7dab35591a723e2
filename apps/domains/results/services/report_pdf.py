# apps/domains/results/services/report_pdf.py
from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Dict, List

from django.conf import settings
from django.utils import timezone
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

REPORT_FONT_NAME = "ReportBody"


def _body_font() -> str:
    """
    REPORT_PDF_FONT_PATH set -> that TTF (registered once), else Helvetica.
    Glyphs only: Arabic text is not reshaped or reordered.
    """
    path = getattr(settings, "REPORT_PDF_FONT_PATH", "")
    if not path:
        return "Helvetica"
    if REPORT_FONT_NAME not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(REPORT_FONT_NAME, path))
        logger.info("report pdf font registered: %s", path)
    return REPORT_FONT_NAME


def build_report_pdf(rows: List[Dict[str, Any]]) -> tuple[bytes, str]:
    """A4 text table (one line per result)."""
    body_font = _body_font()

    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    _, height = A4

    y = height - 48
    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, y, "Performance Report")
    y -= 20

    c.setFont(body_font, 10)
    c.drawString(40, y, f"Generated: {timezone.localtime().strftime('%Y-%m-%d %H:%M')}")
    y -= 14
    c.drawString(40, y, f"Total results: {len(rows)}")
    y -= 20

    for idx, it in enumerate(rows, start=1):
        if y < 80:
            c.showPage()
            y = height - 60
            c.setFont(body_font, 10)

        completed = it.get("completed_at")
        line = (
            f"{idx}. "
            f"{it.get('student_name', '')} ({it.get('student_number', '')}) "
            f"| {it.get('section_name', '')} "
            f"| {it.get('subject_name', '')} / {it.get('exam_name', '')} "
            f"| {it.get('score', 0)}/{it.get('total_questions', 0)} "
            f"| {it.get('percentage', 0):.2f}% "
            f"| {timezone.localtime(completed).date().isoformat() if completed else ''}"
        )
        c.drawString(40, y, line[:120])
        y -= 14

    c.showPage()
    c.save()

    basename = getattr(settings, "REPORT_EXPORT_BASENAME", "sems-report")
    return buf.getvalue(), f"{basename}.pdf"
