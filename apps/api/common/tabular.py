# PATH: apps/api/common/tabular.py
# Spreadsheet rows -> canonical field dicts.
# - header aliases are declared per importer (students, questions)
# - matching is case / whitespace / full-width insensitive
# - aliases are tried in priority order, first header found wins
from __future__ import annotations

import re
from io import BytesIO
from typing import Any, Iterable

from openpyxl import load_workbook

from apps.core.exceptions import ValidationError

HeaderAliases = dict[str, tuple[str, ...]]


def normalize_header(label: Any) -> str:
    """Strip whitespace, full-width -> half-width, lowercase."""
    s = str(label if label is not None else "").strip()
    s = re.sub(r"\s", "", s)
    s = "".join(chr(ord(c) - 0xFEE0) if "！" <= c <= "～" else c for c in s)
    return s.lower()


def build_header_map(header_row: Iterable[Any], aliases: HeaderAliases) -> dict[str, int]:
    """
    canonical field -> column index.

    For each field the alias list is walked in order; the first alias that
    matches any header cell decides the column.
    """
    normalized = [normalize_header(c) for c in header_row]
    out: dict[str, int] = {}
    for field, candidates in aliases.items():
        for alias in candidates:
            a = normalize_header(alias)
            if a and a in normalized:
                out[field] = normalized.index(a)
                break
    return out


def cell_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        # national ids / numbers typed into numeric cells come back as 123.0
        value = int(value)
    return str(value).strip()


def map_row(row: Iterable[Any], header_map: dict[str, int]) -> dict[str, str]:
    values = list(row)
    out: dict[str, str] = {}
    for field, idx in header_map.items():
        out[field] = cell_str(values[idx]) if idx < len(values) else ""
    return out


def read_xlsx_rows(fileobj, aliases: HeaderAliases) -> list[dict[str, str]]:
    """
    Read the first worksheet; the first row is the header.

    Returns one canonical dict per non-empty data row.
    """
    raw = fileobj.read() if hasattr(fileobj, "read") else fileobj
    try:
        wb = load_workbook(BytesIO(raw), read_only=True, data_only=True)
    except Exception as e:
        raise ValidationError(f"Could not read the Excel file: {e}") from e

    try:
        ws = wb.worksheets[0]
        rows = list(ws.iter_rows(values_only=True))
    finally:
        wb.close()

    if not rows:
        return []

    header_map = build_header_map(rows[0], aliases)
    out: list[dict[str, str]] = []
    for row in rows[1:]:
        if not row or all(cell_str(c) == "" for c in row):
            continue
        out.append(map_row(row, header_map))
    return out
