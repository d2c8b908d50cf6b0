"""
utils/export.py — Spreadsheet export of report rows via polars.

Rows are plain dicts (column label → value). A single sheet or several named
sheets go to .xlsx (polars' write_excel over an xlsxwriter workbook); one
sheet can also go to .csv.

Usage:
    from notary_client.utils.export import export_to_excel, records_to_rows

    rows = records_to_rows(page.items)
    export_to_excel(rows, "ho-so", sheet_name="Hồ sơ")     # → ho-so.xlsx
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

import polars as pl
import structlog
import xlsxwriter

from notary_shared.models import Record
from notary_shared.time_utils import format_date_vi

log = structlog.get_logger(__name__)

RECORD_STATUS_LABELS: dict[str, str] = {
    "PENDING": "Chờ duyệt",
    "APPROVED": "Đã duyệt",
    "REJECTED": "Từ chối",
}


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------

def format_currency_for_export(value: Any) -> str:
    """1234567.89 → '1.234.568 ₫'; None/NaN/non-numeric → '0 ₫'."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "0 ₫"
    if math.isnan(number) or math.isinf(number):
        return "0 ₫"
    rounded = int(round(number))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{abs(rounded):,} ₫".replace(",", ".")


def format_date_for_export(value: date | datetime | str | None) -> str:
    """dd/mm/yyyy, or '-' for missing or invalid dates."""
    if value is not None and not isinstance(value, (date, datetime, str)):
        return "-"
    return format_date_vi(value)


def prepare_chart_data(
    data: Iterable[dict[str, Any]],
    x_field: str,
    y_field: str,
    additional_fields: Sequence[str] | None = None,
) -> list[dict[str, Any]]:
    """Project each item onto x, y and any extra fields; missing keys become None."""
    fields = [x_field, y_field, *(additional_fields or ())]
    return [{f: item.get(f) for f in fields} for item in data]


def records_to_rows(records: Iterable[Record]) -> list[dict[str, Any]]:
    return [
        {
            "Mã hồ sơ": r.id,
            "Tiêu đề": r.title,
            "Khách hàng": r.customer.full_name if r.customer else "",
            "Loại hồ sơ": r.type.name if r.type else "",
            "Trạng thái": RECORD_STATUS_LABELS.get(r.status, r.status),
            "Ghi chú duyệt": r.review_notes or "",
            "Ngày tạo": format_date_for_export(r.created_at),
        }
        for r in records
    ]


# ---------------------------------------------------------------------------
# Writers
# ---------------------------------------------------------------------------

def _frame(rows: Sequence[dict[str, Any]]) -> pl.DataFrame:
    if not rows:
        return pl.DataFrame()
    return pl.from_dicts(list(rows), infer_schema_length=None)


def _with_suffix(filename: str | Path, suffix: str) -> Path:
    path = Path(filename)
    return path if path.suffix == suffix else path.with_name(path.name + suffix)


def export_to_excel(
    rows: Sequence[dict[str, Any]],
    filename: str | Path,
    sheet_name: str = "Sheet1",
) -> Path:
    return export_sheets_to_excel([(sheet_name, rows)], filename)


def export_sheets_to_excel(
    sheets: Sequence[tuple[str, Sequence[dict[str, Any]]]],
    filename: str | Path,
) -> Path:
    """One worksheet per (name, rows) pair, in order."""
    path = _with_suffix(filename, ".xlsx")
    path.parent.mkdir(parents=True, exist_ok=True)
    with xlsxwriter.Workbook(str(path)) as workbook:
        for name, rows in sheets:
            if not rows:
                workbook.add_worksheet(name)
                continue
            _frame(rows).write_excel(workbook=workbook, worksheet=name, autofit=True)
    log.info("export_written", path=str(path), sheets=len(sheets),
             rows=sum(len(rows) for _, rows in sheets))
    return path


def export_to_csv(rows: Sequence[dict[str, Any]], filename: str | Path) -> Path:
    path = _with_suffix(filename, ".csv")
    path.parent.mkdir(parents=True, exist_ok=True)
    _frame(rows).write_csv(path)
    log.info("export_written", path=str(path), rows=len(rows))
    return path
