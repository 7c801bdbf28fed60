"""File outputs: the survey spreadsheet and the sample JSON download."""
from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from bmt_survey.export.templates import EXPORT_HEADERS

logger = logging.getLogger(__name__)

SHEET_TITLE = "BMT Survey Data"
MAX_COLUMN_WIDTH = 50
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
JSON_MIME = "application/json"
SAMPLE_FILENAME = "survey_sample.json"


@dataclass(frozen=True)
class ExportFile:
    """A generated download: file name, raw bytes and MIME type."""

    filename: str
    data: bytes
    mime: str

    def save(self, output_dir: Path) -> Path:
        """Write the file into a directory, creating it when missing."""

        target = output_dir / self.filename
        ensure_output_dir(target)
        target.write_bytes(self.data)
        logger.debug("Wrote %s (%d bytes)", target, len(self.data))
        return target


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def export_filename(export_date: date) -> str:
    return f"BMT_Survey_Data_{export_date.isoformat()}.xlsx"


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def column_widths(rows: List[Dict[str, Any]], headers: List[str]) -> List[int]:
    """Width per column: longest of header or cell text plus padding, capped at 50."""

    widths: List[int] = []
    for header in headers:
        longest = max([len(header)] + [len(_cell_text(row.get(header))) for row in rows])
        widths.append(min(longest + 2, MAX_COLUMN_WIDTH))
    return widths


def build_workbook(rows: Iterable[Dict[str, Any]], headers: List[str] | None = None) -> Workbook:
    """Lay rows out on a single auto-sized sheet under a header row."""

    rows = list(rows)
    if not rows:
        raise ValueError("No data to export")

    headers = headers or EXPORT_HEADERS
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(headers)
    for row in rows:
        sheet.append([row.get(header) for header in headers])

    for index, width in enumerate(column_widths(rows, headers), start=1):
        sheet.column_dimensions[get_column_letter(index)].width = width
    return workbook


def workbook_bytes(rows: Iterable[Dict[str, Any]], headers: List[str] | None = None) -> bytes:
    """Serialize the survey workbook to ``.xlsx`` bytes."""

    buffer = io.BytesIO()
    build_workbook(rows, headers).save(buffer)
    return buffer.getvalue()


def excel_export(rows: Iterable[Dict[str, Any]], export_date: date) -> ExportFile:
    """Return the dated spreadsheet download for the given rows."""

    return ExportFile(export_filename(export_date), workbook_bytes(rows), XLSX_MIME)


def sample_record(timestamp: datetime) -> Dict[str, Any]:
    """Fixed illustrative submission used by the sample download."""

    return {
        "salesperson_name": "John Doe",
        "physician_name": "Dr. Sarah Johnson",
        "facility_name": "City Medical Center",
        "facility_type": "hospital",
        "city": "Mumbai",
        "state": "Maharashtra",
        "monthly_bmt_patients": 25,
        "annual_bmt_patients": 300,
        "submission_date": timestamp.isoformat(),
    }


def sample_export(timestamp: datetime) -> ExportFile:
    """Return ``survey_sample.json``: a one-element list holding the sample record."""

    payload = json.dumps([sample_record(timestamp)], indent=2)
    return ExportFile(SAMPLE_FILENAME, payload.encode("utf-8"), JSON_MIME)
