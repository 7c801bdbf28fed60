"""Export destinations for survey records."""
from bmt_survey.export.sinks import (
    ExportFile,
    build_workbook,
    ensure_output_dir,
    excel_export,
    export_filename,
    sample_export,
)
from bmt_survey.export.templates import EXPORT_HEADERS, record_to_export_row, records_to_export_rows

__all__ = [
    "EXPORT_HEADERS",
    "ExportFile",
    "build_workbook",
    "ensure_output_dir",
    "excel_export",
    "export_filename",
    "record_to_export_row",
    "records_to_export_rows",
    "sample_export",
]
