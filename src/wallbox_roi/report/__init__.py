"""Report layer — formatting, yearly table, PDF document and delivery stub."""

from wallbox_roi.report.formatting import (
    format_currency,
    format_number,
    format_percentage,
    format_years,
)
from wallbox_roi.report.table import build_yearly_table, yearly_table_csv
from wallbox_roi.report.pdf import build_pdf_report
from wallbox_roi.report.delivery import send_report_via_email

__all__ = [
    "format_currency",
    "format_number",
    "format_percentage",
    "format_years",
    "build_yearly_table",
    "yearly_table_csv",
    "build_pdf_report",
    "send_report_via_email",
]
