"""
Export of a filtered booking collection to PDF or spreadsheet.

Both formats share one fixed four-column schema and one row per record,
in collection order. The caller passes the filtered collection, never a
single page. An empty collection still yields a valid file with headers.
"""

import logging
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Iterable, Optional, Union

from fpdf import FPDF
from fpdf.fonts import FontFace
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from autoservice.config import settings
from autoservice.schemas.booking_schema import BookingRecord

logger = logging.getLogger(__name__)

EXPORT_COLUMNS: tuple[str, ...] = ("Customer", "Service", "Date", "Status")

# Relative widths; fpdf2 scales them to the page's printable width.
PDF_COLUMN_WIDTHS: tuple[float, ...] = (55, 60, 35, 40)
PDF_LINE_HEIGHT = 6
PDF_HEADINGS_STYLE = FontFace(emphasis="BOLD", fill_color=(245, 246, 248))


class ExportFormat(str, Enum):
    PDF = "pdf"
    EXCEL = "excel"


def export_rows(records: Iterable[BookingRecord]) -> list[tuple[str, str, str, str]]:
    """Project records onto the export columns."""
    return [
        (
            record.customer_name or "",
            record.service or "",
            record.date.isoformat() if record.date else "",
            record.status or "",
        )
        for record in records
    ]


def _pdf_safe_text(text: str) -> str:
    return str(text).encode("latin-1", "replace").decode("latin-1")


def render_pdf(records: Iterable[BookingRecord], title: Optional[str] = None) -> bytes:
    """Build the tabular PDF document and return its bytes.

    Long values wrap inside their cell, and the heading row is repeated
    at the top of every page the table spills onto.
    """
    rows = export_rows(records)

    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 10, _pdf_safe_text(title or settings.export.title), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)

    pdf.set_font("Helvetica", "", 10)
    with pdf.table(
        col_widths=PDF_COLUMN_WIDTHS,
        line_height=PDF_LINE_HEIGHT,
        text_align="LEFT",
        headings_style=PDF_HEADINGS_STYLE,
        repeat_headings=1,
    ) as table:
        table.row(EXPORT_COLUMNS)
        for values in rows:
            table.row([_pdf_safe_text(value) for value in values])

    return bytes(pdf.output())


def render_xlsx(records: Iterable[BookingRecord], title: Optional[str] = None) -> bytes:
    """Build the spreadsheet workbook and return its bytes."""
    rows = export_rows(records)

    workbook = Workbook()
    sheet = workbook.active
    # Excel caps sheet titles at 31 characters
    sheet.title = (title or settings.export.title)[:31]
    sheet.append(EXPORT_COLUMNS)
    for cell in sheet[1]:
        cell.font = Font(bold=True)
        cell.fill = PatternFill("solid", fgColor="F5F6F8")
    for row in rows:
        sheet.append(row)
        # openpyxl stores "=..." as a formula; customer text must stay text.
        for cell in sheet[sheet.max_row]:
            cell.data_type = "s"

    for index, column in enumerate(EXPORT_COLUMNS):
        longest = max([len(column)] + [len(row[index]) for row in rows])
        sheet.column_dimensions[get_column_letter(index + 1)].width = min(longest + 2, 60)
    sheet.freeze_panes = "A2"

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def export_filename(export_format: ExportFormat) -> str:
    if export_format is ExportFormat.PDF:
        return settings.export.pdf_filename
    return settings.export.excel_filename


def export_as(
    export_format: Union[str, ExportFormat],
    records: Iterable[BookingRecord],
    output_dir: Optional[Path] = None,
) -> Path:
    """
    Write the export artifact for ``records`` and return its path.

    Args:
        export_format: "pdf" or "excel".
        records: The filtered collection, in display order.
        output_dir: Directory for the artifact (default: configured export dir).

    Raises:
        ValueError: If the format is not supported.
    """
    try:
        fmt = ExportFormat(export_format)
    except ValueError:
        raise ValueError(f"Unsupported format: {export_format}") from None

    records = list(records)
    content = render_pdf(records) if fmt is ExportFormat.PDF else render_xlsx(records)

    directory = Path(output_dir) if output_dir is not None else Path(settings.export.export_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(fmt)
    path.write_bytes(content)
    logger.info("Exported %d bookings to %s", len(records), path)
    return path
